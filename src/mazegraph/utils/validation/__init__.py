"""
Validation package for mazegraph.

This package provides validation utilities for maze layouts loaded from JSON.
"""

from .base import ValidationResult
from .schema import MAZE_LAYOUT_SCHEMA, SchemaValidator, validate_maze_layout

__all__ = [
    "MAZE_LAYOUT_SCHEMA",
    "SchemaValidator",
    "ValidationResult",
    "validate_maze_layout",
]
