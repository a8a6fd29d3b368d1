"""
Base Validation Components for mazegraph

This module provides the ValidationResult container used to report the
outcome of a validation pass without raising, so that callers can collect
every problem at once before deciding how to fail.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """
    Container for validation results providing comprehensive validation outcome details.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results; the merged result is valid only if both are."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
            context={**(self.context or {}), **(other.context or {})},
        )
