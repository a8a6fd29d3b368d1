"""
Schema Validation Components for mazegraph

This module provides JSON schema-based validation for maze layouts. A layout
describes the grid size, the default crossing weight, the walls and the
per-direction weight overrides of a maze, and optionally a start and an end
cell:

    {
        "width": 3,
        "height": 2,
        "default_weight": 1,
        "walls": [{"x": 0, "y": 0, "direction": "right"}],
        "weights": [{"x": 1, "y": 0, "direction": "below", "weight": 5}],
        "start": [0, 0],
        "end": [2, 1]
    }

Structural checks are delegated to jsonschema; coordinate bounds depend on
the declared size and are checked separately.
"""

from typing import Any, Dict, List

from jsonschema import Draft7Validator, validators

from ...core.exceptions import ValidationError
from .base import ValidationResult

DIRECTIONS = ["above", "below", "left", "right"]

# Draft 7 counts 2.0 as an integer; layouts must use real JSON integers
def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


_TYPE_CHECKER = Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer)
LayoutValidator = validators.extend(Draft7Validator, type_checker=_TYPE_CHECKER)

_CELL = {
    "x": {"type": "integer", "minimum": 0},
    "y": {"type": "integer", "minimum": 0},
    "direction": {"type": "string", "enum": DIRECTIONS},
}

_COORDINATES = {
    "type": "array",
    "items": {"type": "integer", "minimum": 0},
    "minItems": 2,
    "maxItems": 2,
}

MAZE_LAYOUT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "width": {"type": "integer", "minimum": 1},
        "height": {"type": "integer", "minimum": 1},
        "default_weight": {"type": "integer", "minimum": 0},
        "walls": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": _CELL,
                "required": ["x", "y", "direction"],
                "additionalProperties": False,
            },
        },
        "weights": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {**_CELL, "weight": {"type": "integer", "minimum": 0}},
                "required": ["x", "y", "direction", "weight"],
                "additionalProperties": False,
            },
        },
        "start": _COORDINATES,
        "end": _COORDINATES,
    },
    "required": ["width", "height"],
    "additionalProperties": False,
}


class SchemaValidator:
    """
    JSON Schema-based validator for maze layouts.

    Attributes:
        schema (Dict[str, Any]): The JSON schema layouts are checked against
    """

    def __init__(self, schema: Dict[str, Any] = MAZE_LAYOUT_SCHEMA):
        """
        Initialize the validator.

        Args:
            schema: JSON schema definition as a dictionary
        """
        LayoutValidator.check_schema(schema)
        self.schema = schema
        self._validator = LayoutValidator(schema)

    def validate_layout(self, data: Any) -> ValidationResult:
        """
        Validate a maze layout.

        Args:
            data: Decoded JSON layout

        Returns:
            ValidationResult containing every schema and bounds violation

        Example:
            >>> validator = SchemaValidator()
            >>> validator.validate_layout({"width": 2, "height": 2}).is_valid
            True
        """
        errors: List[str] = []
        found = self._validator.iter_errors(data)
        for error in sorted(found, key=lambda e: [str(part) for part in e.path]):
            location = "/".join(str(part) for part in error.path) or "<root>"
            errors.append(f"Schema validation failed at {location}: {error.message}")

        result = ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            context={"width": data.get("width"), "height": data.get("height")}
            if isinstance(data, dict)
            else None,
        )
        # Bounds depend on a well-formed width and height
        if result.is_valid:
            bounds = self._check_bounds(data)
            result = result.merge(ValidationResult(is_valid=not bounds, errors=bounds))
        return result

    @staticmethod
    def _check_bounds(data: Dict[str, Any]) -> List[str]:
        width, height = data["width"], data["height"]
        errors = []
        for key in ("walls", "weights"):
            for index, entry in enumerate(data.get(key, [])):
                if entry["x"] >= width or entry["y"] >= height:
                    errors.append(
                        f"{key}/{index}: cell ({entry['x']}, {entry['y']}) is outside "
                        f"the {width}x{height} maze"
                    )
        for key in ("start", "end"):
            if key in data:
                x, y = data[key]
                if x >= width or y >= height:
                    errors.append(f"{key}: cell ({x}, {y}) is outside the {width}x{height} maze")
        return errors


_default_validator = SchemaValidator()


def validate_maze_layout(data: Any) -> None:
    """
    Validate a maze layout, raising on the first report with errors.

    Raises:
        ValidationError: If the layout does not match the schema or names
            cells outside the grid
    """
    result = _default_validator.validate_layout(data)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))
