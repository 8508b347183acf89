"""Validator for grid spacing (SRP: validates only spacing values)"""
from typing import Any, Dict, Optional

from interpgrid.core.enums import FieldName, FIELD_LABELS
from interpgrid.core.exceptions import InvalidGeometryError
from interpgrid.core.grid_constants import GRID_CONSTANTS
from interpgrid.validation.base import BaseValidator, ValidationResult


class SpacingValidator(BaseValidator):
    """Validates that parsed grid spacings are positive"""

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate grid spacing.

        Args:
            value: Dict with parsed X_SPACING and Y_SPACING values
            context: Optional context (unused)

        Returns:
            ValidationResult with an InvalidGeometryError per non-positive spacing
        """
        result = ValidationResult()

        for field in (FieldName.X_SPACING, FieldName.Y_SPACING):
            spacing = value.get(field)
            if spacing is not None and spacing <= 0:
                result.add_error(InvalidGeometryError(
                    detail=f"{FIELD_LABELS[field]} must be greater than 0, got {spacing:g}",
                    message=GRID_CONSTANTS.INVALID_SPACING_MESSAGE
                ))

        return result
