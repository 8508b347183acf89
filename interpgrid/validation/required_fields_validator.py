"""Validator for required fields (SRP: validates only presence of parsed values)"""
from typing import Any, Dict, Iterable, Optional

from interpgrid.core.enums import FieldName
from interpgrid.core.exceptions import MissingFieldsError
from interpgrid.validation.base import BaseValidator, ValidationResult


class RequiredFieldsValidator(BaseValidator):
    """Validates that every required field parsed to a number"""

    def __init__(self, required_fields: Iterable[FieldName], message: str):
        """
        Initialize required fields validator.

        Args:
            required_fields: Fields that must hold a value
            message: Message reported when any of them is missing
        """
        self._required_fields = tuple(required_fields)
        self._message = message

    @property
    def required_fields(self):
        return self._required_fields

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate required fields are present.

        Args:
            value: Dict of field name to parsed number (None when missing)
            context: Optional context (unused)

        Returns:
            ValidationResult with a single MissingFieldsError naming every missing field
        """
        result = ValidationResult()

        # Type check - must be a dict
        if not isinstance(value, dict):
            raise TypeError(f"Parsed fields must be a dictionary, got {type(value).__name__}")

        missing = [field for field in self._required_fields if value.get(field) is None]

        if missing:
            result.add_error(MissingFieldsError(self._message, missing))

        return result
