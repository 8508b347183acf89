"""Base classes for checks run over parsed grid fields at commit time"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from interpgrid.core.exceptions import ValidationError


class ValidationResult:
    """Outcome of checking parsed grid fields"""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        """
        Initialize validation result.

        Args:
            is_valid: Whether the fields passed the check
            errors: Commit errors found, in field order
        """
        self._is_valid = is_valid and not errors
        self._errors = errors or []

    @property
    def is_valid(self) -> bool:
        """Check if the fields can be committed"""
        return self._is_valid

    @property
    def errors(self) -> List[ValidationError]:
        """Get commit errors found by the check"""
        return self._errors

    @property
    def first_error(self) -> Optional[ValidationError]:
        """Get the error to report to the user, if any"""
        return self._errors[0] if self._errors else None

    def add_error(self, error: ValidationError) -> None:
        """
        Record a commit error; the result becomes invalid.

        Args:
            error: Error to show the user
        """
        self._errors.append(error)
        self._is_valid = False


class BaseValidator(ABC):
    """Check over one group of grid fields (spacing or geometry)"""

    @abstractmethod
    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Check parsed field values.

        Args:
            value: Dict of FieldName to parsed number, None where the text was empty or malformed
            context: Optional extra information for the check

        Returns:
            ValidationResult holding the commit errors, if any
        """
        pass
