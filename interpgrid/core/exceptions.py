"""
Custom exceptions for the grid definition system.

This module defines exception classes for grid geometry construction
failures and for commit failures reported back to the user.
"""

from typing import Iterable, Optional

from interpgrid.core.enums import FieldName, ValidationErrorType
from interpgrid.core.grid_constants import GRID_CONSTANTS


class GridDefinitionException(Exception):
    """Base exception class for all grid definition errors"""
    pass


class GridGeometryError(GridDefinitionException):
    """
    Exception raised when grid parameters do not describe a constructible grid.

    Raised by GridGeometry construction; the message is the detail shown
    to the user.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class ValidationError(GridDefinitionException):
    """Commit failure carrying a short title, a message and an optional detail"""

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        detail: Optional[str] = None,
        title: str = GRID_CONSTANTS.ERROR_TITLE
    ):
        """
        Initialize validation error.

        Args:
            error_type: Type of validation error (enum)
            message: Human-readable error message
            detail: Additional detail, e.g. the geometry construction failure
            title: Short title for the error display
        """
        self.error_type = error_type
        self.message = message
        self.detail = detail
        self.title = title

        text = message
        if detail:
            text += f" {detail}"
        super().__init__(text)


class MissingFieldsError(ValidationError):
    """
    Raised when fields required by the active mode are empty or unparseable.
    """

    def __init__(self, message: str, fields: Optional[Iterable[FieldName]] = None):
        """
        Initialize MissingFieldsError.

        Args:
            message: Message naming the group of missing fields
            fields: Fields that were missing
        """
        self.fields = tuple(fields or ())
        super().__init__(ValidationErrorType.MISSING_FIELDS, message)


class InvalidGeometryError(ValidationError):
    """
    Raised when parsed grid parameters do not describe a valid grid.
    """

    def __init__(self, detail: str, message: str = GRID_CONSTANTS.INVALID_GEOMETRY_MESSAGE):
        """
        Initialize InvalidGeometryError.

        Args:
            detail: Underlying construction failure
            message: Summary message
        """
        super().__init__(ValidationErrorType.INVALID_GEOMETRY, message, detail=detail)
