"""Validation module for committed grid parameters"""
from interpgrid.validation.base import BaseValidator, ValidationResult
from interpgrid.validation.required_fields_validator import RequiredFieldsValidator
from interpgrid.validation.spacing_validator import SpacingValidator

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "RequiredFieldsValidator",
    "SpacingValidator",
]
