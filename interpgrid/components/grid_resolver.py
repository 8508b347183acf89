"""Resolves committed form state into a grid descriptor (Strategy Pattern)"""
import logging
from typing import Callable, Dict, Mapping, Union

from interpgrid.components.field_coercion import FieldCoercion
from interpgrid.components.geometry.grid_geometry_validator import GridGeometryValidator
from interpgrid.core.enums import GridMode, FieldName, RESOLUTION_FIELDS, GEOMETRY_FIELDS
from interpgrid.core.exceptions import InvalidGeometryError
from interpgrid.core.grid_constants import GRID_CONSTANTS
from interpgrid.models.commit_result import CommitResult
from interpgrid.models.grid_descriptor import GridDescriptor
from interpgrid.validation import RequiredFieldsValidator, SpacingValidator

logger = logging.getLogger(__name__)

FormValues = Mapping[FieldName, str]


class GridResolver:
    """
    Turns field text and the active mode into a GridDescriptor or a rejection.

    Single Responsibility: route a commit to the resolution strategy of the
    active mode. Stateless implementation using class methods; only the
    fields the mode requires are ever read.
    """

    _SPACING_VALIDATOR = RequiredFieldsValidator(
        RESOLUTION_FIELDS, GRID_CONSTANTS.MISSING_SPACING_MESSAGE
    )
    _GEOMETRY_VALIDATOR = RequiredFieldsValidator(
        GEOMETRY_FIELDS, GRID_CONSTANTS.MISSING_GEOMETRY_MESSAGE
    )

    @classmethod
    def commit(cls, values: FormValues, mode: Union[GridMode, str]) -> CommitResult:
        """
        Resolve the current form state.

        Args:
            values: Field text keyed by field name
            mode: Active grid definition mode

        Returns:
            CommitResult holding the descriptor, or the validation error to display

        Raises:
            ValueError: If mode is not a known grid mode
        """
        mode = GridMode(mode)
        strategy = cls._strategies()[mode]
        result = strategy(values)

        if result.is_valid:
            logger.info(f"Grid resolved: {result.descriptor}")
        else:
            logger.warning(f"Grid commit rejected ({mode.value}): {result.error}")

        return result

    @classmethod
    def cancel(cls) -> CommitResult:
        """Dismiss without changing the descriptor"""
        logger.debug("Grid definition cancelled")
        return CommitResult.cancel()

    @classmethod
    def _strategies(cls) -> Dict[GridMode, Callable[[FormValues], CommitResult]]:
        return {
            GridMode.DEFAULT: cls._resolve_default,
            GridMode.RESOLUTION: cls._resolve_resolution,
            GridMode.EXPLICIT: cls._resolve_explicit,
        }

    @classmethod
    def _resolve_default(cls, values: FormValues) -> CommitResult:
        return CommitResult.success(GridDescriptor.default())

    @classmethod
    def _resolve_resolution(cls, values: FormValues) -> CommitResult:
        parsed = FieldCoercion.coerce_fields(values, RESOLUTION_FIELDS)

        for validator in (cls._SPACING_VALIDATOR, SpacingValidator()):
            validation = validator.validate(parsed)
            if not validation.is_valid:
                return CommitResult.failure(validation.first_error)

        return CommitResult.success(GridDescriptor.from_resolution(
            parsed[FieldName.X_SPACING],
            parsed[FieldName.Y_SPACING],
        ))

    @classmethod
    def _resolve_explicit(cls, values: FormValues) -> CommitResult:
        parsed = FieldCoercion.coerce_fields(values, GEOMETRY_FIELDS)

        validation = cls._GEOMETRY_VALIDATOR.validate(parsed)
        if not validation.is_valid:
            return CommitResult.failure(validation.first_error)

        geometry, error_msg = GridGeometryValidator.validate_geometry(
            rows=parsed[FieldName.ROWS],
            cols=parsed[FieldName.COLS],
            x_min=parsed[FieldName.X_MIN],
            x_max=parsed[FieldName.X_MAX],
            y_min=parsed[FieldName.Y_MIN],
            y_max=parsed[FieldName.Y_MAX],
        )
        if geometry is None:
            return CommitResult.failure(InvalidGeometryError(error_msg))

        return CommitResult.success(GridDescriptor.from_geometry(geometry))
