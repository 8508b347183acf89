from interpgrid.core.enums import (
    GridMode,
    FieldKind,
    FieldName,
    ValidationErrorType,
    DialogAction,
    LogLevel,
    RESOLUTION_FIELDS,
    GEOMETRY_FIELDS,
    FIELD_KINDS,
    FIELD_LABELS,
    MODE_LABELS,
)
from interpgrid.core.grid_constants import GridConstants, GRID_CONSTANTS
from interpgrid.core.exceptions import (
    GridDefinitionException,
    GridGeometryError,
    ValidationError,
    MissingFieldsError,
    InvalidGeometryError,
)

__all__ = [
    "GridMode",
    "FieldKind",
    "FieldName",
    "ValidationErrorType",
    "DialogAction",
    "LogLevel",
    "RESOLUTION_FIELDS",
    "GEOMETRY_FIELDS",
    "FIELD_KINDS",
    "FIELD_LABELS",
    "MODE_LABELS",
    "GridConstants",
    "GRID_CONSTANTS",
    "GridDefinitionException",
    "GridGeometryError",
    "ValidationError",
    "MissingFieldsError",
    "InvalidGeometryError",
]
