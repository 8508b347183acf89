from enum import Enum


class GridMode(Enum):
    """Ways of defining the interpolation grid"""
    DEFAULT = "default"
    RESOLUTION = "resolution"
    EXPLICIT = "explicit"


class FieldKind(Enum):
    """Numeric kind accepted by a form field"""
    INTEGER = "integer"
    REAL = "real"


class FieldName(Enum):
    """Grid parameter fields, in form order"""
    X_SPACING = "x_spacing"
    Y_SPACING = "y_spacing"
    COLS = "cols"
    ROWS = "rows"
    X_MIN = "x_min"
    X_MAX = "x_max"
    Y_MIN = "y_min"
    Y_MAX = "y_max"


class ValidationErrorType(Enum):
    """Types of commit failures"""
    MISSING_FIELDS = "missing_fields"
    INVALID_GEOMETRY = "invalid_geometry"


class DialogAction(Enum):
    """Terminal actions a dialog can hand back to a session"""
    COMMIT = "commit"
    CANCEL = "cancel"


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


RESOLUTION_FIELDS = (
    FieldName.X_SPACING,
    FieldName.Y_SPACING,
)

GEOMETRY_FIELDS = (
    FieldName.COLS,
    FieldName.ROWS,
    FieldName.X_MIN,
    FieldName.X_MAX,
    FieldName.Y_MIN,
    FieldName.Y_MAX,
)

FIELD_KINDS = {
    FieldName.X_SPACING: FieldKind.REAL,
    FieldName.Y_SPACING: FieldKind.REAL,
    FieldName.COLS: FieldKind.INTEGER,
    FieldName.ROWS: FieldKind.INTEGER,
    FieldName.X_MIN: FieldKind.REAL,
    FieldName.X_MAX: FieldKind.REAL,
    FieldName.Y_MIN: FieldKind.REAL,
    FieldName.Y_MAX: FieldKind.REAL,
}

FIELD_LABELS = {
    FieldName.X_SPACING: "Grid spacing along x-axis",
    FieldName.Y_SPACING: "Grid spacing along y-axis",
    FieldName.COLS: "Number of intervals along x-axis",
    FieldName.ROWS: "Number of intervals along y-axis",
    FieldName.X_MIN: "Minimum x-coordinate",
    FieldName.X_MAX: "Maximum x-coordinate",
    FieldName.Y_MIN: "Minimum y-coordinate",
    FieldName.Y_MAX: "Maximum y-coordinate",
}

MODE_LABELS = {
    GridMode.DEFAULT: "Defaults",
    GridMode.RESOLUTION: "Cell resolution",
    GridMode.EXPLICIT: "Explicit geometry",
}
