"""
Grid Definition Constants

Centralized location for default grid sizes and user-facing messages.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GridConstants:
    """
    Immutable constants for grid definition (Immutable Object Pattern)
    """

    # Default mode: point-data extent split into DEFAULT_ROWS x DEFAULT_COLS cells
    DEFAULT_ROWS: int = 100
    DEFAULT_COLS: int = 100

    DIALOG_TITLE: str = "Interpolation Grid"
    ERROR_TITLE: str = "Error"

    MISSING_SPACING_MESSAGE: str = "All grid spacing fields are required."
    MISSING_GEOMETRY_MESSAGE: str = "All grid geometry fields are required."
    INVALID_SPACING_MESSAGE: str = "Problem with grid spacing."
    INVALID_GEOMETRY_MESSAGE: str = "Problem with grid geometry."

    @classmethod
    def default_shape(cls) -> tuple[int, int]:
        """Get (rows, cols) used when the grid is defined by defaults"""
        return cls.DEFAULT_ROWS, cls.DEFAULT_COLS


# Singleton instance for easy access
GRID_CONSTANTS = GridConstants()
