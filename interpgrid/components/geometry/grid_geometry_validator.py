from typing import Optional, Tuple

from interpgrid.components.geometry.grid_geometry import GridGeometry
from interpgrid.core.exceptions import GridGeometryError


class GridGeometryValidator:
    """Validates that parsed grid parameters describe a constructible grid."""

    @classmethod
    def validate_geometry(
        cls,
        rows: int,
        cols: int,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float
    ) -> Tuple[Optional[GridGeometry], str]:
        """
        Build a normalized grid geometry from already-parsed numbers.

        Args:
            rows: Number of rows (intervals along y-axis)
            cols: Number of columns (intervals along x-axis)
            x_min, x_max: Limits along the x-axis
            y_min, y_max: Limits along the y-axis

        Returns:
            Tuple of (geometry, error_message)
            - (GridGeometry, "") if the parameters are valid
            - (None, error_message) describing the first violation otherwise
        """
        try:
            geometry = GridGeometry(
                rows=rows,
                cols=cols,
                x_min=x_min,
                x_max=x_max,
                y_min=y_min,
                y_max=y_max,
            )
        except GridGeometryError as e:
            return None, e.detail

        return geometry, ""
