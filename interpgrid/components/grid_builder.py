import logging
import math
from typing import Tuple

import numpy as np
from shapely.geometry import MultiPoint

from interpgrid.components.geometry.grid_geometry import GridGeometry
from interpgrid.core.enums import GridMode
from interpgrid.core.grid_constants import GRID_CONSTANTS
from interpgrid.models.grid_descriptor import GridDescriptor

logger = logging.getLogger(__name__)


class GridBuilder:
    """
    Materializes a GridDescriptor against point data.

    Default and resolution modes take their boundaries from the extent of
    the points; explicit mode carries its own geometry.
    """

    @classmethod
    def build(cls, descriptor: GridDescriptor, points=None) -> GridGeometry:
        """
        Build the interpolation grid geometry.

        Args:
            descriptor: Resolved grid descriptor
            points: Array-like of shape (N, 2+) with x, y in the first columns;
                not read in explicit mode

        Returns:
            GridGeometry of the interpolation grid

        Raises:
            ValueError: If points are required but empty or malformed
            GridGeometryError: If the point extent is degenerate in default mode
        """
        if descriptor.mode == GridMode.EXPLICIT:
            return descriptor.geometry

        x_min, x_max, y_min, y_max = cls.point_extent(points)

        if descriptor.mode == GridMode.DEFAULT:
            rows, cols = GRID_CONSTANTS.default_shape()
        else:
            dx, dy = descriptor.resolution
            cols = max(1, math.ceil((x_max - x_min) / dx))
            rows = max(1, math.ceil((y_max - y_min) / dy))
            # Extend the far edges so cells have exactly the requested spacing
            x_max = x_min + cols * dx
            y_max = y_min + rows * dy

        geometry = GridGeometry(
            rows=rows, cols=cols,
            x_min=x_min, x_max=x_max,
            y_min=y_min, y_max=y_max,
        )
        logger.info(
            f"Built {geometry.rows}x{geometry.cols} grid over "
            f"x [{geometry.x_min:g}, {geometry.x_max:g}], y [{geometry.y_min:g}, {geometry.y_max:g}]"
        )
        return geometry

    @staticmethod
    def point_extent(points) -> Tuple[float, float, float, float]:
        """
        Get the extent of point data.

        Args:
            points: Array-like of shape (N, 2+); rows with non-finite x or y are ignored

        Returns:
            (x_min, x_max, y_min, y_max)

        Raises:
            ValueError: If there is no finite point
        """
        if points is None:
            raise ValueError("Point data is required to build the grid")

        coords = np.asarray(points, dtype=float)
        if coords.ndim != 2 or coords.shape[1] < 2:
            raise ValueError(f"Points must have shape (N, 2), got {coords.shape}")

        coords = coords[:, :2]
        coords = coords[np.isfinite(coords).all(axis=1)]
        if len(coords) == 0:
            raise ValueError("Point data contains no finite coordinates")

        min_x, min_y, max_x, max_y = MultiPoint(coords).bounds
        return min_x, max_x, min_y, max_y
