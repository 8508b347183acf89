"""
Geometry module for interpolation grids.

This module provides the grid geometry value object and the validator
that decides whether parsed parameters describe a constructible grid.
"""

from interpgrid.components.geometry.grid_geometry import GridGeometry
from interpgrid.components.geometry.grid_geometry_validator import GridGeometryValidator

__all__ = [
    'GridGeometry',
    'GridGeometryValidator',
]
