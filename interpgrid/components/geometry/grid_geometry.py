import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from shapely.geometry import Polygon as ShapelyPolygon, box as ShapelyBox

from interpgrid.core.exceptions import GridGeometryError


@dataclass(frozen=True)
class GridGeometry:
    """
    Rectangular grid of rows x cols cells over an axis-aligned extent

    Coordinate system:
    - X-axis: columns, increasing from x_min to x_max
    - Y-axis: rows, increasing from y_min to y_max
    - Row 0 is the top row (y_max edge), as in raster layouts
    """
    rows: int
    cols: int
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise GridGeometryError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if value <= 0:
                raise GridGeometryError(f"{name} must be greater than 0, got {value}")
            object.__setattr__(self, name, int(value))

        for name in ("x_min", "x_max", "y_min", "y_max"):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise GridGeometryError(f"{name} must be numeric, got {value!r}")
            if not math.isfinite(value):
                raise GridGeometryError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)

        if self.x_max <= self.x_min:
            raise GridGeometryError(
                f"invalid extent: x_max ({self.x_max:g}) must be greater than x_min ({self.x_min:g})"
            )
        if self.y_max <= self.y_min:
            raise GridGeometryError(
                f"invalid extent: y_max ({self.y_max:g}) must be greater than y_min ({self.y_min:g})"
            )

        # Extent can still collapse when bounds differ below float resolution of the area
        if self.extent.area <= 0 or not self.extent.is_valid:
            raise GridGeometryError(
                f"invalid extent: bounds {self.bounds} do not enclose a positive area"
            )

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get (x_min, x_max, y_min, y_max)"""
        return self.x_min, self.x_max, self.y_min, self.y_max

    @property
    def shape(self) -> Tuple[int, int]:
        """Get (rows, cols)"""
        return self.rows, self.cols

    @property
    def extent(self) -> ShapelyPolygon:
        """Get grid extent as a Shapely polygon"""
        return ShapelyBox(self.x_min, self.y_min, self.x_max, self.y_max)

    @property
    def x_resolution(self) -> float:
        """Get cell width"""
        return (self.x_max - self.x_min) / self.cols

    @property
    def y_resolution(self) -> float:
        """Get cell height"""
        return (self.y_max - self.y_min) / self.rows

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format"""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "x_min": self.x_min,
            "x_max": self.x_max,
            "y_min": self.y_min,
            "y_max": self.y_max,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridGeometry":
        """
        Create from dictionary

        Raises:
            KeyError: If a parameter is missing
            GridGeometryError: If the parameters do not describe a valid grid
        """
        return cls(
            rows=data["rows"],
            cols=data["cols"],
            x_min=data["x_min"],
            x_max=data["x_max"],
            y_min=data["y_min"],
            y_max=data["y_max"],
        )
