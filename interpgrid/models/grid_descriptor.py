"""
Grid Descriptor Model

Resolved definition of how an interpolation grid is to be built:
a definition mode plus the parameters that mode needs.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from interpgrid.components.geometry.grid_geometry import GridGeometry
from interpgrid.core.enums import GridMode


@dataclass(frozen=True)
class GridDescriptor:
    """
    Immutable grid descriptor

    - DEFAULT: neither resolution nor geometry (100 x 100 over the point extent)
    - RESOLUTION: resolution = (dx, dy), cell spacing over the point extent
    - EXPLICIT: geometry = explicit rows, cols and bounds
    """
    mode: GridMode = GridMode.DEFAULT
    resolution: Optional[Tuple[float, float]] = None
    geometry: Optional[GridGeometry] = None

    def __post_init__(self):
        object.__setattr__(self, "mode", GridMode(self.mode))

        if self.resolution is not None:
            dx, dy = self.resolution
            dx, dy = float(dx), float(dy)
            if not (math.isfinite(dx) and math.isfinite(dy) and dx > 0 and dy > 0):
                raise ValueError(f"Grid spacing must be finite and positive, got ({dx}, {dy})")
            object.__setattr__(self, "resolution", (dx, dy))

        has_resolution = self.resolution is not None
        has_geometry = self.geometry is not None

        if self.mode == GridMode.RESOLUTION and (not has_resolution or has_geometry):
            raise ValueError("Resolution mode requires resolution and no geometry")
        if self.mode == GridMode.EXPLICIT and (not has_geometry or has_resolution):
            raise ValueError("Explicit mode requires geometry and no resolution")
        if self.mode == GridMode.DEFAULT and (has_resolution or has_geometry):
            raise ValueError("Default mode takes neither resolution nor geometry")

    @classmethod
    def default(cls) -> "GridDescriptor":
        return cls(GridMode.DEFAULT)

    @classmethod
    def from_resolution(cls, dx: float, dy: float) -> "GridDescriptor":
        return cls(GridMode.RESOLUTION, resolution=(dx, dy))

    @classmethod
    def from_geometry(cls, geometry: GridGeometry) -> "GridDescriptor":
        return cls(GridMode.EXPLICIT, geometry=geometry)
