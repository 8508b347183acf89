"""Grid descriptor serialization models using Pydantic for type safety and validation"""
from typing import Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from interpgrid.components.geometry.grid_geometry import GridGeometry
from interpgrid.core.enums import GridMode
from interpgrid.core.exceptions import GridGeometryError
from interpgrid.models.grid_descriptor import GridDescriptor


class GridGeometrySchema(BaseModel):
    """Explicit grid geometry"""
    rows: int = Field(..., gt=0, description="Number of rows (intervals along y-axis)")
    cols: int = Field(..., gt=0, description="Number of columns (intervals along x-axis)")
    x_min: float = Field(..., description="Minimum x-coordinate")
    x_max: float = Field(..., description="Maximum x-coordinate")
    y_min: float = Field(..., description="Minimum y-coordinate")
    y_max: float = Field(..., description="Maximum y-coordinate")

    @model_validator(mode="after")
    def check_constructible(self) -> "GridGeometrySchema":
        try:
            self.to_geometry()
        except GridGeometryError as e:
            raise ValueError(e.detail)
        return self

    def to_geometry(self) -> GridGeometry:
        return GridGeometry.from_dict(self.model_dump())

    @classmethod
    def from_geometry(cls, geometry: GridGeometry) -> "GridGeometrySchema":
        return cls(**geometry.to_dict())


class GridDescriptorSchema(BaseModel):
    """
    Grid descriptor model for loading and saving descriptors as JSON.

    Only the parameters matching the mode may be present.
    """
    mode: GridMode = Field(default=GridMode.DEFAULT, description="Grid definition mode")
    resolution: Optional[Tuple[float, float]] = Field(
        default=None,
        description="Grid spacing (dx, dy); resolution mode only"
    )
    geometry: Optional[GridGeometrySchema] = Field(
        default=None,
        description="Explicit grid geometry; explicit mode only"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "mode": "explicit",
                "geometry": {
                    "rows": 50,
                    "cols": 50,
                    "x_min": 0.0,
                    "x_max": 100.0,
                    "y_min": 0.0,
                    "y_max": 100.0
                }
            }
        }

    @model_validator(mode="after")
    def check_mode_fields(self) -> "GridDescriptorSchema":
        # GridDescriptor raises ValueError on bad spacing or fields that don't match the mode
        self.to_descriptor()
        return self

    def to_descriptor(self) -> GridDescriptor:
        """Convert to an immutable GridDescriptor"""
        geometry = self.geometry.to_geometry() if self.geometry is not None else None
        return GridDescriptor(self.mode, resolution=self.resolution, geometry=geometry)

    @classmethod
    def from_descriptor(cls, descriptor: GridDescriptor) -> "GridDescriptorSchema":
        geometry = None
        if descriptor.geometry is not None:
            geometry = GridGeometrySchema.from_geometry(descriptor.geometry)
        return cls(mode=descriptor.mode, resolution=descriptor.resolution, geometry=geometry)
