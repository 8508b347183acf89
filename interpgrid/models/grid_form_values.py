from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from interpgrid.components.field_coercion import FieldCoercion
from interpgrid.core.enums import FieldName, GridMode
from interpgrid.models.grid_descriptor import GridDescriptor


@dataclass
class GridFormValues:
    """
    Committed text of the eight grid parameter fields

    Replaces Dict[str, str] with a type-safe class; unknown field names raise.
    """
    values: Dict[FieldName, str] = field(
        default_factory=lambda: {name: "" for name in FieldName}
    )

    @classmethod
    def from_descriptor(cls, descriptor: Optional[GridDescriptor]) -> "GridFormValues":
        """
        Seed field text from a prior descriptor.

        Only the parameters the descriptor carries are written; all other
        fields start empty.
        """
        form = cls()
        if descriptor is None:
            return form

        if descriptor.mode == GridMode.RESOLUTION:
            dx, dy = descriptor.resolution
            form[FieldName.X_SPACING] = FieldCoercion.format_value(dx)
            form[FieldName.Y_SPACING] = FieldCoercion.format_value(dy)
        elif descriptor.mode == GridMode.EXPLICIT:
            geometry = descriptor.geometry
            form[FieldName.COLS] = FieldCoercion.format_value(geometry.cols)
            form[FieldName.ROWS] = FieldCoercion.format_value(geometry.rows)
            form[FieldName.X_MIN] = FieldCoercion.format_value(geometry.x_min)
            form[FieldName.X_MAX] = FieldCoercion.format_value(geometry.x_max)
            form[FieldName.Y_MIN] = FieldCoercion.format_value(geometry.y_min)
            form[FieldName.Y_MAX] = FieldCoercion.format_value(geometry.y_max)

        return form

    def __getitem__(self, key: Union[FieldName, str]) -> str:
        """Get field text (dict-like access)"""
        return self.values[FieldName(key)]

    def __setitem__(self, key: Union[FieldName, str], text: str) -> None:
        """Set field text"""
        self.values[FieldName(key)] = "" if text is None else str(text)

    def get(self, key: Union[FieldName, str], default: str = "") -> str:
        return self.values.get(FieldName(key), default)

    def items(self):
        """Get field items in form order"""
        return ((name, self.values[name]) for name in FieldName)
