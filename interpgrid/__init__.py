"""Definition and validation of interpolation grids"""
from interpgrid.core import GridMode, FieldName, FieldKind
from interpgrid.components.field_coercion import FieldCoercion
from interpgrid.components.mode_state import ModeState, fields_for_mode
from interpgrid.components.geometry import GridGeometry, GridGeometryValidator
from interpgrid.components.grid_resolver import GridResolver
from interpgrid.components.grid_session import GridDefinitionSession, define_grid
from interpgrid.components.grid_builder import GridBuilder
from interpgrid.models import GridDescriptor, CommitResult, IGridDialog

__all__ = [
    "GridMode",
    "FieldName",
    "FieldKind",
    "FieldCoercion",
    "ModeState",
    "fields_for_mode",
    "GridGeometry",
    "GridGeometryValidator",
    "GridResolver",
    "GridDefinitionSession",
    "define_grid",
    "GridBuilder",
    "GridDescriptor",
    "CommitResult",
    "IGridDialog",
]
