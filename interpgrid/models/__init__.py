from interpgrid.models.grid_descriptor import GridDescriptor
from interpgrid.models.grid_form_values import GridFormValues
from interpgrid.models.commit_result import CommitResult
from interpgrid.models.i_grid_dialog import IGridDialog
from interpgrid.models.grid_schema import GridDescriptorSchema, GridGeometrySchema

__all__ = [
    "GridDescriptor",
    "GridFormValues",
    "CommitResult",
    "IGridDialog",
    "GridDescriptorSchema",
    "GridGeometrySchema",
]
