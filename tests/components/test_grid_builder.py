"""Unit tests for GridBuilder - materializing descriptors over point data"""

import numpy as np
import pytest
from interpgrid.components.geometry import GridGeometry
from interpgrid.components.grid_builder import GridBuilder
from interpgrid.core.exceptions import GridGeometryError
from interpgrid.models.grid_descriptor import GridDescriptor


@pytest.fixture
def points():
    return np.array([[0.0, 0.0], [9.0, 1.0], [4.0, 4.0]])


class TestGridBuilder:
    """Tests for GridBuilder.build"""

    def test_default_mode_uses_point_extent(self, points):
        geometry = GridBuilder.build(GridDescriptor.default(), points)

        assert geometry.shape == (100, 100)
        assert geometry.bounds == (0.0, 9.0, 0.0, 4.0)

    def test_resolution_mode_extends_extent(self, points):
        geometry = GridBuilder.build(GridDescriptor.from_resolution(2, 2), points)

        assert geometry.cols == 5
        assert geometry.rows == 2
        assert geometry.bounds == (0.0, 10.0, 0.0, 4.0)
        assert geometry.x_resolution == pytest.approx(2.0)
        assert geometry.y_resolution == pytest.approx(2.0)

    def test_resolution_mode_single_point(self):
        geometry = GridBuilder.build(GridDescriptor.from_resolution(1, 0.5), [[3.0, 4.0]])

        assert geometry.shape == (1, 1)
        assert geometry.bounds == (3.0, 4.0, 4.0, 4.5)

    def test_default_mode_single_point(self):
        with pytest.raises(GridGeometryError):
            GridBuilder.build(GridDescriptor.default(), [[3.0, 4.0]])

    def test_explicit_mode_ignores_points(self):
        geometry = GridGeometry(rows=5, cols=5, x_min=0, x_max=1, y_min=0, y_max=1)
        assert GridBuilder.build(GridDescriptor.from_geometry(geometry)) is geometry

    def test_extra_columns_and_non_finite_rows(self):
        data = [[0.0, 0.0, 10.0], [np.nan, 50.0, 1.0], [2.0, 2.0, 3.0]]
        assert GridBuilder.point_extent(data) == (0.0, 2.0, 0.0, 2.0)


class TestPointExtentErrors:
    """Tests for malformed point data"""

    def test_points_required(self):
        with pytest.raises(ValueError):
            GridBuilder.build(GridDescriptor.default())

    @pytest.mark.parametrize("data", [[1.0, 2.0, 3.0], [[1.0], [2.0]]])
    def test_bad_shape(self, data):
        with pytest.raises(ValueError) as exc_info:
            GridBuilder.point_extent(data)
        assert "shape" in str(exc_info.value)

    def test_no_finite_points(self):
        with pytest.raises(ValueError):
            GridBuilder.point_extent([[np.nan, 1.0]])

    def test_empty_points(self):
        with pytest.raises(ValueError):
            GridBuilder.point_extent(np.empty((0, 2)))
