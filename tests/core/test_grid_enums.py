"""Unit tests for core enums and constants"""

import dataclasses

import pytest
from interpgrid.core.enums import (
    GridMode, FieldKind, FieldName, DialogAction,
    RESOLUTION_FIELDS, GEOMETRY_FIELDS, FIELD_KINDS, FIELD_LABELS, MODE_LABELS
)
from interpgrid.core.grid_constants import GRID_CONSTANTS, GridConstants


class TestGridMode:
    """Tests for GridMode enum"""

    def test_modes_exist(self):
        assert GridMode.DEFAULT.value == "default"
        assert GridMode.RESOLUTION.value == "resolution"
        assert GridMode.EXPLICIT.value == "explicit"

    def test_mode_by_value(self):
        assert GridMode("explicit") == GridMode.EXPLICIT

    def test_every_mode_has_label(self):
        assert set(MODE_LABELS) == set(GridMode)


class TestFieldTables:
    """Tests for field groups and per-field tables"""

    def test_groups_cover_all_fields_once(self):
        assert len(RESOLUTION_FIELDS) == 2
        assert len(GEOMETRY_FIELDS) == 6
        assert set(RESOLUTION_FIELDS) | set(GEOMETRY_FIELDS) == set(FieldName)
        assert not set(RESOLUTION_FIELDS) & set(GEOMETRY_FIELDS)

    def test_counts_are_integer_fields(self):
        integer_fields = {name for name, kind in FIELD_KINDS.items() if kind == FieldKind.INTEGER}
        assert integer_fields == {FieldName.ROWS, FieldName.COLS}

    def test_every_field_has_kind_and_label(self):
        assert set(FIELD_KINDS) == set(FieldName)
        assert set(FIELD_LABELS) == set(FieldName)

    def test_dialog_actions(self):
        assert DialogAction("commit") == DialogAction.COMMIT
        assert DialogAction("cancel") == DialogAction.CANCEL


class TestGridConstants:
    """Tests for GridConstants"""

    def test_default_shape(self):
        assert GRID_CONSTANTS.default_shape() == (100, 100)

    def test_messages(self):
        assert GRID_CONSTANTS.MISSING_SPACING_MESSAGE == "All grid spacing fields are required."
        assert GRID_CONSTANTS.MISSING_GEOMETRY_MESSAGE == "All grid geometry fields are required."

    def test_constants_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GRID_CONSTANTS.DEFAULT_ROWS = 10
        assert GridConstants().DEFAULT_ROWS == 100
