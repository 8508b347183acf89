"""Tests for GridDefinitionSession and define_grid"""

import pytest
from interpgrid.components.geometry import GridGeometry
from interpgrid.components.grid_session import GridDefinitionSession, define_grid
from interpgrid.core.enums import DialogAction, FieldName, GridMode
from interpgrid.core.exceptions import MissingFieldsError
from interpgrid.models.grid_descriptor import GridDescriptor
from interpgrid.models.i_grid_dialog import IGridDialog


class ScriptedDialog(IGridDialog):
    """Dialog replaying a list of steps; each step edits the session and returns an action"""

    def __init__(self, steps):
        self._steps = list(steps)
        self.errors = []

    def wait_for_action(self, session):
        step = self._steps.pop(0)
        return step(session)

    def show_error(self, error):
        self.errors.append(error)


@pytest.fixture
def session():
    return GridDefinitionSession()


class TestSeeding:
    """Tests for seeding a session from a prior descriptor"""

    def test_no_descriptor(self, session):
        assert session.mode == GridMode.DEFAULT
        assert all(text == "" for _, text in session.form.items())
        assert session.is_open

    def test_seed_resolution(self):
        session = GridDefinitionSession(GridDescriptor.from_resolution(5, 7))

        assert session.mode == GridMode.RESOLUTION
        assert session.field_text(FieldName.X_SPACING) == "5"
        assert session.field_text(FieldName.Y_SPACING) == "7"
        assert session.field_text(FieldName.ROWS) == ""

    def test_seed_explicit(self):
        geometry = GridGeometry(rows=50, cols=40, x_min=0, x_max=100, y_min=-2.5, y_max=100)
        session = GridDefinitionSession(GridDescriptor.from_geometry(geometry))

        assert session.mode == GridMode.EXPLICIT
        assert session.field_text(FieldName.ROWS) == "50"
        assert session.field_text(FieldName.COLS) == "40"
        assert session.field_text(FieldName.X_MIN) == "0"
        assert session.field_text(FieldName.Y_MIN) == "-2.5"
        assert session.field_text(FieldName.X_SPACING) == ""

    def test_seeded_session_commits_same_descriptor(self):
        descriptor = GridDescriptor.from_resolution(0.25, 7)
        session = GridDefinitionSession(descriptor)
        assert session.commit().descriptor == descriptor


class TestEditing:
    """Tests for mode switching and field edits"""

    def test_mode_switch_preserves_text(self, session):
        session.select_mode(GridMode.RESOLUTION)
        session.set_field(FieldName.X_SPACING, "10")
        session.set_field(FieldName.Y_SPACING, "20")

        session.select_mode(GridMode.EXPLICIT)
        session.select_mode(GridMode.RESOLUTION)

        assert session.field_text(FieldName.X_SPACING) == "10"
        assert session.field_text(FieldName.Y_SPACING) == "20"

    def test_set_field_sanitizes(self, session):
        session.select_mode(GridMode.EXPLICIT)
        assert session.set_field("rows", "1x2") == "12"
        assert session.set_field(FieldName.X_MIN, "-1.5a") == "-1.5"
        assert session.field_text(FieldName.ROWS) == "12"

    def test_set_disabled_field(self, session):
        with pytest.raises(ValueError) as exc_info:
            session.set_field(FieldName.X_SPACING, "10")
        assert "disabled" in str(exc_info.value)

    def test_set_unknown_field(self, session):
        with pytest.raises(ValueError):
            session.set_field("z_spacing", "10")


class TestCommitAndCancel:
    """Tests for terminal operations"""

    def test_failed_commit_keeps_session_open(self, session):
        session.select_mode(GridMode.RESOLUTION)
        session.set_field(FieldName.X_SPACING, "10")

        result = session.commit()

        assert isinstance(result.error, MissingFieldsError)
        assert session.is_open
        assert session.result is None

    def test_successful_commit_closes_session(self, session):
        result = session.commit()

        assert result.descriptor == GridDescriptor.default()
        assert not session.is_open
        assert session.result is result
        with pytest.raises(ValueError):
            session.select_mode(GridMode.EXPLICIT)
        with pytest.raises(ValueError):
            session.commit()

    @pytest.mark.parametrize("mode", list(GridMode))
    def test_cancel_from_any_mode(self, session, mode):
        session.select_mode(mode)
        for name in session.mode_state.active_fields:
            session.set_field(name, "-0")

        result = session.cancel()

        assert result.cancelled
        assert result.descriptor is None
        assert not session.is_open

    def test_cancel_twice(self, session):
        session.cancel()
        assert session.cancel().cancelled

    def test_cancel_after_commit_keeps_descriptor(self, session):
        session.commit()
        assert session.cancel().descriptor is None
        assert session.result.descriptor == GridDescriptor.default()


class TestRun:
    """Tests for the blocking dialog loop"""

    def test_retry_after_error(self):
        def first_attempt(session):
            session.select_mode(GridMode.RESOLUTION)
            session.set_field(FieldName.X_SPACING, "10")
            return DialogAction.COMMIT

        def second_attempt(session):
            session.set_field(FieldName.Y_SPACING, "20")
            return DialogAction.COMMIT

        dialog = ScriptedDialog([first_attempt, second_attempt])

        descriptor = define_grid(dialog)

        assert descriptor == GridDescriptor.from_resolution(10, 20)
        assert len(dialog.errors) == 1
        assert dialog.errors[0].message == "All grid spacing fields are required."

    def test_cancel_returns_none(self):
        prior = GridDescriptor.from_resolution(5, 7)

        def edit_and_cancel(session):
            session.select_mode(GridMode.DEFAULT)
            return DialogAction.CANCEL

        dialog = ScriptedDialog([edit_and_cancel])

        assert define_grid(dialog, prior) is None
        assert dialog.errors == []

    def test_action_by_value(self):
        dialog = ScriptedDialog([lambda session: "commit"])
        assert define_grid(dialog) == GridDescriptor.default()
