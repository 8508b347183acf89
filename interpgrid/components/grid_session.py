"""Interactive grid definition session"""
import logging
from typing import Optional, Union

from interpgrid.components.field_coercion import FieldCoercion
from interpgrid.components.grid_resolver import GridResolver
from interpgrid.components.mode_state import ModeState
from interpgrid.core.enums import DialogAction, FieldName, GridMode, FIELD_KINDS
from interpgrid.models.commit_result import CommitResult
from interpgrid.models.grid_descriptor import GridDescriptor
from interpgrid.models.grid_form_values import GridFormValues
from interpgrid.models.i_grid_dialog import IGridDialog

logger = logging.getLogger(__name__)


class GridDefinitionSession:
    """
    Holds the form state of one grid definition dialog.

    The session owns the field text and the mode state. A failed commit
    leaves it open for correction; a successful commit or a cancel closes it.
    """

    def __init__(self, descriptor: Optional[GridDescriptor] = None):
        """
        Initialize session.

        Args:
            descriptor: Prior descriptor used to seed mode and field text
        """
        self._initial = descriptor
        self._mode_state = ModeState.from_descriptor(descriptor)
        self._form = GridFormValues.from_descriptor(descriptor)
        self._result: Optional[CommitResult] = None

    @property
    def mode(self) -> GridMode:
        return self._mode_state.mode

    @property
    def mode_state(self) -> ModeState:
        return self._mode_state

    @property
    def form(self) -> GridFormValues:
        return self._form

    @property
    def is_open(self) -> bool:
        """Check if the session still accepts edits"""
        return self._result is None or not self._result.is_terminal

    @property
    def result(self) -> Optional[CommitResult]:
        """Get the terminal result, once the session is closed"""
        return self._result

    def select_mode(self, mode: Union[GridMode, str]) -> None:
        """Switch definition mode; field text is kept"""
        self._ensure_open()
        self._mode_state.select(mode)

    def field_text(self, name: Union[FieldName, str]) -> str:
        return self._form[name]

    def set_field(self, name: Union[FieldName, str], text: str) -> str:
        """
        Store text typed into a field, filtered to its numeric kind.

        Args:
            name: Field being edited
            text: Current text of the field

        Returns:
            The text actually stored

        Raises:
            ValueError: If the field is unknown, disabled in the active mode,
                or the session is closed
        """
        self._ensure_open()
        name = FieldName(name)
        if not self._mode_state.is_active(name):
            raise ValueError(f"Field '{name.value}' is disabled in {self.mode.value} mode")

        cleaned = FieldCoercion.sanitize(text or "", FIELD_KINDS[name])
        self._form[name] = cleaned
        logger.debug(f"Field {name.value} = {cleaned!r}")
        return cleaned

    def commit(self) -> CommitResult:
        """
        Resolve the current form state.

        Returns:
            CommitResult; the session closes only if it holds a descriptor
        """
        self._ensure_open()
        result = GridResolver.commit(self._form, self.mode)
        if result.is_terminal:
            self._result = result
        return result

    def cancel(self) -> CommitResult:
        """Close the session without a descriptor. Never raises."""
        result = GridResolver.cancel()
        if self.is_open:
            self._result = result
        return result

    def run(self, dialog: IGridDialog) -> Optional[GridDescriptor]:
        """
        Block until the dialog commits valid input or cancels.

        Args:
            dialog: Presentation layer driving the session

        Returns:
            The committed descriptor, or None when cancelled
        """
        while self.is_open:
            action = DialogAction(dialog.wait_for_action(self))

            if action == DialogAction.CANCEL:
                self.cancel()
                break

            result = self.commit()
            if not result.is_valid:
                dialog.show_error(result.error)

        return self._result.descriptor

    def _ensure_open(self) -> None:
        if not self.is_open:
            raise ValueError("Grid definition session is closed")


def define_grid(dialog: IGridDialog, grid: Optional[GridDescriptor] = None) -> Optional[GridDescriptor]:
    """
    Let the user define the interpolation grid.

    Args:
        dialog: Presentation layer that collects the user's input
        grid: Current descriptor, used to seed the form

    Returns:
        New descriptor, or None if the user cancelled (keep the current one)
    """
    return GridDefinitionSession(grid).run(dialog)
