"""
Grid Dialog Interface

Defines the contract for presentation layers that drive a grid
definition session (window, console, test double).
"""
from abc import ABC, abstractmethod

from interpgrid.core.enums import DialogAction
from interpgrid.core.exceptions import ValidationError


class IGridDialog(ABC):
    """
    Interface for grid definition dialogs (Interface Segregation Principle)

    The dialog owns all user interaction: it edits the session (mode
    selection, field text) and reports which terminal action the user
    chose. It never validates input itself.
    """

    @abstractmethod
    def wait_for_action(self, session) -> DialogAction:
        """
        Block until the user commits or cancels.

        Args:
            session: GridDefinitionSession to edit while waiting

        Returns:
            DialogAction.COMMIT or DialogAction.CANCEL
        """
        pass

    @abstractmethod
    def show_error(self, error: ValidationError) -> None:
        """
        Display a failed commit to the user.

        Args:
            error: Validation error with title, message and optional detail
        """
        pass
