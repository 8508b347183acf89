import logging
from dataclasses import dataclass
from typing import FrozenSet, Union

from interpgrid.core.enums import GridMode, FieldName, RESOLUTION_FIELDS, GEOMETRY_FIELDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldActivation:
    """Fields that are editable (and required) vs. disabled in a mode"""
    active: FrozenSet[FieldName]
    disabled: FrozenSet[FieldName]


_ALL_FIELDS = frozenset(FieldName)

_ACTIVE_FIELDS = {
    GridMode.DEFAULT: frozenset(),
    GridMode.RESOLUTION: frozenset(RESOLUTION_FIELDS),
    GridMode.EXPLICIT: frozenset(GEOMETRY_FIELDS),
}


def fields_for_mode(mode: GridMode) -> FieldActivation:
    """
    Get the field activation for a definition mode.

    Args:
        mode: Grid definition mode

    Returns:
        FieldActivation with active and disabled field sets
    """
    active = _ACTIVE_FIELDS[GridMode(mode)]
    return FieldActivation(active=active, disabled=_ALL_FIELDS - active)


class ModeState:
    """
    Tracks the active grid definition mode.

    Changing mode only changes which fields are active; field text is
    owned elsewhere and is never cleared here.
    """

    def __init__(self, mode: Union[GridMode, str] = GridMode.DEFAULT):
        self._mode = GridMode(mode)

    @classmethod
    def from_descriptor(cls, descriptor) -> "ModeState":
        """Seed the state from a prior GridDescriptor (or None for defaults)"""
        if descriptor is None:
            return cls()
        return cls(descriptor.mode)

    @property
    def mode(self) -> GridMode:
        """Get active mode"""
        return self._mode

    @property
    def activation(self) -> FieldActivation:
        """Get field activation for the active mode"""
        return fields_for_mode(self._mode)

    @property
    def active_fields(self) -> FrozenSet[FieldName]:
        return self.activation.active

    @property
    def disabled_fields(self) -> FrozenSet[FieldName]:
        return self.activation.disabled

    def is_active(self, field: FieldName) -> bool:
        """Check whether a field is editable in the active mode"""
        return field in self.active_fields

    def select(self, mode: Union[GridMode, str]) -> GridMode:
        """
        Switch to another mode.

        Args:
            mode: Mode (or its value) chosen by the user

        Returns:
            The previous mode

        Raises:
            ValueError: If mode is not a known grid mode
        """
        previous = self._mode
        self._mode = GridMode(mode)
        if previous != self._mode:
            logger.debug(f"Grid mode changed: {previous.value} -> {self._mode.value}")
        return previous
