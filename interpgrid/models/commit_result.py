from dataclasses import dataclass
from typing import Optional

from interpgrid.core.exceptions import ValidationError
from interpgrid.models.grid_descriptor import GridDescriptor


@dataclass(frozen=True)
class CommitResult:
    """
    Outcome of a commit or cancel

    Exactly one of the following holds:
    - succeeded: descriptor is set
    - failed: error is set, the session stays open
    - cancelled: neither is set
    """
    descriptor: Optional[GridDescriptor] = None
    error: Optional[ValidationError] = None
    cancelled: bool = False

    @classmethod
    def success(cls, descriptor: GridDescriptor) -> "CommitResult":
        return cls(descriptor=descriptor)

    @classmethod
    def failure(cls, error: ValidationError) -> "CommitResult":
        return cls(error=error)

    @classmethod
    def cancel(cls) -> "CommitResult":
        return cls(cancelled=True)

    @property
    def is_valid(self) -> bool:
        """Check if the commit produced a descriptor"""
        return self.descriptor is not None

    @property
    def is_terminal(self) -> bool:
        """Check if the result ends the session"""
        return self.is_valid or self.cancelled
