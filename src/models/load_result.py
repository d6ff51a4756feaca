# src/models/load_result.py

"""Tagged outcome of a route loader or action."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class LoadState(Enum):
    """Lifecycle of a loader/action result."""

    PENDING = auto()
    RESOLVED = auto()
    FAILED = auto()


@dataclass
class LoadResult:
    """Outcome produced by the orchestrator and consumed once by a view.

    ``value`` is set when resolved (a Product or a list of them),
    ``reason`` when failed.
    """

    state: LoadState
    value: Any = None
    reason: str = ""
    _consumed: bool = field(default=False, repr=False, compare=False)

    @classmethod
    def pending(cls) -> "LoadResult":
        return cls(state=LoadState.PENDING)

    @classmethod
    def resolved(cls, value: Any) -> "LoadResult":
        return cls(state=LoadState.RESOLVED, value=value)

    @classmethod
    def failed(cls, reason: str) -> "LoadResult":
        return cls(state=LoadState.FAILED, reason=reason)

    @property
    def is_pending(self) -> bool:
        return self.state is LoadState.PENDING

    @property
    def ok(self) -> bool:
        return self.state is LoadState.RESOLVED

    def consume(self) -> "LoadResult":
        """Mark the result as applied; a second call raises RuntimeError."""
        if self.is_pending:
            raise RuntimeError("Cannot consume a pending result")
        if self._consumed:
            raise RuntimeError("Result was already consumed")
        self._consumed = True
        return self
