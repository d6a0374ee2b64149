"""Dispatcher lifecycle state and the per-utterance report."""

from dataclasses import dataclass, field
from enum import StrEnum

from carassist.vehicle.registry import ActionOutcome


class DispatcherState(StrEnum):
    """Where the dispatcher is in handling an utterance."""

    IDLE = "idle"
    AWAITING_REASONING = "awaiting_reasoning"
    DISPATCHING = "dispatching"


@dataclass
class DispatchReport:
    """What happened for one utterance."""

    utterance: str
    reply: str | None = None
    outcomes: list[ActionOutcome] = field(default_factory=list)
    message: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def actions(self) -> list[str]:
        """Action identifiers in the order they were executed."""
        return [outcome.action for outcome in self.outcomes]
