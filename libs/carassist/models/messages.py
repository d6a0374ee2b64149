"""Message types and payload models for the vehicle message bus."""

from enum import StrEnum

from pydantic import BaseModel, Field


class MessageType(StrEnum):
    """All message types on the vehicle bus."""

    COMMAND = "command"
    UTTERANCE = "utterance"
    ACTION_EXECUTED = "action_executed"
    ASSISTANT_REPLY = "assistant_reply"
    DISPATCH_FAILED = "dispatch_failed"
    VEHICLE_STATUS = "vehicle_status"


class ActionStatus(StrEnum):
    """What happened when the registry was asked to run an action."""

    EXECUTED = "executed"
    NO_OP = "no_op"
    UNKNOWN = "unknown"


class Command(BaseModel):
    """Inbound text command for the dashboard assistant."""

    text: str
    source: str = "text"


class Utterance(BaseModel):
    """A user utterance accepted by the dispatcher."""

    text: str = Field(min_length=1)


class ActionExecuted(BaseModel):
    """One action requested by the reasoning service, after execution."""

    action: str
    call_id: str | None = None
    status: ActionStatus
    message: str | None = None


class AssistantReply(BaseModel):
    """The outcome of one utterance, as shown on the dashboard."""

    utterance: str
    text: str | None = None
    message: str | None = None
    actions: list[str] = Field(default_factory=list)


class DispatchFailed(BaseModel):
    """An utterance could not be dispatched."""

    utterance: str
    reason: str


class VehicleStatus(BaseModel):
    """Snapshot of the vehicle state for dashboard display."""

    doors: dict[str, bool]
    engine_on: bool
    vents_on: bool
    mode: str
    acceleration: float
    turn: float
    downforce: float
    max_speed: float
    kart_like: bool


# Registry mapping message types to their payload models
PAYLOAD_REGISTRY: dict[MessageType, type[BaseModel]] = {
    MessageType.COMMAND: Command,
    MessageType.UTTERANCE: Utterance,
    MessageType.ACTION_EXECUTED: ActionExecuted,
    MessageType.ASSISTANT_REPLY: AssistantReply,
    MessageType.DISPATCH_FAILED: DispatchFailed,
    MessageType.VEHICLE_STATUS: VehicleStatus,
}
