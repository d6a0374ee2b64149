from carassist.models.conversation import (
    ConversationTurn,
    DispatchRequest,
    DispatchResult,
    FunctionCall,
    FunctionDefinition,
    Role,
    ToolCall,
    ToolDefinition,
)
from carassist.models.envelope import Envelope
from carassist.models.messages import (
    PAYLOAD_REGISTRY,
    ActionExecuted,
    ActionStatus,
    AssistantReply,
    Command,
    DispatchFailed,
    MessageType,
    Utterance,
    VehicleStatus,
)
from carassist.models.topics import Topics, from_nats_subject, to_nats_subject

__all__ = [
    "ActionExecuted",
    "ActionStatus",
    "AssistantReply",
    "Command",
    "ConversationTurn",
    "DispatchFailed",
    "DispatchRequest",
    "DispatchResult",
    "Envelope",
    "FunctionCall",
    "FunctionDefinition",
    "MessageType",
    "PAYLOAD_REGISTRY",
    "Role",
    "ToolCall",
    "ToolDefinition",
    "Topics",
    "Utterance",
    "VehicleStatus",
    "from_nats_subject",
    "to_nats_subject",
]
