"""Car assistant — natural-language command dispatch for a simulated car dashboard."""

from carassist.client.nats_client import VehicleBusClient
from carassist.config import Settings
from carassist.dispatcher import (
    CommandDispatcher,
    DispatcherState,
    DispatchReport,
    Transcript,
)
from carassist.errors import (
    CarAssistError,
    DispatcherBusyError,
    TransportError,
    UnknownActionError,
)
from carassist.helpers.factory import (
    create_command,
    create_message,
    parse_message,
    parse_payload,
)
from carassist.helpers.topic_map import topic_for_type
from carassist.helpers.validation import validate_message
from carassist.models.conversation import (
    ConversationTurn,
    DispatchRequest,
    DispatchResult,
    FunctionCall,
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
from carassist.reasoning import (
    OpenAIChatClient,
    ReasoningClient,
    Transcriber,
    WhisperTranscriber,
)
from carassist.vehicle import (
    ACTIONS,
    MODE_TUNING,
    ActionKind,
    ActionOutcome,
    ActionRegistry,
    ActionSpec,
    DoorPosition,
    DrivingMode,
    LoggingVehicleEffects,
    ModeTuning,
    VehicleEffects,
    VehicleState,
    get_action,
    is_valid_action,
)

__all__ = [
    # Client
    "VehicleBusClient",
    # Dispatcher
    "CommandDispatcher",
    "DispatchReport",
    "DispatcherState",
    "Settings",
    "Transcript",
    # Vehicle
    "ACTIONS",
    "ActionKind",
    "ActionOutcome",
    "ActionRegistry",
    "ActionSpec",
    "DoorPosition",
    "DrivingMode",
    "LoggingVehicleEffects",
    "MODE_TUNING",
    "ModeTuning",
    "VehicleEffects",
    "VehicleState",
    # Reasoning
    "OpenAIChatClient",
    "ReasoningClient",
    "Transcriber",
    "WhisperTranscriber",
    # Errors
    "CarAssistError",
    "DispatcherBusyError",
    "TransportError",
    "UnknownActionError",
    # Models
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
    "MessageType",
    "PAYLOAD_REGISTRY",
    "Role",
    "ToolCall",
    "ToolDefinition",
    "Topics",
    "Utterance",
    "VehicleStatus",
    # Helpers
    "create_command",
    "create_message",
    "from_nats_subject",
    "get_action",
    "is_valid_action",
    "parse_message",
    "parse_payload",
    "to_nats_subject",
    "topic_for_type",
    "validate_message",
]
