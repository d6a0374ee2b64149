"""Map outbound message types to their bus topics."""

from carassist.models.messages import MessageType
from carassist.models.topics import Topics

_TYPE_TOPIC: dict[MessageType, str] = {
    MessageType.COMMAND: Topics.COMMANDS,
    MessageType.UTTERANCE: Topics.UTTERANCES,
    MessageType.ACTION_EXECUTED: Topics.ACTIONS,
    MessageType.ASSISTANT_REPLY: Topics.ASSISTANT,
    MessageType.DISPATCH_FAILED: Topics.ERRORS,
    MessageType.VEHICLE_STATUS: Topics.STATUS,
}


def topic_for_type(msg_type: MessageType | str) -> str:
    """Return the topic a message of the given type is published on.

    Raises:
        ValueError: If the message type is unknown.
    """
    topic = _TYPE_TOPIC.get(MessageType(msg_type))
    if topic is None:
        raise ValueError(f"No topic for message type {msg_type!r}")
    return topic
