"""Envelope checks applied to messages arriving from the bus."""

from pydantic import ValidationError

from carassist.helpers.topic_map import topic_for_type
from carassist.models.envelope import Envelope
from carassist.models.messages import PAYLOAD_REGISTRY
from carassist.models.topics import Topics

_SESSION_PREFIX = Topics.session("")


def validate_message(envelope: Envelope) -> list[str]:
    """Check sender, topic and payload of an envelope.

    An envelope must travel on the topic of its type or on a session inbox.
    Returns human-readable problems; an empty list means the envelope is valid.
    """
    errors: list[str] = []

    if not envelope.sender.strip():
        errors.append("'from' field must not be empty")

    topic = envelope.topic.strip()
    if not topic:
        errors.append("'topic' field must not be empty")
    elif topic != topic_for_type(envelope.type) and not topic.startswith(_SESSION_PREFIX):
        errors.append(f"'{envelope.type}' messages are not published on {topic}")

    try:
        PAYLOAD_REGISTRY[envelope.type].model_validate(envelope.payload)
    except ValidationError as e:
        errors.extend(
            f"payload.{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )

    return errors
