"""Building envelopes for the vehicle bus and decoding them again."""

import json
from typing import Any

from pydantic import BaseModel

from carassist.models.envelope import Envelope
from carassist.models.messages import PAYLOAD_REGISTRY, Command, MessageType
from carassist.models.topics import Topics


def create_message(
    *,
    sender: str,
    topic: str,
    msg_type: MessageType,
    payload: BaseModel | dict[str, Any],
) -> Envelope:
    """Wrap a payload in an Envelope.

    Model payloads are dumped in JSON mode so enums travel as their values.
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    return Envelope(**{"from": sender}, topic=topic, type=msg_type, payload=payload)


def create_command(text: str, *, sender: str, source: str = "text") -> Envelope:
    """Envelope for a `command` addressed to the cockpit on `/vehicle/commands`."""
    return create_message(
        sender=sender,
        topic=Topics.COMMANDS,
        msg_type=MessageType.COMMAND,
        payload=Command(text=text, source=source),
    )


def parse_message(data: str | bytes | dict[str, Any]) -> Envelope:
    """Decode raw bus data (JSON bytes, JSON text or a dict) into an Envelope.

    Raises:
        ValueError: If the data is not valid JSON.
        ValidationError: If the data doesn't match the Envelope schema.
    """
    if isinstance(data, (bytes, str)):
        data = json.loads(data)
    return Envelope.model_validate(data)


def parse_payload(envelope: Envelope) -> BaseModel:
    """Validate an envelope's payload against the model registered for its type.

    Raises:
        ValueError: If no model is registered for the type.
        ValidationError: If the payload doesn't match the model.
    """
    model_class = PAYLOAD_REGISTRY.get(MessageType(envelope.type))
    if model_class is None:
        raise ValueError(f"No payload model for message type: {envelope.type}")
    return model_class.model_validate(envelope.payload)
