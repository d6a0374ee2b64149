from carassist.helpers.factory import (
    create_command,
    create_message,
    parse_message,
    parse_payload,
)
from carassist.helpers.topic_map import topic_for_type
from carassist.helpers.validation import validate_message

__all__ = [
    "create_command",
    "create_message",
    "parse_message",
    "parse_payload",
    "topic_for_type",
    "validate_message",
]
