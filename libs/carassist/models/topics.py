"""Topic path constants and NATS subject conversion.

Topics use `/` separators (e.g., `/vehicle/commands`),
while NATS uses `.` separators (e.g., `vehicle.commands`).
This module handles the conversion transparently.
"""


class Topics:
    """Topic paths of the vehicle message bus."""

    # Inbound
    COMMANDS = "/vehicle/commands"

    # Outbound dispatch events
    UTTERANCES = "/vehicle/utterances"
    ACTIONS = "/vehicle/actions"
    ASSISTANT = "/vehicle/assistant"
    ERRORS = "/vehicle/errors"
    STATUS = "/vehicle/status"

    @classmethod
    def session(cls, session_id: str) -> str:
        """Return the topic for a specific dispatcher session."""
        return f"/vehicle/session/{session_id}"

    @classmethod
    def all_topics(cls) -> list[str]:
        """Return all static topic paths."""
        return [
            cls.COMMANDS,
            cls.UTTERANCES,
            cls.ACTIONS,
            cls.ASSISTANT,
            cls.ERRORS,
            cls.STATUS,
        ]


def to_nats_subject(topic: str) -> str:
    """Convert a topic path to a NATS subject.

    `/vehicle/commands` → `vehicle.commands`
    """
    return topic.lstrip("/").replace("/", ".")


def from_nats_subject(subject: str) -> str:
    """Convert a NATS subject back to a topic path.

    `vehicle.commands` → `/vehicle/commands`
    """
    return "/" + subject.replace(".", "/")
