"""Settings read from the environment at the service edge."""

import os
from dataclasses import dataclass

from carassist.reasoning.openai_client import DEFAULT_BASE_URL

DEFAULT_MODEL = "gpt-3.5-turbo-1106"
DEFAULT_TRANSCRIBE_MODEL = "whisper-1"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_NATS_URL = "nats://localhost:4222"
DEFAULT_SESSION_ID = "cockpit"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the cockpit service."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    transcribe_model: str = DEFAULT_TRANSCRIBE_MODEL
    language: str = "en"
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_turns: int | None = None
    nats_url: str = DEFAULT_NATS_URL
    session_id: str = DEFAULT_SESSION_ID

    @classmethod
    def from_env(cls) -> "Settings":
        max_turns = os.environ.get("CARASSIST_MAX_TURNS")
        return cls(
            api_key=os.environ.get("OPENAI_API_KEY", ""),
            base_url=os.environ.get("OPENAI_BASE_URL", DEFAULT_BASE_URL),
            model=os.environ.get("CARASSIST_MODEL", DEFAULT_MODEL),
            transcribe_model=os.environ.get(
                "CARASSIST_TRANSCRIBE_MODEL", DEFAULT_TRANSCRIBE_MODEL
            ),
            language=os.environ.get("CARASSIST_LANGUAGE", "en"),
            request_timeout=float(
                os.environ.get("CARASSIST_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
            ),
            max_turns=int(max_turns) if max_turns else None,
            nats_url=os.environ.get("NATS_URL", DEFAULT_NATS_URL),
            session_id=os.environ.get("CARASSIST_SESSION_ID", DEFAULT_SESSION_ID),
        )
