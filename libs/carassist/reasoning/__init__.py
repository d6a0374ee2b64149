"""Reasoning and transcription adapters."""

from carassist.reasoning.openai_client import (
    DEFAULT_BASE_URL,
    OpenAIChatClient,
    build_payload,
    parse_completion,
)
from carassist.reasoning.ports import ReasoningClient, Transcriber
from carassist.reasoning.whisper import WhisperTranscriber

__all__ = [
    "DEFAULT_BASE_URL",
    "OpenAIChatClient",
    "ReasoningClient",
    "Transcriber",
    "WhisperTranscriber",
    "build_payload",
    "parse_completion",
]
