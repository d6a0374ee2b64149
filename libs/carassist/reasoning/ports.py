"""Outbound ports — interfaces for the external reasoning and speech services."""

from typing import Protocol, runtime_checkable

from carassist.models.conversation import DispatchRequest, DispatchResult


@runtime_checkable
class ReasoningClient(Protocol):
    """Picks vehicle actions for a conversation. Raises TransportError on failure."""

    async def send(self, request: DispatchRequest) -> DispatchResult: ...


@runtime_checkable
class Transcriber(Protocol):
    """Turns recorded audio into text. Raises TransportError on failure."""

    async def transcribe(self, audio: bytes) -> str: ...
