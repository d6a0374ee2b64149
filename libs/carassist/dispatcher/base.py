"""CommandDispatcher — turns utterances into vehicle actions via a reasoning service."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from pydantic import BaseModel

from carassist.config import DEFAULT_MODEL, DEFAULT_REQUEST_TIMEOUT, DEFAULT_SESSION_ID
from carassist.dispatcher.state import DispatcherState, DispatchReport
from carassist.dispatcher.transcript import Transcript
from carassist.errors import DispatcherBusyError, TransportError
from carassist.helpers.factory import create_message
from carassist.helpers.topic_map import topic_for_type
from carassist.models.conversation import ConversationTurn, DispatchRequest, DispatchResult
from carassist.models.envelope import Envelope
from carassist.models.messages import (
    ActionExecuted,
    AssistantReply,
    DispatchFailed,
    MessageType,
    Utterance,
)
from carassist.prompts import SYSTEM_PROMPT
from carassist.reasoning.ports import ReasoningClient, Transcriber
from carassist.vehicle.registry import ActionOutcome, ActionRegistry

logger = logging.getLogger(__name__)

DispatchObserver = Callable[[Envelope], Coroutine[Any, Any, None]]

# Utterances allowed to wait while another one is being handled
MAX_PENDING = 1


class CommandDispatcher:
    """Handles one utterance at a time for a single session.

    Each utterance is appended to the transcript, sent with the action
    catalogue to the reasoning service, and every returned tool call is
    executed through the registry and acknowledged with a tool-result turn.
    Observers receive an Envelope for every step.
    """

    def __init__(
        self,
        registry: ActionRegistry,
        client: ReasoningClient,
        *,
        transcriber: Transcriber | None = None,
        model: str = DEFAULT_MODEL,
        system_prompt: str | None = SYSTEM_PROMPT,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        max_turns: int | None = None,
        session_id: str = DEFAULT_SESSION_ID,
    ) -> None:
        self._registry = registry
        self._client = client
        self._transcriber = transcriber
        self._model = model
        self._request_timeout = request_timeout
        self._session_id = session_id
        self._transcript = Transcript(system_prompt, max_turns)
        self._state = DispatcherState.IDLE
        self._lock = asyncio.Lock()
        self._inflight = 0
        self._observers: list[DispatchObserver] = []

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def registry(self) -> ActionRegistry:
        return self._registry

    @property
    def session_id(self) -> str:
        return self._session_id

    def subscribe(self, observer: DispatchObserver) -> None:
        """Register an async callback receiving every dispatch event."""
        self._observers.append(observer)

    def unsubscribe(self, observer: DispatchObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    # --- Entry points ---

    async def handle(self, utterance: str) -> DispatchReport | None:
        """Dispatch one utterance. Returns None for empty input.

        Raises:
            DispatcherBusyError: If one utterance is running and another
                is already waiting.
        """
        text = utterance.strip()
        if not text:
            logger.debug("[%s] ignoring empty utterance", self._session_id)
            return None

        if self._inflight > MAX_PENDING:
            logger.warning("[%s] busy, rejecting: %s", self._session_id, text)
            raise DispatcherBusyError(text)

        self._inflight += 1
        try:
            async with self._lock:
                return await self._process(text)
        finally:
            self._inflight -= 1

    async def handle_audio(self, audio: bytes) -> DispatchReport | None:
        """Transcribe recorded speech and dispatch the recognized text."""
        if self._transcriber is None:
            raise RuntimeError("No transcriber configured")

        try:
            text = await asyncio.wait_for(
                self._transcriber.transcribe(audio), timeout=self._request_timeout
            )
        except asyncio.TimeoutError:
            logger.error("[%s] transcription timed out", self._session_id)
            return None
        except TransportError as e:
            logger.error("[%s] transcription failed: %s", self._session_id, e)
            return None

        if not text.strip():
            logger.warning("[%s] no speech detected in audio", self._session_id)
            return None

        logger.info("[%s] recognized: %r", self._session_id, text)
        return await self.handle(text)

    # --- Lifecycle ---

    async def _process(self, text: str) -> DispatchReport:
        self._transcript.append(ConversationTurn.user(text))
        self._state = DispatcherState.AWAITING_REASONING
        logger.info("[%s] user: %s", self._session_id, text)
        await self._emit(MessageType.UTTERANCE, Utterance(text=text))

        try:
            try:
                result = await self._request()
            except TransportError as e:
                logger.error("[%s] reasoning request failed: %s", self._session_id, e)
                await self._emit(
                    MessageType.DISPATCH_FAILED, DispatchFailed(utterance=text, reason=str(e))
                )
                return DispatchReport(utterance=text, error=str(e))

            self._state = DispatcherState.DISPATCHING
            outcomes = await self._dispatch(result)
        finally:
            self._state = DispatcherState.IDLE

        report = DispatchReport(
            utterance=text,
            reply=result.content or None,
            outcomes=outcomes,
            message=_display_message(result, outcomes),
        )
        if report.reply:
            logger.info("[%s] assistant: %s", self._session_id, report.reply)
        await self._emit(
            MessageType.ASSISTANT_REPLY,
            AssistantReply(
                utterance=text,
                text=report.reply,
                message=report.message,
                actions=report.actions,
            ),
        )
        await self._emit(MessageType.VEHICLE_STATUS, self._registry.state.to_status())
        return report

    async def _request(self) -> DispatchResult:
        request = DispatchRequest(
            model=self._model,
            messages=self._transcript.turns,
            tools=self._registry.tool_definitions(),
        )
        try:
            return await asyncio.wait_for(
                self._client.send(request), timeout=self._request_timeout
            )
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Reasoning request timed out after {self._request_timeout:.1f}s"
            ) from e

    async def _dispatch(self, result: DispatchResult) -> list[ActionOutcome]:
        """Record the assistant turn, then run and acknowledge each tool call in order."""
        if result.is_empty:
            logger.debug("[%s] dropping empty reply", self._session_id)
            return []

        self._transcript.append(result.to_turn())
        outcomes: list[ActionOutcome] = []
        for call in result.tool_calls:
            outcome = self._registry.execute(call.name)
            outcomes.append(outcome)
            self._transcript.append(ConversationTurn.tool_result(call))
            await self._emit(
                MessageType.ACTION_EXECUTED,
                ActionExecuted(
                    action=call.name,
                    call_id=call.id,
                    status=outcome.status,
                    message=outcome.message,
                ),
            )
        return outcomes

    async def _emit(self, msg_type: MessageType, payload: BaseModel) -> None:
        if not self._observers:
            return
        envelope = create_message(
            sender=self._session_id,
            topic=topic_for_type(msg_type),
            msg_type=msg_type,
            payload=payload,
        )
        for observer in list(self._observers):
            try:
                await observer(envelope)
            except Exception:
                logger.exception("[%s] observer failed on %s", self._session_id, msg_type)


def _display_message(result: DispatchResult, outcomes: list[ActionOutcome]) -> str | None:
    """Assistant text wins; otherwise the last action's confirmation."""
    if result.content:
        return result.content
    for outcome in reversed(outcomes):
        if outcome.message:
            return outcome.message
    return None
