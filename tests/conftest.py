"""Shared test fixtures."""

import asyncio
import os

import pytest
from carassist import (
    ActionRegistry,
    CommandDispatcher,
    DispatchRequest,
    DispatchResult,
    ModeTuning,
    ToolCall,
    VehicleBusClient,
)


class RecordingEffects:
    """VehicleEffects fake that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def trigger_animation(self, trigger: str) -> None:
        self.calls.append(("animation", trigger))

    def apply_tuning(self, tuning: ModeTuning) -> None:
        self.calls.append(("tuning", tuning))

    def start_engine(self) -> None:
        self.calls.append(("engine", "start"))

    def stop_engine(self) -> None:
        self.calls.append(("engine", "stop"))

    def start_vents(self) -> None:
        self.calls.append(("vents", "start"))

    def stop_vents(self) -> None:
        self.calls.append(("vents", "stop"))

    def count(self, kind: str, value: object) -> int:
        return self.calls.count((kind, value))


class ScriptedReasoningClient:
    """ReasoningClient fake: answers requests from a queue and records them.

    A queued exception is raised instead of returned. An empty queue
    answers with an empty result.
    """

    def __init__(self) -> None:
        self.requests: list[DispatchRequest] = []
        self._replies: list[DispatchResult | Exception] = []
        self.delay = 0.0
        self._calls = 0

    def queue(self, reply: DispatchResult | Exception) -> None:
        self._replies.append(reply)

    def queue_actions(self, *actions: str, text: str | None = None) -> None:
        calls = []
        for name in actions:
            self._calls += 1
            calls.append(ToolCall.for_action(name, f"call_{self._calls}"))
        self._replies.append(DispatchResult(content=text, tool_calls=calls))

    async def send(self, request: DispatchRequest) -> DispatchResult:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        reply = self._replies.pop(0) if self._replies else DispatchResult()
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def effects() -> RecordingEffects:
    return RecordingEffects()


@pytest.fixture
def registry(effects: RecordingEffects) -> ActionRegistry:
    return ActionRegistry(effects)


@pytest.fixture
def reasoning() -> ScriptedReasoningClient:
    return ScriptedReasoningClient()


@pytest.fixture
def dispatcher(
    registry: ActionRegistry, reasoning: ScriptedReasoningClient
) -> CommandDispatcher:
    return CommandDispatcher(registry, reasoning, session_id="test-car")


@pytest.fixture
def nats_url() -> str:
    return os.environ.get("NATS_URL", "nats://localhost:4222")


@pytest.fixture
async def bus_client(nats_url: str) -> VehicleBusClient:
    """Provide a connected VehicleBusClient, cleaned up after use."""
    client = VehicleBusClient(nats_url)
    await client.connect()
    yield client  # type: ignore[misc]
    await client.close()
