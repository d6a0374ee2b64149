"""Integration tests for the cockpit service over NATS. Requires NATS running."""

import asyncio

import pytest
from carassist import (
    Envelope,
    MessageType,
    Settings,
    Topics,
    VehicleBusClient,
    create_command,
)

from services.cockpit.cockpit import CockpitService

pytestmark = pytest.mark.integration


@pytest.fixture
async def cockpit(nats_url: str, reasoning, effects) -> CockpitService:
    """Start a cockpit with a scripted reasoning service, tear it down after the test."""
    service = CockpitService(
        Settings(nats_url=nats_url, session_id="it-car"),
        client=reasoning,
        effects=effects,
    )
    await service.start()
    await asyncio.sleep(0.3)  # Let subscriptions settle
    yield service  # type: ignore[misc]
    await service.stop()


async def _send(client: VehicleBusClient, text: str) -> None:
    await client.publish(Topics.COMMANDS, create_command(text, sender="driver"))


class TestCockpitIntegration:
    async def test_command_round_trip(self, cockpit, bus_client, reasoning, effects):
        replies: list[Envelope] = []
        done = asyncio.Event()

        async def handler(env: Envelope) -> None:
            replies.append(env)
            done.set()

        await bus_client.subscribe(Topics.ASSISTANT, handler)
        await asyncio.sleep(0.3)

        reasoning.queue_actions("open_front_left_door")
        await _send(bus_client, "open the front left door")

        await asyncio.wait_for(done.wait(), timeout=5.0)
        assert replies[0].type == MessageType.ASSISTANT_REPLY
        assert replies[0].payload["actions"] == ["open_front_left_door"]
        assert effects.count("animation", "opendoor_fl") == 1

    async def test_status_published(self, cockpit, bus_client, reasoning):
        statuses: list[Envelope] = []
        done = asyncio.Event()

        async def handler(env: Envelope) -> None:
            statuses.append(env)
            done.set()

        await bus_client.subscribe(Topics.STATUS, handler)
        await asyncio.sleep(0.3)

        reasoning.queue_actions("set_race_mode", "start_engine")
        await _send(bus_client, "race mode and start the engine")

        await asyncio.wait_for(done.wait(), timeout=5.0)
        payload = statuses[0].payload
        assert payload["mode"] == "race"
        assert payload["max_speed"] == 250
        assert payload["engine_on"] is True
