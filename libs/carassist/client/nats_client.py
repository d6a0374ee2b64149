"""VehicleBusClient — async NATS client carrying envelopes between the cockpit and its callers."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

import nats
from nats.aio.client import Client as NATSClient
from nats.aio.msg import Msg
from nats.aio.subscription import Subscription
from nats.js.api import DeliverPolicy
from nats.js.client import JetStreamContext
from nats.js.errors import NotFoundError
from pydantic import ValidationError

from carassist.helpers.factory import parse_message
from carassist.models.envelope import Envelope
from carassist.models.topics import to_nats_subject

logger = logging.getLogger(__name__)

STREAM_NAME = "CARASSIST"
STREAM_SUBJECTS = ["vehicle.>"]

EnvelopeHandler = Callable[[Envelope], Coroutine[Any, Any, None]]


class VehicleBusClient:
    """Publishes and receives `Envelope` messages on the `vehicle.>` subjects.

    Messages go through a JetStream stream when the server has JetStream
    enabled; subscriptions fall back to core NATS otherwise. Handlers only
    ever see decoded envelopes: undecodable messages are logged and acked.

    Usage:
        bus = VehicleBusClient("nats://localhost:4222")
        await bus.connect()
        await bus.subscribe(Topics.ASSISTANT, on_reply)
        await bus.publish(Topics.COMMANDS, envelope)
        await bus.close()
    """

    def __init__(self, url: str = "nats://localhost:4222") -> None:
        self._url = url
        self._nc: NATSClient | None = None
        self._js: JetStreamContext | None = None
        self._subscriptions: list[Subscription] = []
        self._consumers: set[asyncio.Task[None]] = set()

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_connected(self) -> bool:
        return self._nc is not None and self._nc.is_connected

    async def connect(self) -> None:
        self._nc = await nats.connect(
            self._url,
            reconnected_cb=self._on_reconnect,
            disconnected_cb=self._on_disconnect,
            error_cb=self._on_error,
            max_reconnect_attempts=10,
            reconnect_time_wait=2,
        )
        self._js = self._nc.jetstream()
        await self._ensure_stream()

    async def _ensure_stream(self) -> None:
        assert self._js is not None
        try:
            name = await self._js.find_stream_name_by_subject(STREAM_SUBJECTS[0])
            logger.info("Using JetStream stream '%s'", name)
        except NotFoundError:
            await self._js.add_stream(name=STREAM_NAME, subjects=STREAM_SUBJECTS)
            logger.info("Created JetStream stream '%s'", STREAM_NAME)

    async def publish(self, topic: str, envelope: Envelope) -> None:
        """Publish an envelope on a topic path such as `/vehicle/assistant`."""
        if self._js is None:
            raise RuntimeError("Not connected. Call connect() first.")

        subject = to_nats_subject(topic)
        await self._js.publish(subject, envelope.model_dump_json(by_alias=True).encode())
        logger.debug("Published %s %s to %s", envelope.type, envelope.id, subject)

    async def subscribe(
        self,
        topic: str,
        handler: EnvelopeHandler,
        durable: str | None = None,
    ) -> None:
        """Deliver every envelope arriving on `topic` to `handler`.

        Without a durable name only messages published after the call are
        delivered.
        """
        subject = to_nats_subject(topic)
        on_msg = self._wrap(subject, handler)

        if self._js is not None:
            try:
                sub = await self._js.subscribe(
                    subject,
                    durable=durable,
                    manual_ack=True,
                    deliver_policy=None if durable else DeliverPolicy.NEW,
                )
            except Exception:
                logger.debug("JetStream subscribe failed for %s, using core NATS", subject)
            else:
                self._subscriptions.append(sub)
                task = asyncio.create_task(self._consume(subject, sub, on_msg))
                self._consumers.add(task)
                task.add_done_callback(self._consumers.discard)
                logger.info("Subscribed to %s (JetStream)", subject)
                return

        if self._nc is None:
            raise RuntimeError("Not connected. Call connect() first.")
        self._subscriptions.append(await self._nc.subscribe(subject, cb=on_msg))
        logger.info("Subscribed to %s (core)", subject)

    def _wrap(
        self, subject: str, handler: EnvelopeHandler
    ) -> Callable[[Msg], Coroutine[Any, Any, None]]:
        async def on_msg(msg: Msg) -> None:
            try:
                envelope = parse_message(msg.data)
            except (ValueError, ValidationError) as e:
                logger.warning("Dropping undecodable message on %s: %s", subject, e)
            else:
                try:
                    await handler(envelope)
                except Exception:
                    logger.exception("Handler failed for %s on %s", envelope.id, subject)
            await _ack(msg)

        return on_msg

    async def _consume(
        self,
        subject: str,
        sub: Subscription,
        on_msg: Callable[[Msg], Coroutine[Any, Any, None]],
    ) -> None:
        try:
            async for msg in sub.messages:
                await on_msg(msg)
        except Exception:
            logger.debug("Consumer for %s stopped", subject)

    async def close(self) -> None:
        """Drop all subscriptions, then drain and disconnect."""
        while self._subscriptions:
            sub = self._subscriptions.pop()
            try:
                await sub.unsubscribe()
            except Exception:
                logger.debug("Unsubscribe failed", exc_info=True)

        if self._nc is not None:
            await self._nc.drain()
            self._nc = None
            self._js = None
        logger.info("Disconnected from NATS at %s", self._url)

    async def _on_reconnect(self, _: Any = None) -> None:
        logger.info("Reconnected to NATS at %s", self._url)

    async def _on_disconnect(self, _: Any = None) -> None:
        logger.warning("Lost connection to NATS at %s", self._url)

    async def _on_error(self, e: Exception) -> None:
        logger.error("NATS error: %s", e)


async def _ack(msg: Msg) -> None:
    # Core NATS messages have no reply subject and nothing to ack
    if not msg.reply or msg._ackd:
        return
    try:
        await msg.ack()
    except Exception:
        logger.debug("Ack failed for %s", msg.subject)
