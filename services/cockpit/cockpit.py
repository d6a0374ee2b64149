"""CockpitService — the dashboard assistant listening on the vehicle bus."""

import asyncio
import logging

from carassist import (
    ActionRegistry,
    CommandDispatcher,
    Command,
    DispatchFailed,
    DispatcherBusyError,
    Envelope,
    LoggingVehicleEffects,
    MessageType,
    OpenAIChatClient,
    ReasoningClient,
    Settings,
    Topics,
    VehicleBusClient,
    VehicleEffects,
    WhisperTranscriber,
    create_message,
    validate_message,
)

logger = logging.getLogger(__name__)


class CockpitService:
    """Receives text commands on `/vehicle/commands` and runs them through the dispatcher.

    Every dispatch event (utterance, executed action, assistant reply,
    failure, vehicle status) is published back on the bus, which replaces
    the dashboard's direct UI binding.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: ReasoningClient | None = None,
        effects: VehicleEffects | None = None,
    ) -> None:
        self._settings = settings or Settings.from_env()
        self._bus = VehicleBusClient(self._settings.nats_url)
        self._registry = ActionRegistry(effects or LoggingVehicleEffects())
        if client is None:
            chat = OpenAIChatClient(
                self._settings.api_key,
                self._settings.base_url,
                self._settings.request_timeout,
            )
            if not chat.is_configured:
                logger.warning("OPENAI_API_KEY is not set; reasoning requests will be rejected")
            client = chat
        self._dispatcher = CommandDispatcher(
            self._registry,
            client,
            transcriber=WhisperTranscriber(
                self._settings.api_key,
                self._settings.base_url,
                model=self._settings.transcribe_model,
                language=self._settings.language,
                timeout=self._settings.request_timeout,
            ),
            model=self._settings.model,
            request_timeout=self._settings.request_timeout,
            max_turns=self._settings.max_turns,
            session_id=self._settings.session_id,
        )
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def dispatcher(self) -> CommandDispatcher:
        """Expose the dispatcher for testing."""
        return self._dispatcher

    async def start(self) -> None:
        """Connect to NATS and start listening for commands."""
        await self._bus.connect()
        logger.info("Cockpit connected to NATS")

        self._dispatcher.subscribe(self._publish)
        await self._bus.subscribe(Topics.COMMANDS, self._on_command)
        logger.info("Cockpit subscribed to %s", Topics.COMMANDS)

    async def stop(self) -> None:
        """Wait for running commands, then disconnect."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._dispatcher.unsubscribe(self._publish)
        await self._bus.close()
        logger.info("Cockpit stopped")

    async def _on_command(self, envelope: Envelope) -> None:
        """Validate an inbound command and hand it to the dispatcher."""
        if envelope.type != MessageType.COMMAND:
            return

        errors = validate_message(envelope)
        if errors:
            logger.warning(
                "Rejected command %s from %s: %s",
                envelope.id,
                envelope.sender,
                "; ".join(errors),
            )
            return

        command = Command.model_validate(envelope.payload)
        # Dispatch runs in its own task so the dispatcher's pending slot applies
        task = asyncio.create_task(self._run(command.text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, text: str) -> None:
        try:
            await self._dispatcher.handle(text)
        except DispatcherBusyError as e:
            logger.warning("%s", e)
            await self._publish(
                create_message(
                    sender=self._dispatcher.session_id,
                    topic=Topics.ERRORS,
                    msg_type=MessageType.DISPATCH_FAILED,
                    payload=DispatchFailed(utterance=e.utterance, reason="busy"),
                )
            )

    async def _publish(self, envelope: Envelope) -> None:
        await self._bus.publish(envelope.topic, envelope)
        await self._bus.publish(Topics.session(self._dispatcher.session_id), envelope)
