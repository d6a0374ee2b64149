"""Send one command to the cockpit and print what the assistant did.

Run with: python scripts/send_command.py "open the front left door"
      or: python scripts/send_command.py --audio recording.wav
Requires: NATS running and the cockpit service started (python -m services.cockpit)
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

from carassist import (
    ActionExecuted,
    AssistantReply,
    DispatchFailed,
    Envelope,
    Settings,
    Topics,
    TransportError,
    VehicleBusClient,
    WhisperTranscriber,
    create_command,
    parse_payload,
    validate_message,
)


async def _recognize(path: Path, settings: Settings) -> str:
    transcriber = WhisperTranscriber(
        settings.api_key,
        settings.base_url,
        model=settings.transcribe_model,
        language=settings.language,
        timeout=settings.request_timeout,
    )
    return await transcriber.transcribe(path.read_bytes())


async def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("text", nargs="?", help="command text")
    parser.add_argument("--audio", type=Path, help="WAV file to transcribe instead of text")
    parser.add_argument("--timeout", type=float, default=30.0)
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    source = "text"
    text = args.text or ""
    if args.audio is not None:
        try:
            text = await _recognize(args.audio, settings)
        except TransportError as e:
            print(f"Transcription failed: {e}", file=sys.stderr)
            return 1
        source = "voice"
        print(f"Recognized: {text!r}")
    if not text.strip():
        print("Nothing to send.", file=sys.stderr)
        return 1

    client = VehicleBusClient(settings.nats_url)
    await client.connect()

    done = asyncio.Event()

    async def on_message(env: Envelope) -> None:
        typed = parse_payload(env)
        if isinstance(typed, ActionExecuted):
            print(f"  action  {typed.action:<24} {typed.status}")
        elif isinstance(typed, AssistantReply):
            print(f"  message {typed.message or '(none)'}")
            done.set()
        elif isinstance(typed, DispatchFailed):
            print(f"  failed  {typed.reason}")
            done.set()

    await client.subscribe(Topics.ACTIONS, on_message)
    await client.subscribe(Topics.ASSISTANT, on_message)
    await client.subscribe(Topics.ERRORS, on_message)
    await asyncio.sleep(0.3)

    command = create_command(text, sender=os.environ.get("USER", "driver"), source=source)
    errors = validate_message(command)
    assert not errors, f"Validation failed: {errors}"
    print(f"> {text}")
    await client.publish(Topics.COMMANDS, command)

    try:
        await asyncio.wait_for(done.wait(), timeout=args.timeout)
    except asyncio.TimeoutError:
        print("Timeout! No reply from the cockpit", file=sys.stderr)
        await client.close()
        return 1

    await client.close()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
