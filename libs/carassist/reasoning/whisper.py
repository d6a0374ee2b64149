"""Whisper-compatible transcription client using aiohttp. Implements Transcriber."""

import asyncio
import logging

import aiohttp

from carassist.errors import TransportError
from carassist.reasoning.openai_client import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


class WhisperTranscriber:
    """Uploads WAV audio to `{base_url}/audio/transcriptions` and returns the text."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = "whisper-1",
        language: str = "en",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._url = base_url.rstrip("/") + "/audio/transcriptions"
        self._model = model
        self._language = language
        self._timeout = timeout

    def _form(self, audio: bytes) -> aiohttp.FormData:
        form = aiohttp.FormData()
        form.add_field("file", audio, filename="audio.wav", content_type="audio/wav")
        form.add_field("model", self._model)
        form.add_field("language", self._language)
        form.add_field("response_format", "json")
        return form

    async def transcribe(self, audio: bytes) -> str:
        if not audio:
            return ""
        headers = {"Authorization": f"Bearer {self._api_key}"}
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self._url, data=self._form(audio), headers=headers) as resp:
                    data = await resp.json(content_type=None)
                    if resp.status != 200:
                        raise TransportError(f"Transcription error {resp.status}: {data}")
        except aiohttp.ClientError as e:
            raise TransportError(f"Transcription service unreachable: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Transcription timed out after {self._timeout:.0f}s") from e
        except ValueError as e:
            raise TransportError(f"Transcription service sent invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise TransportError("Malformed transcription response")
        text = str(data.get("text") or "").strip()
        logger.debug("Transcribed %d bytes: %r", len(audio), text)
        return text
