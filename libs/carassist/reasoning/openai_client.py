"""OpenAI-compatible chat completions client using aiohttp. Implements ReasoningClient."""

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from carassist.errors import TransportError
from carassist.models.conversation import DispatchRequest, DispatchResult, ToolCall

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


def build_payload(request: DispatchRequest) -> dict[str, Any]:
    """Render a DispatchRequest as a chat completions request body."""
    return request.model_dump(mode="json", exclude_none=True)


def parse_completion(data: Any) -> DispatchResult:
    """Extract reply text and tool calls from a chat completions response.

    Raises:
        TransportError: If the response has no usable message.
    """
    if not isinstance(data, dict):
        raise TransportError("Malformed response from reasoning service")
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise TransportError("Reasoning service returned no choices")
    choice = choices[0]
    if not isinstance(choice, dict):
        raise TransportError("Malformed choice in reasoning response")
    message = choice.get("message") or {}
    if not isinstance(message, dict):
        raise TransportError("Malformed message in reasoning response")

    try:
        return DispatchResult(
            content=message.get("content"),
            tool_calls=[ToolCall.model_validate(c) for c in message.get("tool_calls") or []],
        )
    except ValidationError as e:
        raise TransportError(f"Malformed message in reasoning response: {e}") from e


class OpenAIChatClient:
    """Sends dispatch requests to `{base_url}/chat/completions`.

    Usage:
        client = OpenAIChatClient(api_key)
        result = await client.send(request)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._url = base_url.rstrip("/") + "/chat/completions"
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def send(self, request: DispatchRequest) -> DispatchResult:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        logger.debug(
            "POST %s (%d messages, %d tools)",
            self._url,
            len(request.messages),
            len(request.tools),
        )
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self._url, json=build_payload(request), headers=headers
                ) as resp:
                    data = await resp.json(content_type=None)
                    if resp.status != 200:
                        raise TransportError(
                            f"Reasoning service error {resp.status}: {_error_message(data)}"
                        )
        except aiohttp.ClientError as e:
            raise TransportError(f"Reasoning service unreachable: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Reasoning service timed out after {self._timeout:.0f}s") from e
        except ValueError as e:
            raise TransportError(f"Reasoning service sent invalid JSON: {e}") from e

        return parse_completion(data)


def _error_message(data: Any) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return str(data)
