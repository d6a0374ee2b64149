"""Conversation and tool-calling models exchanged with the reasoning service.

The shapes follow the chat-completions tool-calling protocol: an assistant
turn lists the tool calls it wants, and every call is acknowledged by a
`tool` turn carrying the same call id.
"""

import uuid
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field


class Role(StrEnum):
    """Author of a conversation turn."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class FunctionCall(BaseModel):
    """The function part of a tool call: which action, with what arguments."""

    name: str
    arguments: str = "{}"


class ToolCall(BaseModel):
    """A single action selected by the reasoning service."""

    id: str = Field(default_factory=lambda: f"call_{uuid.uuid4().hex[:24]}")
    type: Literal["function"] = "function"
    function: FunctionCall

    @property
    def name(self) -> str:
        return self.function.name

    @classmethod
    def for_action(cls, name: str, call_id: str | None = None) -> "ToolCall":
        """Build a call for an action identifier, generating an id if needed."""
        if call_id is None:
            return cls(function=FunctionCall(name=name))
        return cls(id=call_id, function=FunctionCall(name=name))


class ConversationTurn(BaseModel):
    """One entry of the conversation transcript."""

    role: Role
    content: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None

    @classmethod
    def system(cls, text: str) -> "ConversationTurn":
        return cls(role=Role.SYSTEM, content=text)

    @classmethod
    def user(cls, text: str) -> "ConversationTurn":
        return cls(role=Role.USER, content=text)

    @classmethod
    def assistant(
        cls, text: str | None = None, tool_calls: list[ToolCall] | None = None
    ) -> "ConversationTurn":
        return cls(role=Role.ASSISTANT, content=text, tool_calls=tool_calls or None)

    @classmethod
    def tool_result(cls, call: ToolCall) -> "ConversationTurn":
        """Acknowledge a tool call. Every call gets one, known action or not."""
        return cls(
            role=Role.TOOL,
            content=f"{call.name} executed successfully.",
            tool_call_id=call.id,
        )

    @property
    def requested_actions(self) -> list[str]:
        """Action identifiers this turn asked for (assistant turns only)."""
        return [call.name for call in self.tool_calls or []]


class FunctionDefinition(BaseModel):
    """Catalogue entry as advertised to the reasoning service."""

    name: str
    description: str
    parameters: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )


class ToolDefinition(BaseModel):
    """A tool the reasoning service may call."""

    type: Literal["function"] = "function"
    function: FunctionDefinition


class DispatchRequest(BaseModel):
    """Everything the reasoning service needs to pick actions for an utterance."""

    model: str
    messages: list[ConversationTurn]
    tools: list[ToolDefinition]
    tool_choice: str = "auto"


class DispatchResult(BaseModel):
    """The reasoning service's answer: optional text plus ordered tool calls."""

    content: str | None = None
    tool_calls: list[ToolCall] = Field(default_factory=list)

    @property
    def action_identifiers(self) -> list[str]:
        return [call.name for call in self.tool_calls]

    @property
    def is_empty(self) -> bool:
        """True when there is neither reply text nor any tool call."""
        return not self.content and not self.tool_calls

    def to_turn(self) -> ConversationTurn:
        """The assistant turn recording this result in the transcript."""
        return ConversationTurn.assistant(self.content, list(self.tool_calls))
