"""Chat completion request and response models.

See https://platform.openai.com/docs/api-reference/chat/create
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from openai_kit.models.base import (
    AIModel,
    AIRequest,
    AIRequestMethod,
    AIRequestPath,
    TextAIRequestBody,
)


class Role(str, Enum):
    """Message author role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One chat message."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(..., description="system, user or assistant")
    content: str = Field(..., description="Message text")


class ChatCompletionBody(TextAIRequestBody):
    """Body of a chat completion request.

    Defaults match the API documentation. The body is frozen; ``apply``
    returns a changed copy::

        body = ChatCompletionBody.from_prompt("Hi").apply(stream=False, temperature=0.2)
    """

    messages: tuple[Message, ...] = Field(default_factory=tuple)

    stream: bool = Field(default=True)
    temperature: float = Field(default=1.0)
    top_p: float = Field(default=1.0)
    n: int = Field(default=1)
    stop: tuple[str, ...] = Field(default_factory=tuple)
    max_tokens: int | None = Field(default=None)
    presence_penalty: float = Field(default=0.0)
    frequency_penalty: float = Field(default=0.0)
    logit_bias: dict[str, float] | None = Field(default=None)
    user: str | None = Field(default=None)

    @classmethod
    def from_prompt(
        cls,
        user_message: str,
        system_message: str | None = None,
        assistant_message: str | None = None,
        *,
        model: AIModel | str = AIModel.GPT_3_5_TURBO,
    ) -> "ChatCompletionBody":
        """Build ``[system?, user, assistant?]`` from plain strings."""
        messages = [Message(role=Role.USER.value, content=user_message)]
        if system_message is not None:
            # System message goes first
            messages.insert(0, Message(role=Role.SYSTEM.value, content=system_message))
        if assistant_message is not None:
            messages.append(Message(role=Role.ASSISTANT.value, content=assistant_message))
        return cls(model=model, messages=messages)

    def apply(
        self,
        block: Callable[[dict[str, Any]], None] | None = None,
        **changes: Any,
    ) -> "ChatCompletionBody":
        """
        Return a new body with ``changes`` applied, then ``block`` run on a
        mutable draft dict. ``self`` is left untouched.
        """
        draft = {k: list(v) if isinstance(v, tuple) else v for k, v in self.model_dump().items()}
        draft.update(changes)
        if block is not None:
            block(draft)
        return type(self).model_validate(draft)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if not payload.get("stop"):
            payload.pop("stop", None)
        return payload


class ChatCompletionRequest(AIRequest):
    """A chat completion request wrapping one ``ChatCompletionBody``."""

    Body = ChatCompletionBody
    Message = Message

    def __init__(self, body: ChatCompletionBody) -> None:
        self._body = body

    @classmethod
    def from_prompt(
        cls,
        user_message: str,
        system_message: str | None = None,
        assistant_message: str | None = None,
        *,
        model: AIModel | str = AIModel.GPT_3_5_TURBO,
        stream: bool = True,
    ) -> "ChatCompletionRequest":
        body = ChatCompletionBody.from_prompt(
            user_message,
            system_message,
            assistant_message,
            model=model,
        )
        if not stream:
            body = body.apply(stream=False)
        return cls(body)

    @property
    def body(self) -> ChatCompletionBody:
        return self._body

    @property
    def path(self) -> str:
        return AIRequestPath.CHAT_COMPLETIONS.value

    @property
    def method(self) -> AIRequestMethod:
        return AIRequestMethod.POST

    @property
    def stream_mode(self) -> bool:
        return self._body.stream

    def __repr__(self) -> str:
        return f"ChatCompletionRequest(model={self._body.model!r}, stream={self._body.stream})"


class Choice(BaseModel):
    """One complete answer in a single-shot response."""

    index: int
    message: Message
    finish_reason: str | None = None


class Usage(BaseModel):
    """Token accounting reported by the API."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(BaseModel):
    """Single-shot chat completion response."""

    id: str
    object: str
    created: int
    model: str
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None


class DeltaMessage(BaseModel):
    """Partial message fragment; either field may be absent in an event."""

    role: str | None = None
    content: str | None = None


class DeltaChoice(BaseModel):
    """One choice in a stream event. ``finish_reason`` is set on its last event only."""

    index: int
    delta: DeltaMessage = Field(default_factory=DeltaMessage)
    finish_reason: str | None = None


class ChatCompletionStreamResponse(BaseModel):
    """One server-sent event of a streamed chat completion."""

    id: str
    object: str
    created: int
    model: str
    choices: list[DeltaChoice] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenated delta content of all choices."""
        return "".join(c.delta.content or "" for c in self.choices)
