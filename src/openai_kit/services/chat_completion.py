"""Chat completion service - typed surface over the request handler."""

from collections.abc import Callable
from typing import TypeVar, overload

from openai_kit.handler import RequestHandler
from openai_kit.models.base import AIModel
from openai_kit.models.chat_completion import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionStreamResponse,
)
from openai_kit.transport.stream import EventStream

T = TypeVar("T")


def first_delta_content(response: ChatCompletionStreamResponse) -> str:
    """Content fragment of the first choice, or empty string."""
    if not response.choices:
        return ""
    return response.choices[0].delta.content or ""


class ChatCompletion:
    """Entry point to perform chat completion requests.

    Streaming::

        request = ChatCompletionRequest.from_prompt("Hello")
        async with client.chat_completion.stream(request, first_delta_content) as stream:
            async for text in stream:
                print(text, end="")

    Always consume a stream inside ``async with``: leaving the block closes
    the connection, also after ``break``. A bare ``async for`` that stops
    early leaves the socket open. Cancelling the consuming task closes it
    too, and nothing more is delivered.

    ``make_request`` builds requests addressed to the client's default model.
    """

    def __init__(self, handler: RequestHandler, default_model: AIModel | str = AIModel.GPT_3_5_TURBO) -> None:
        self._handler = handler
        self._default_model = default_model.value if isinstance(default_model, AIModel) else default_model

    @property
    def default_model(self) -> str:
        return self._default_model

    def make_request(
        self,
        user_message: str,
        system_message: str | None = None,
        assistant_message: str | None = None,
        *,
        stream: bool = True,
    ) -> ChatCompletionRequest:
        return ChatCompletionRequest.from_prompt(
            user_message,
            system_message,
            assistant_message,
            model=self._default_model,
            stream=stream,
        )

    @overload
    def stream(self, request: ChatCompletionRequest) -> EventStream[ChatCompletionStreamResponse]:
        ...

    @overload
    def stream(
        self,
        request: ChatCompletionRequest,
        transform: Callable[[ChatCompletionStreamResponse], T],
    ) -> EventStream[T]:
        ...

    def stream(self, request, transform=None):
        """Stream the completion. ``request.body.stream`` must be True."""
        if transform is None:
            return self._handler.stream(request, ChatCompletionStreamResponse)
        return self._handler.stream(request, ChatCompletionStreamResponse, transform)

    def stream_text(self, request: ChatCompletionRequest) -> EventStream[str]:
        """Stream only the first choice's content fragments."""
        return self._handler.stream(request, ChatCompletionStreamResponse, first_delta_content)

    async def request(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Single-shot completion. ``request.body.stream`` must be False."""
        return await self._handler.request(request, ChatCompletionResponse)
