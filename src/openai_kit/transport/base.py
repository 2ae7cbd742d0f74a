"""Network adaptor abstract interface - the only seam to a networking library."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from openai_kit.config import SessionConfiguration
from openai_kit.errors import UNKNOWN_ERROR_MESSAGE, DecodeFailure
from openai_kit.models.base import AIRequestMethod
from openai_kit.transport.stream import EventStream

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")


@dataclass(frozen=True)
class PreparedRequest:
    """A request ready to send: URL resolved, headers merged, body encoded."""

    method: AIRequestMethod
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    stream_mode: bool = False


class NetworkAdaptor(ABC):
    """Performs the actual network I/O. Implement this to swap HTTP stacks.

    The default one is ``HttpxAdaptor``.
    """

    @abstractmethod
    async def request(
        self,
        request: PreparedRequest,
        configuration: SessionConfiguration,
        response_model: type[T],
    ) -> T:
        """
        Send one request and decode the body as ``response_model``.
        Raises a ``RequestError`` subclass unless status is 2xx and the body decodes.
        """
        ...

    @abstractmethod
    def stream(
        self,
        request: PreparedRequest,
        configuration: SessionConfiguration,
        event_model: type[T],
        transform: Callable[[T], R],
    ) -> EventStream[R]:
        """
        Open a server-sent-events stream. Each event is decoded as
        ``event_model``, passed through ``transform`` and yielded in order.
        Must fail on first pull with ``StreamModeMismatch`` when
        ``request.stream_mode`` is False.
        """
        ...

    async def aclose(self) -> None:
        """Release connections held by the adaptor."""


def decode_model(raw: bytes | str, model: type[T]) -> T:
    """Decode a JSON payload as ``model`` or raise ``DecodeFailure``."""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeFailure(
            f"{UNKNOWN_ERROR_MESSAGE}: could not decode {model.__name__} ({e.error_count()} errors)"
        ) from e
