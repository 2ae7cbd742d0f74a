"""Request handler - merges per-call requests with the session configuration."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel

from openai_kit.config import SessionConfiguration
from openai_kit.errors import EncodeFailure, StreamModeMismatch
from openai_kit.models.base import AIRequest
from openai_kit.transport.base import NetworkAdaptor, PreparedRequest
from openai_kit.transport.stream import EventStream

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")


def _identity(value: Any) -> Any:
    return value


class RequestHandler:
    """
    Single place that applies default headers and encodes bodies before
    delegating to the bound adaptor. Holds no state written during requests,
    so concurrent calls from one client are safe.
    """

    def __init__(self, adaptor: NetworkAdaptor, configuration: SessionConfiguration) -> None:
        self._adaptor = adaptor
        self._configuration = configuration

    @property
    def configuration(self) -> SessionConfiguration:
        return self._configuration

    @property
    def adaptor(self) -> NetworkAdaptor:
        return self._adaptor

    def prepare(self, request: AIRequest) -> PreparedRequest:
        """Resolve URL, merge headers and encode the body. Raises EncodeFailure."""
        try:
            content = request.body.to_json_bytes()
        except (TypeError, ValueError) as e:
            # Never send a request with a missing body
            logger.error("Could not encode body for %s: %s", request.path, e)
            raise EncodeFailure(f"Could not encode request body: {e}") from e
        return PreparedRequest(
            method=request.method,
            url=f"{self._configuration.base_url}{request.path}",
            headers=dict(self._configuration.default_headers),
            content=content,
            stream_mode=request.stream_mode,
        )

    async def request(self, request: AIRequest, response_model: type[T]) -> T:
        """Single-shot call. ``request.stream_mode`` must be False."""
        if request.stream_mode:
            raise StreamModeMismatch("Request is set to stream mode; use stream() instead.")
        prepared = self.prepare(request)
        return await self._adaptor.request(prepared, self._configuration, response_model)

    def stream(
        self,
        request: AIRequest,
        event_model: type[T],
        transform: Callable[[T], R] = _identity,
    ) -> EventStream[R]:
        """Streaming call. Fails on first pull, without touching the network, unless ``stream_mode``."""
        if not request.stream_mode:
            return EventStream.failed(StreamModeMismatch("Request is not set to stream mode."))
        prepared = self.prepare(request)
        return self._adaptor.stream(prepared, self._configuration, event_model, transform)
