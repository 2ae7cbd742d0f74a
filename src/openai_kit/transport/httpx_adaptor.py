"""Network adaptor implemented on httpx."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import aclosing
from typing import TypeVar

import httpx
from pydantic import BaseModel

from openai_kit.config import SessionConfiguration
from openai_kit.errors import HTTPStatusFailure, StreamModeMismatch, TransportFailure
from openai_kit.logger import log_request_event
from openai_kit.transport.base import NetworkAdaptor, PreparedRequest, decode_model
from openai_kit.transport.sse import DONE_SENTINEL, iter_sse_data
from openai_kit.transport.stream import EventStream

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")

EVENT_STREAM_ACCEPT = "text/event-stream"


def _transport_failure(exc: httpx.RequestError) -> TransportFailure:
    return TransportFailure(str(exc) or type(exc).__name__)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class HttpxAdaptor(NetworkAdaptor):
    """``NetworkAdaptor`` on ``httpx.AsyncClient``. One client, shared by all calls."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(transport=transport)

    async def request(
        self,
        request: PreparedRequest,
        configuration: SessionConfiguration,
        response_model: type[T],
    ) -> T:
        log_request_event("start request %s", request.url)
        try:
            response = await self._client.request(
                request.method.value,
                request.url,
                headers=dict(request.headers),
                content=request.content,
                timeout=configuration.timeout,
            )
        except asyncio.CancelledError:
            log_request_event("cancel on request %s", request.url)
            raise
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", request.url, e)
            raise _transport_failure(e) from e

        log_request_event("complete, status code: %s", response.status_code)
        if not _is_success(response.status_code):
            raise HTTPStatusFailure(response.status_code, body=response.text)
        return decode_model(response.content, response_model)

    def stream(
        self,
        request: PreparedRequest,
        configuration: SessionConfiguration,
        event_model: type[T],
        transform: Callable[[T], R],
    ) -> EventStream[R]:
        if not request.stream_mode:
            log_request_event("start request %s", request.url)
            return EventStream.failed(StreamModeMismatch("Request is not set to stream mode."))

        def on_cancel() -> None:
            log_request_event("cancel on request %s", request.url)

        return EventStream(
            self._iter_events(request, configuration, event_model, transform),
            on_cancel=on_cancel,
        )

    async def _iter_events(
        self,
        request: PreparedRequest,
        configuration: SessionConfiguration,
        event_model: type[T],
        transform: Callable[[T], R],
    ) -> AsyncGenerator[R, None]:
        log_request_event("start request %s", request.url)
        headers = {**request.headers, "Accept": EVENT_STREAM_ACCEPT}
        try:
            async with self._client.stream(
                request.method.value,
                request.url,
                headers=headers,
                content=request.content,
                timeout=configuration.timeout,
            ) as response:
                if not _is_success(response.status_code):
                    await response.aread()
                    log_request_event("complete, status code: %s", response.status_code)
                    raise HTTPStatusFailure(response.status_code, body=response.text)
                async with aclosing(iter_sse_data(response.aiter_lines())) as events:
                    async for data in events:
                        if data == DONE_SENTINEL:
                            break
                        yield transform(decode_model(data, event_model))
                log_request_event("complete, status code: %s", response.status_code)
        except httpx.RequestError as e:
            logger.warning("Stream from %s failed: %s", request.url, e)
            raise _transport_failure(e) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
