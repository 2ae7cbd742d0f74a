"""Cancellable async iterator handed out by streaming calls."""

import asyncio
from collections.abc import AsyncGenerator, Callable
from typing import Any, Generic, TypeVar

R = TypeVar("R")


class EventStream(Generic[R]):
    """
    Async iterator over one streamed response. Not restartable.

    Always consume it inside ``async with``. Leaving the block closes the
    connection, including after ``break``; a bare ``async for`` that stops
    early keeps the socket open until garbage collection::

        async with client.chat_completion.stream(request) as events:
            async for event in events:
                ...

    ``aclose`` may be called from any task. It closes the connection once,
    runs ``on_cancel`` if the stream had not finished, and makes a pending
    pull end with ``StopAsyncIteration``; later calls do nothing.
    """

    def __init__(
        self,
        source: AsyncGenerator[R, None],
        *,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._source = source
        self._on_cancel = on_cancel
        self._pull: asyncio.Task[R] | None = None
        self._finished = False
        self._closed = False

    @classmethod
    def failed(cls, error: Exception) -> "EventStream[Any]":
        """A stream that raises ``error`` on first pull and yields nothing."""

        async def _fail() -> AsyncGenerator[Any, None]:
            raise error
            yield  # unreachable; makes this an async generator

        return cls(_fail())

    @property
    def closed(self) -> bool:
        return self._closed or self._finished

    def __aiter__(self) -> "EventStream[R]":
        return self

    async def _next(self) -> R:
        return await self._source.__anext__()

    async def __anext__(self) -> R:
        if self.closed:
            raise StopAsyncIteration
        # Each pull runs as its own task so aclose() from another task can cancel it
        self._pull = asyncio.create_task(self._next())
        try:
            item = await self._pull
        except StopAsyncIteration:
            self._finished = True
            raise
        except asyncio.CancelledError:
            if self._closed:
                # Pull cancelled by aclose()
                raise StopAsyncIteration from None
            # Consumer task cancelled
            self._mark_closed()
            await self._source.aclose()
            raise
        except Exception:
            self._finished = True
            raise
        finally:
            self._pull = None
        if self._closed:
            # aclose() ran while this pull was completing; drop the value
            raise StopAsyncIteration
        return item

    async def aclose(self) -> None:
        """Stop the stream and close its connection. Safe to call repeatedly, from any task."""
        if self._closed:
            return
        self._mark_closed()
        pull = self._pull
        if pull is not None and not pull.done():
            pull.cancel()
            await asyncio.wait([pull])
        await self._source.aclose()

    def _mark_closed(self) -> None:
        self._closed = True
        if not self._finished and self._on_cancel is not None:
            self._on_cancel()

    async def __aenter__(self) -> "EventStream[R]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
