"""Server-sent events framing."""

from collections.abc import AsyncGenerator, AsyncIterable

DONE_SENTINEL = "[DONE]"


async def iter_sse_data(lines: AsyncIterable[str]) -> AsyncGenerator[str, None]:
    """
    Yield the data of each event from SSE lines.
    Multi-line data is joined with newlines; comments and other fields are skipped.
    """
    data_lines: list[str] = []
    async for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            # Blank line dispatches the event
            if data_lines:
                yield "\n".join(data_lines)
                data_lines = []
            continue
        if line.startswith(":"):
            continue
        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if name == "data":
            data_lines.append(value)
    if data_lines:
        yield "\n".join(data_lines)
