"""Unit tests for server-sent events framing."""

from openai_kit.transport.sse import iter_sse_data


async def _lines(*lines: str):
    for line in lines:
        yield line


async def _collect(*lines: str) -> list[str]:
    return [data async for data in iter_sse_data(_lines(*lines))]


async def test_one_event_per_blank_line() -> None:
    assert await _collect("data: a", "", "data: b", "") == ["a", "b"]


async def test_comments_and_other_fields_skipped() -> None:
    out = await _collect(": keep-alive", "", "event: message", "id: 7", "retry: 100", "data: x", "")
    assert out == ["x"]


async def test_multi_line_data_joined() -> None:
    assert await _collect("data: {\"a\":", "data: 1}", "") == ['{"a":\n1}']


async def test_trailing_event_without_blank_line() -> None:
    assert await _collect("data: last") == ["last"]


async def test_done_sentinel_passed_through_and_no_space_variant() -> None:
    assert await _collect("data:[DONE]", "") == ["[DONE]"]


async def test_crlf_stripped() -> None:
    assert await _collect("data: z\r", "\r") == ["z"]
