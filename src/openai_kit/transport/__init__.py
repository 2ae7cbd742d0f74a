"""Network transport - abstract adaptor and the httpx implementation."""

from openai_kit.transport.base import NetworkAdaptor, PreparedRequest
from openai_kit.transport.httpx_adaptor import HttpxAdaptor
from openai_kit.transport.stream import EventStream

__all__ = ["EventStream", "HttpxAdaptor", "NetworkAdaptor", "PreparedRequest"]
