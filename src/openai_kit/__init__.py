"""Async client for OpenAI-compatible chat completion APIs."""

from openai_kit.client import AIClient
from openai_kit.config import Provider, SessionConfiguration, Settings, get_settings
from openai_kit.errors import (
    DecodeFailure,
    EncodeFailure,
    HTTPStatusFailure,
    RequestError,
    StreamModeMismatch,
    TransportFailure,
)
from openai_kit.handler import RequestHandler
from openai_kit.logger import is_debug, set_debug
from openai_kit.models import (
    AIModel,
    ChatCompletionBody,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionStreamResponse,
    Message,
    Role,
)
from openai_kit.services import ChatCompletion, first_delta_content
from openai_kit.transport import EventStream, HttpxAdaptor, NetworkAdaptor, PreparedRequest

__all__ = [
    "AIClient",
    "AIModel",
    "ChatCompletion",
    "ChatCompletionBody",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionStreamResponse",
    "DecodeFailure",
    "EncodeFailure",
    "EventStream",
    "HTTPStatusFailure",
    "HttpxAdaptor",
    "Message",
    "NetworkAdaptor",
    "PreparedRequest",
    "Provider",
    "RequestError",
    "RequestHandler",
    "Role",
    "SessionConfiguration",
    "Settings",
    "StreamModeMismatch",
    "TransportFailure",
    "first_delta_content",
    "get_settings",
    "is_debug",
    "set_debug",
]
