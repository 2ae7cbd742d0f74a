"""Request contract and typed API models."""

from openai_kit.models.base import (
    AIModel,
    AIRequest,
    AIRequestBody,
    AIRequestMethod,
    AIRequestPath,
    TextAIRequestBody,
)
from openai_kit.models.chat_completion import (
    ChatCompletionBody,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionStreamResponse,
    Choice,
    DeltaChoice,
    DeltaMessage,
    Message,
    Role,
    Usage,
)

__all__ = [
    "AIModel",
    "AIRequest",
    "AIRequestBody",
    "AIRequestMethod",
    "AIRequestPath",
    "ChatCompletionBody",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionStreamResponse",
    "Choice",
    "DeltaChoice",
    "DeltaMessage",
    "Message",
    "Role",
    "TextAIRequestBody",
    "Usage",
]
