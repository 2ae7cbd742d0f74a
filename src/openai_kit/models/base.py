"""Request contract shared by every API operation."""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AIModel(str, Enum):
    """Known model ids. See https://platform.openai.com/docs/models/overview

    Body fields accept any string; these values are a convenience.
    """

    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_002 = "text-davinci-002"
    CODE_DAVINCI_002 = "code-davinci-002"
    GPT_4 = "gpt-4"
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"


class AIRequestMethod(str, Enum):
    """HTTP method of an API operation."""

    GET = "GET"
    POST = "POST"


class AIRequestPath(str, Enum):
    """API paths, appended to the session's base URL."""

    CHAT_COMPLETIONS = "/v1/chat/completions"


class AIRequestBody(BaseModel):
    """Serializable request payload. Frozen: change it with ``apply``."""

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """Wire-format dict: aliased names, unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json_bytes(self) -> bytes:
        return json.dumps(self.to_payload(), ensure_ascii=False).encode("utf-8")


class TextAIRequestBody(AIRequestBody):
    """Request body addressed to a text model."""

    model: str = Field(default=AIModel.GPT_3_5_TURBO.value, description="Model id, e.g. gpt-3.5-turbo")

    @field_validator("model", mode="before")
    @classmethod
    def _model_id(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value


class AIRequest(ABC):
    """What an API operation supplies so it can be sent uniformly.

    ``stream_mode`` decides the execution path: True must go through
    streaming, False through single-shot. Mixing them up is a caller error.
    """

    @property
    @abstractmethod
    def body(self) -> AIRequestBody:
        ...

    @property
    @abstractmethod
    def path(self) -> str:
        ...

    @property
    @abstractmethod
    def method(self) -> AIRequestMethod:
        ...

    @property
    @abstractmethod
    def stream_mode(self) -> bool:
        ...
