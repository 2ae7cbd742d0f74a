"""Client entry point - wires configuration, adaptor and services."""

import logging

from openai_kit.config import (
    Provider,
    SessionConfiguration,
    Settings,
    build_default_headers,
    get_settings,
)
from openai_kit.handler import RequestHandler
from openai_kit.logger import set_debug
from openai_kit.models.base import AIModel
from openai_kit.services.chat_completion import ChatCompletion
from openai_kit.transport.base import NetworkAdaptor
from openai_kit.transport.httpx_adaptor import HttpxAdaptor

logger = logging.getLogger(__name__)


class AIClient:
    """
    Entry point to an OpenAI-compatible API. Build one per API key and keep it.

        async with AIClient(api_key="sk-...") as client:
            response = await client.chat_completion.request(request)

    To change the key, build a new client and close the old one.
    """

    def __init__(
        self,
        api_key: str,
        *,
        adaptor: NetworkAdaptor | None = None,
        provider: Provider | str = Provider.OPENAI,
        scheme: str = "https",
        host: str = "api.openai.com",
        timeout: float = 60.0,
        model: AIModel | str = AIModel.GPT_3_5_TURBO,
    ) -> None:
        self._configuration = SessionConfiguration(
            scheme=scheme,
            host=host,
            default_headers=build_default_headers(api_key, provider),
            timeout=timeout,
        )
        self._adaptor = adaptor or HttpxAdaptor()
        self._handler = RequestHandler(self._adaptor, self._configuration)
        self.chat_completion = ChatCompletion(self._handler, default_model=model)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        adaptor: NetworkAdaptor | None = None,
    ) -> "AIClient":
        """Build a client from environment / .env settings."""
        settings = settings or get_settings()
        if not settings.api_key:
            logger.warning("API key not configured, requests will be rejected by the server")
        set_debug(settings.log_requests)
        return cls(
            settings.api_key,
            adaptor=adaptor,
            provider=settings.provider,
            scheme=settings.scheme,
            host=settings.host,
            timeout=settings.timeout,
            model=settings.model,
        )

    @property
    def configuration(self) -> SessionConfiguration:
        return self._configuration

    async def aclose(self) -> None:
        await self._adaptor.aclose()

    async def __aenter__(self) -> "AIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
