"""Tests for client wiring, settings and logging toggle."""

import json
import logging

import httpx
import pytest
from pydantic import ValidationError

from openai_kit.client import AIClient
from openai_kit.config import (
    Provider,
    SessionConfiguration,
    Settings,
    build_default_headers,
    get_settings,
    load_yaml_config,
)
from openai_kit.errors import HTTPStatusFailure
from openai_kit.logger import REQUEST_LOGGER_NAME, is_debug, log_request_event, set_debug
from openai_kit.models import AIModel, ChatCompletionRequest
from openai_kit.transport.httpx_adaptor import HttpxAdaptor


def test_standard_headers() -> None:
    client = AIClient(api_key="sk-1")
    assert client.configuration.default_headers == {
        "Authorization": "Bearer sk-1",
        "Content-Type": "application/json",
    }
    assert client.configuration.base_url == "https://api.openai.com"


def test_azure_headers() -> None:
    headers = build_default_headers("az-key", "azure")
    assert headers == {"api-key": "az-key", "Content-Type": "application/json"}
    assert "Authorization" not in headers


def test_session_configuration_is_immutable() -> None:
    source = {"X-A": "1"}
    configuration = SessionConfiguration(host="h", default_headers=source)
    source["X-B"] = "2"
    assert configuration.default_headers == {"X-A": "1"}
    with pytest.raises(ValidationError):
        configuration.host = "other"  # type: ignore[misc]


def test_from_settings_uses_env(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_KIT_API_KEY", "env-key")
    monkeypatch.setenv("OPENAI_KIT_PROVIDER", "azure")
    monkeypatch.setenv("OPENAI_KIT_HOST", "my-resource.openai.azure.com")
    monkeypatch.setenv("OPENAI_KIT_LOG_REQUESTS", "false")

    client = AIClient.from_settings()
    assert client.configuration.default_headers["api-key"] == "env-key"
    assert client.configuration.host == "my-resource.openai.azure.com"
    assert is_debug() is False


async def test_from_settings_default_model_reaches_request_body(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_KIT_API_KEY", "k")
    monkeypatch.setenv("OPENAI_KIT_MODEL", "gpt-4o-mini")
    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(json.loads(request.content))
        return httpx.Response(503)

    adaptor = HttpxAdaptor(transport=httpx.MockTransport(handler))
    async with AIClient.from_settings(adaptor=adaptor) as client:
        assert client.chat_completion.default_model == "gpt-4o-mini"
        request = client.chat_completion.make_request("hi", "be brief", stream=False)
        assert request.body.model == "gpt-4o-mini"
        assert request.body.stream is False
        with pytest.raises(HTTPStatusFailure):
            await client.chat_completion.request(request)

    assert sent[0]["model"] == "gpt-4o-mini"
    assert [m["role"] for m in sent[0]["messages"]] == ["system", "user"]


def test_client_default_model() -> None:
    assert AIClient(api_key="k").chat_completion.default_model == "gpt-3.5-turbo"
    client = AIClient(api_key="k", model=AIModel.GPT_4)
    assert client.chat_completion.make_request("hi").body.model == "gpt-4"


def test_yaml_config_overlays_env(monkeypatch, tmp_path) -> None:
    config_file = tmp_path / "openai_kit.yaml"
    config_file.write_text("host: proxy.internal:8080\nscheme: http\ntimeout: 5\n")
    monkeypatch.setenv("OPENAI_KIT_API_KEY", "k")
    monkeypatch.setenv("OPENAI_KIT_CONFIG_FILE", str(config_file))

    settings = get_settings()
    assert settings.host == "proxy.internal:8080"
    assert settings.scheme == "http"
    assert settings.timeout == 5.0
    assert settings.api_key == "k"

    client = AIClient.from_settings(settings)
    assert client.configuration.base_url == "http://proxy.internal:8080"


def test_load_yaml_config_missing_file(tmp_path) -> None:
    assert load_yaml_config(tmp_path / "nope.yaml") == {}


def test_logging_toggle(caplog) -> None:
    with caplog.at_level(logging.INFO, logger=REQUEST_LOGGER_NAME):
        log_request_event("start request %s", "u1")
        set_debug(False)
        log_request_event("start request %s", "u2")
    messages = [r.getMessage() for r in caplog.records]
    assert "start request u1" in messages
    assert "start request u2" not in messages


async def test_lifecycle_lines_logged(caplog) -> None:
    adaptor = HttpxAdaptor(transport=httpx.MockTransport(lambda request: httpx.Response(503)))
    client = AIClient(api_key="k", adaptor=adaptor)
    with caplog.at_level(logging.INFO, logger=REQUEST_LOGGER_NAME):
        with pytest.raises(HTTPStatusFailure):
            await client.chat_completion.request(ChatCompletionRequest.from_prompt("hi", stream=False))
    await client.aclose()
    messages = [r.getMessage() for r in caplog.records]
    assert "start request https://api.openai.com/v1/chat/completions" in messages
    assert "complete, status code: 503" in messages


async def test_stream_text_on_client() -> None:
    body = (
        b'data: {"id":"1","object":"chat.completion.chunk","created":1,"model":"m",'
        b'"choices":[{"index":0,"delta":{"role":"assistant"}}]}\n\n'
        b'data: {"id":"1","object":"chat.completion.chunk","created":1,"model":"m",'
        b'"choices":[{"index":0,"delta":{"content":"Hi"}}]}\n\n'
        b"data: [DONE]\n\n"
    )
    settings = Settings(api_key="k", provider=Provider.OPENAI)
    adaptor = HttpxAdaptor(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=body)))
    async with AIClient.from_settings(settings, adaptor=adaptor) as client:
        async with client.chat_completion.stream_text(ChatCompletionRequest.from_prompt("hello")) as stream:
            assert [text async for text in stream] == ["", "Hi"]
