from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest

from src.application.errors import (
    InvalidClassificationResponse,
    MisconfiguredCredential,
    ServiceUnavailable,
)
from src.application.interfaces.classifier import ClassificationRequest
from src.config.settings import Settings
from src.infrastructure.services.openai_service import OpenAIService, build_classifier

REQUEST = ClassificationRequest(instruction="classify", report_json='{"name": "R"}')
OPENAI_URL = "https://api.openai.com/v1/chat/completions"


def _client(create):
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


async def test_classify_sends_instruction_and_report_in_json_mode():
    calls = []

    async def create(**kwargs):
        calls.append(kwargs)
        return _completion('{"ok": true}')

    service = OpenAIService("key", model="gpt-test", temperature=0.0, client=_client(create))
    raw = await service.classify(REQUEST)

    assert raw == '{"ok": true}'
    assert len(calls) == 1
    assert calls[0]["model"] == "gpt-test"
    assert calls[0]["response_format"] == {"type": "json_object"}
    assert calls[0]["messages"] == [
        {"role": "system", "content": "classify"},
        {"role": "user", "content": '{"name": "R"}'},
    ]


async def test_rejected_key_maps_to_misconfigured_credential():
    async def create(**kwargs):
        request = httpx.Request("POST", OPENAI_URL)
        raise openai.AuthenticationError(
            "bad key", response=httpx.Response(401, request=request), body=None
        )

    service = OpenAIService("key", client=_client(create))
    with pytest.raises(MisconfiguredCredential):
        await service.classify(REQUEST)


async def test_transport_failure_maps_to_service_unavailable():
    calls = []

    async def create(**kwargs):
        calls.append(kwargs)
        raise openai.APIConnectionError(request=httpx.Request("POST", OPENAI_URL))

    service = OpenAIService("key", client=_client(create))
    with pytest.raises(ServiceUnavailable) as exc_info:
        await service.classify(REQUEST)
    assert not isinstance(exc_info.value, MisconfiguredCredential)
    assert len(calls) == 1


async def test_empty_completion_is_invalid():
    async def create(**kwargs):
        return _completion(None)

    service = OpenAIService("key", client=_client(create))
    with pytest.raises(InvalidClassificationResponse):
        await service.classify(REQUEST)


def test_build_classifier_requires_api_key():
    settings = Settings.model_validate({"database_url": "sqlite+aiosqlite:///x.db"})
    assert build_classifier(settings) is None

    configured = Settings.model_validate(
        {"database_url": "sqlite+aiosqlite:///x.db", "openai_api_key": "sk-test"}
    )
    service = build_classifier(configured)
    assert isinstance(service, OpenAIService)
    assert service.model == "gpt-4o-mini"
    assert service.client.max_retries == 0
