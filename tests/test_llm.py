from __future__ import annotations

import pytest

from reelsmith.core import config, llm
from reelsmith.core.errors import ConfigurationError
from reelsmith.schemas import get_schema

from fakes import FakeGenaiClient


def test_client_requires_credentials(monkeypatch) -> None:
    monkeypatch.setattr(llm, "_client", None)
    monkeypatch.setattr(config, "PROJECT_ID", None)
    monkeypatch.setattr(config, "GEMINI_API_KEY", "")

    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        llm.get_genai_client()


def test_plain_call_returns_text_and_applies_stop() -> None:
    client = FakeGenaiClient()
    client.text_responses = ["Hello there. END ignored"]
    model = llm.get_llm(model="gemini-test", client=client, system_instruction="Be brief")

    assert model.invoke("hi", stop=[" END"]) == "Hello there."

    _, call = client.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"] == ["hi"]
    assert call["config"].response_mime_type is None
    assert call["config"].temperature == 1


def test_schema_call_requests_json() -> None:
    client = FakeGenaiClient()
    client.json_responses = [{"analysis": "x", "style": "ad"}]
    model = llm.get_llm(client=client, gemini_configs={"temperature": 0.2})

    text = model.invoke("promote shoes", response_schema="orchestrator_agent")

    assert '"style": "ad"' in text
    _, call = client.calls[0]
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].temperature == 0.2
    assert call["config"].response_schema is not None


def test_unknown_schema_raises() -> None:
    with pytest.raises(ValueError):
        get_schema("missing_agent")
