"""Tests for prompt building, reply parsing and the Gemini client wrapper."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest

from tritranslate.app import translation_client
from tritranslate.app.translation_client import (
    GENERATION_CONFIG,
    SYSTEM_INSTRUCTION,
    GeminiTranslationClient,
    MalformedModelOutput,
    TranslationFailed,
    build_prompt,
    parse_translations,
)


class FakeModel:
    """Mimics ``genai.GenerativeModel.generate_content_async``."""

    def __init__(self, reply: str | None = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate_content_async(self, prompt: str) -> SimpleNamespace:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.reply)


def test_build_prompt_embeds_text_and_codes() -> None:
    prompt = build_prompt('Say "hi"', ["es", "fr", "de"])

    assert prompt.startswith('Translate the following text: "Say "hi"" into the following languages: es, fr, de.')
    assert "JSON object with language codes as keys" in prompt


def test_generation_config_requests_json() -> None:
    assert GENERATION_CONFIG == {"temperature": 1.0, "top_p": 0.95, "response_mime_type": "application/json"}
    assert "language codes as keys" in SYSTEM_INSTRUCTION


def test_parse_translations_keeps_requested_order() -> None:
    raw = '{"de": "Hallo Welt", "es": "Hola Mundo", "fr": "Bonjour le monde"}'

    result = parse_translations(raw, ["es", "fr", "de"])

    assert list(result) == ["es", "fr", "de"]
    assert result["fr"] == "Bonjour le monde"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "",
        '["Hola", "Bonjour", "Hallo"]',
        '{"es": "Hola", "fr": "Bonjour"}',
        '{"es": "Hola", "fr": "Bonjour", "de": "Hallo", "it": "Ciao"}',
        '{"es": "Hola", "fr": {"text": "Bonjour"}, "de": "Hallo"}',
    ],
)
def test_parse_translations_rejects_malformed_replies(raw: str) -> None:
    with pytest.raises(MalformedModelOutput):
        parse_translations(raw, ["es", "fr", "de"])


def test_malformed_output_is_a_translation_failure() -> None:
    assert issubclass(MalformedModelOutput, TranslationFailed)


def test_client_translate_success() -> None:
    model = FakeModel(reply='{"es": "Hola Mundo", "fr": "Bonjour le monde", "de": "Hallo Welt"}')
    client = GeminiTranslationClient(api_key="test-key", model=model)

    result = asyncio.run(client.translate("Hello World", ["es", "fr", "de"]))

    assert result == {"es": "Hola Mundo", "fr": "Bonjour le monde", "de": "Hallo Welt"}
    assert model.prompts == [build_prompt("Hello World", ["es", "fr", "de"])]


def test_client_wraps_model_errors_without_retry() -> None:
    model = FakeModel(error=ConnectionError("network down"))
    client = GeminiTranslationClient(api_key="test-key", model=model)

    with pytest.raises(TranslationFailed) as excinfo:
        asyncio.run(client.translate("Hello", ["es", "fr", "de"]))

    assert isinstance(excinfo.value.__cause__, ConnectionError)
    assert len(model.prompts) == 1


def test_client_raises_on_non_json_reply() -> None:
    client = GeminiTranslationClient(api_key="test-key", model=FakeModel(reply="Hola!"))

    with pytest.raises(MalformedModelOutput):
        asyncio.run(client.translate("Hello", ["es", "fr", "de"]))


def test_client_without_api_key_fails_at_call_time() -> None:
    client = GeminiTranslationClient(api_key=None)

    with pytest.raises(TranslationFailed, match="GEMINI_API_KEY"):
        asyncio.run(client.translate("Hello", ["es", "fr", "de"]))


def test_client_builds_gemini_model_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """The SDK model is configured with the fixed settings and reused."""
    created: list[dict[str, object]] = []
    configured: list[str] = []
    model = FakeModel(reply='{"es": "Hola", "fr": "Salut", "de": "Hallo"}')

    def fake_generative_model(**kwargs: object) -> FakeModel:
        created.append(kwargs)
        return model

    monkeypatch.setattr(translation_client.genai, "configure", lambda api_key: configured.append(api_key))
    monkeypatch.setattr(translation_client.genai, "GenerativeModel", fake_generative_model)
    client = GeminiTranslationClient(api_key="test-key", model_name="gemini-test")

    asyncio.run(client.translate("Hi", ["es", "fr", "de"]))
    asyncio.run(client.translate("Hi", ["es", "fr", "de"]))

    assert configured == ["test-key"]
    assert created == [
        {
            "model_name": "gemini-test",
            "generation_config": GENERATION_CONFIG,
            "system_instruction": SYSTEM_INSTRUCTION,
        }
    ]
    assert len(model.prompts) == 2
