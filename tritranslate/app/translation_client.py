"""Gemini-backed translation into several languages at once.

The client sends one prompt per call and expects the model to answer with a
flat JSON object keyed by the requested language codes, e.g.
``{"es": "Hola", "fr": "Bonjour", "de": "Hallo"}``.
"""

import json
import logging
from functools import lru_cache
from typing import Any

import google.generativeai as genai

from .config import GEMINI_MODEL, get_gemini_api_key

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "Format the translation results as JSON with language codes as keys and translated texts as values. "
    'Example: {"es":"Hola", "fr":"Bonjour"}'
)

GENERATION_CONFIG: dict[str, Any] = {
    "temperature": 1.0,
    "top_p": 0.95,
    "response_mime_type": "application/json",
}


class TranslationFailed(Exception):
    pass


class MalformedModelOutput(TranslationFailed):
    pass


def build_prompt(text: str, target_languages: list[str]) -> str:
    return (
        f'Translate the following text: "{text}" into the following languages: '
        f"{', '.join(target_languages)}. Provide the translations as a JSON object "
        "with language codes as keys and translated texts as values."
    )


def parse_translations(raw: str, target_languages: list[str]) -> dict[str, str]:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise MalformedModelOutput("Model reply is not valid JSON.") from exc

    if not isinstance(payload, dict) or not all(isinstance(value, str) for value in payload.values()):
        raise MalformedModelOutput("Model reply is not a flat mapping of strings.")
    if set(payload) != set(target_languages):
        raise MalformedModelOutput(
            f"Model reply keys {sorted(payload)} do not match requested {sorted(target_languages)}."
        )
    return {code: payload[code] for code in target_languages}


class GeminiTranslationClient:
    def __init__(self, api_key: str | None, model_name: str = GEMINI_MODEL, model: Any | None = None) -> None:
        self.model_name = model_name
        self._api_key = api_key
        self._model = model

    def _get_model(self) -> Any:
        if self._model is None:
            if not self._api_key:
                raise TranslationFailed("GEMINI_API_KEY is not configured.")
            genai.configure(api_key=self._api_key)
            self._model = genai.GenerativeModel(
                model_name=self.model_name,
                generation_config=GENERATION_CONFIG,
                system_instruction=SYSTEM_INSTRUCTION,
            )
        return self._model

    async def translate(self, text: str, target_languages: list[str]) -> dict[str, str]:
        """Translate ``text`` into every code in ``target_languages``.

        Raises ``TranslationFailed`` for transport and model errors and its
        subclass ``MalformedModelOutput`` when the reply has the wrong shape.
        Nothing is retried.
        """
        prompt = build_prompt(text, target_languages)
        try:
            model = self._get_model()
            response = await model.generate_content_async(prompt)
            raw = response.text
        except TranslationFailed:
            raise
        except Exception as exc:
            raise TranslationFailed(f"{self.model_name} request failed: {exc}") from exc

        logger.debug("Model %s replied with %d characters", self.model_name, len(raw or ""))
        return parse_translations(raw, target_languages)


@lru_cache
def get_translation_client() -> GeminiTranslationClient:
    return GeminiTranslationClient(api_key=get_gemini_api_key())
