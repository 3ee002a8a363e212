from typing import Any

from .languages import MAX_SELECTED_LANGUAGES

MAX_TEXT_LENGTH = 140


class TranslationRequestError(Exception):
    message = "Invalid translation request."
    status_code = 400

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidText(TranslationRequestError):
    message = f"Text is required and must be up to {MAX_TEXT_LENGTH} characters."


class InvalidLanguageCount(TranslationRequestError):
    message = f"Please select exactly {MAX_SELECTED_LANGUAGES} target languages."


def validate_text(text: Any) -> str:
    if not isinstance(text, str) or not text or len(text) > MAX_TEXT_LENGTH:
        raise InvalidText()
    return text


def validate_target_languages(target_languages: Any) -> list[str]:
    if not isinstance(target_languages, list) or len(target_languages) != MAX_SELECTED_LANGUAGES:
        raise InvalidLanguageCount()
    if not all(isinstance(code, str) and code.strip() for code in target_languages):
        raise InvalidLanguageCount()
    # Duplicates mean fewer than three distinct languages were picked.
    if len(set(target_languages)) != MAX_SELECTED_LANGUAGES:
        raise InvalidLanguageCount()
    return list(target_languages)


def validate_translation_request(text: Any, target_languages: Any) -> tuple[str, list[str]]:
    """Check a submission in order, stopping at the first failing rule."""
    return validate_text(text), validate_target_languages(target_languages)
