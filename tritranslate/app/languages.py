"""Target language catalog and the three-language picker."""

from dataclasses import dataclass

MAX_SELECTED_LANGUAGES = 3


@dataclass(frozen=True)
class Language:
    code: str
    name: str


LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("zh", "Chinese"),
    Language("hi", "Hindi"),
    Language("ar", "Arabic"),
    Language("bn", "Bengali"),
    Language("fr", "French"),
    Language("ru", "Russian"),
    Language("pt", "Portuguese"),
    Language("de", "German"),
    Language("ja", "Japanese"),
    Language("sw", "Swahili"),
    Language("fa", "Persian"),
    Language("ur", "Urdu"),
    Language("it", "Italian"),
    Language("ko", "Korean"),
    Language("vi", "Vietnamese"),
    Language("ta", "Tamil"),
    Language("tr", "Turkish"),
    Language("nl", "Dutch"),
)

LANGUAGE_NAMES: dict[str, str] = {language.code: language.name for language in LANGUAGES}


def get_language(code: str) -> Language | None:
    name = LANGUAGE_NAMES.get(code)
    return Language(code, name) if name is not None else None


class LanguageSelection:
    """Toggle set of language codes capped at ``MAX_SELECTED_LANGUAGES``.

    Adding a code while the selection is full is a no-op. The page script in
    ``static/app.js`` implements the same rules for the browser picker.
    """

    def __init__(self, limit: int = MAX_SELECTED_LANGUAGES) -> None:
        self.limit = limit
        self._codes: list[str] = []

    def add(self, code: str) -> bool:
        if code in self._codes or len(self._codes) >= self.limit:
            return False
        self._codes.append(code)
        return True

    def remove(self, code: str) -> bool:
        if code not in self._codes:
            return False
        self._codes.remove(code)
        return True

    def toggle(self, code: str) -> bool:
        """Flip ``code`` and return whether it is selected afterwards."""
        if self.remove(code):
            return False
        return self.add(code)

    def is_full(self) -> bool:
        return len(self._codes) >= self.limit

    def is_complete(self) -> bool:
        return len(self._codes) == self.limit

    def clear(self) -> None:
        self._codes.clear()

    @property
    def codes(self) -> list[str]:
        return list(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)
