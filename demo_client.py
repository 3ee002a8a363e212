import argparse
import os
import sys
from typing import Any

import requests

from tritranslate.app.languages import LanguageSelection

TRITRANSLATE_URL = os.getenv("TRITRANSLATE_URL", "http://127.0.0.1:8000")


def list_languages(base_url: str = TRITRANSLATE_URL) -> list[dict[str, str]]:
    response = requests.get(f"{base_url}/api/languages", timeout=10)
    response.raise_for_status()
    return response.json()


def translate(text: str, target_languages: list[str], base_url: str = TRITRANSLATE_URL) -> dict[str, Any]:
    response = requests.post(
        f"{base_url}/api/translate",
        json={"text": text, "targetLanguages": target_languages},
        timeout=60,
    )
    if not response.ok:
        try:
            message = response.json().get("error")
        except ValueError:
            message = None
        raise RuntimeError(message or f"HTTP {response.status_code}")
    return response.json()["translations"]


def select_languages(codes: list[str]) -> LanguageSelection:
    selection = LanguageSelection()
    for code in codes:
        if not selection.add(code) and code not in selection:
            print(f"Ignoring {code}: {selection.limit} languages already selected.")
    return selection


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Translate text into three languages.")
    parser.add_argument("text", nargs="?", default="Hello World")
    parser.add_argument("--lang", dest="languages", action="append", default=[])
    parser.add_argument("--url", default=TRITRANSLATE_URL)
    parser.add_argument("--list", action="store_true", help="print available languages and exit")
    args = parser.parse_args(argv)

    if args.list:
        try:
            languages = list_languages(args.url)
        except requests.RequestException as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        for language in languages:
            print(f"{language['code']}\t{language['name']}")
        return 0

    selection = select_languages(args.languages or ["es", "fr", "de"])
    if not selection.is_complete():
        print(f"Please select exactly {selection.limit} target languages.", file=sys.stderr)
        return 2

    print(f"Translating {args.text!r} into {', '.join(selection.codes)}...")
    try:
        translations = translate(args.text, selection.codes, args.url)
    except (RuntimeError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for code, translated in translations.items():
        print(f"{code.upper()}: {translated}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
