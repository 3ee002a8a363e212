import os

from dotenv import load_dotenv

load_dotenv()

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_gemini_api_key() -> str | None:
    return os.getenv("GEMINI_API_KEY") or None
