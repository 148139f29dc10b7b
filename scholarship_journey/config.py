import os
from typing import Optional

from dotenv import load_dotenv

from scholarship_journey.errors import ConfigurationError

load_dotenv()

GEMINI_API_BASE = os.getenv(
    "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
).rstrip("/")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-pro")


def get_timeout() -> Optional[float]:
    """Request timeout in seconds, or None to leave the call unbounded"""
    raw = os.getenv("GEMINI_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"GEMINI_TIMEOUT_SECONDS must be a number, got {raw!r}")


def get_api_key() -> str:
    """Read the Gemini API key at call time so a missing key fails loudly"""
    key = (os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or "").strip()
    if not key:
        raise ConfigurationError("GEMINI_API_KEY is not set")
    return key
