# /app/services/gemini_service.py

"""
The single boundary between the backend and the Gemini API.

Every provider-specific failure (`google.api_core` exceptions, transport
errors, blocked or empty candidates) is translated here into the backend's
own `UpstreamError` / `GenerationEmptyError`. Nothing past this module ever
sees a Google exception type.
"""

import logging
from typing import Any, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from app.core import config
from app.core.exceptions import UpstreamError, UpstreamErrorKind, GenerationEmptyError

logger = logging.getLogger(__name__)

API_KEY_HELP = (
    "Please check your GEMINI_API_KEY in the .env file. "
    "Get your API key at https://makersuite.google.com/app/apikey"
)
QUOTA_HELP = (
    "You have exceeded your Gemini API quota. "
    "Please check your usage at https://makersuite.google.com/app/apikey"
)


# --- ERROR NORMALIZATION ---

def _upstream_status(exc: Exception) -> Optional[int]:
    code = getattr(exc, "code", None)
    if isinstance(code, int) and 400 <= code < 600:
        return int(code)
    return None


def classify_api_error(exc: Exception) -> UpstreamError:
    """Maps any failure raised by the Gemini call onto one UpstreamError kind."""
    message = str(getattr(exc, "message", None) or exc)
    upstream_status = _upstream_status(exc)

    if (
        isinstance(exc, google_exceptions.Unauthenticated)
        or "API_KEY_INVALID" in message
        or "API key" in message
    ):
        return UpstreamError(UpstreamErrorKind.INVALID_CREDENTIALS, API_KEY_HELP, upstream_status)

    if (
        isinstance(exc, google_exceptions.ResourceExhausted)
        or upstream_status == 429
        or "quota" in message.lower()
    ):
        return UpstreamError(UpstreamErrorKind.QUOTA_EXCEEDED, QUOTA_HELP, upstream_status)

    return UpstreamError(UpstreamErrorKind.GENERIC, message or "Failed to generate code", upstream_status)


def extract_text(response: Any) -> str:
    """Returns the first candidate's first text part, trimmed, or '' when there is none."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return ""
    text = getattr(parts[0], "text", None) or ""
    return text.strip()


# --- SDK CONFIGURATION ---

# The key the SDK was last configured with; None until the first call.
_configured_api_key: Optional[str] = None


def _ensure_configured() -> None:
    """Configures the SDK once per process, again only if the key changes."""
    global _configured_api_key
    if _configured_api_key != config.GEMINI_API_KEY:
        genai.configure(api_key=config.GEMINI_API_KEY)
        _configured_api_key = config.GEMINI_API_KEY


# --- CORE GENERATIVE FUNCTION ---

async def generate_code_text(prompt: str) -> str:
    """
    Sends one prompt to Gemini and returns the trimmed text of the answer.

    Exactly one request is made. Failures are raised immediately, never
    retried.
    """
    if not config.GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is not set; refusing to call the Gemini API.")
        raise UpstreamError(UpstreamErrorKind.INVALID_CREDENTIALS, API_KEY_HELP)

    try:
        _ensure_configured()
        model = genai.GenerativeModel(config.GEMINI_MODEL)
        response = await model.generate_content_async(prompt)
    except Exception as e:
        logger.error(
            "Gemini API call failed: %s (type=%s, status=%s)",
            e, type(e).__name__, _upstream_status(e),
        )
        raise classify_api_error(e) from e

    text = extract_text(response)
    if not text:
        feedback = getattr(response, "prompt_feedback", None)
        logger.warning("Gemini API returned no usable text. prompt_feedback=%s", feedback)
        raise GenerationEmptyError("The model returned an empty response. Please try rephrasing your prompt.")
    return text
