"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def is_configured() -> bool:
    return bool(settings.gemini_api_key) and settings.ai_critique_enabled


def get_client() -> genai.Client | None:
    global _client
    if not is_configured():
        logger.warning("No GEMINI_API_KEY set - AI critique disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.3,
                max_output_tokens=2048,
                response_mime_type="application/json",
            ),
        )
        if not response.text:
            logger.error("Empty response from Gemini")
            return None
        parsed = json.loads(_strip_code_fences(response.text))

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not isinstance(parsed, dict):
        logger.error("Gemini returned %s, expected a JSON object", type(parsed).__name__)
        return None
    return parsed


async def generate_text(prompt: str, max_output_tokens: int = 8192) -> str | None:
    """Send a prompt to Gemini and return the plain-text reply."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.4,
                max_output_tokens=max_output_tokens,
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not response.text or not response.text.strip():
        logger.error("Empty response from Gemini")
        return None
    return _strip_code_fences(response.text)


async def transcribe_document(data: bytes, mime_type: str) -> str | None:
    """Transcribe the text of an image or scanned PDF."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=[
                types.Part.from_bytes(data=data, mime_type=mime_type),
                "Extract all text from this document explicitly. Preserve the logical "
                "flow of sections (Experience, Education, etc.). Do not summarize, "
                "just transcribe.",
            ],
        )
    except Exception as e:
        logger.error("Gemini transcription error (%s): %s", mime_type, e)
        return None

    if not response.text or not response.text.strip():
        logger.error("Gemini returned no text for %s upload", mime_type)
        return None
    return response.text.strip()
