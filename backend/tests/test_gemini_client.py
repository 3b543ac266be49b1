from unittest.mock import MagicMock, patch

import pytest
from google.genai import types

from services import gemini_client


def _client_returning(text):
    client = MagicMock()
    client.models.generate_content.return_value = MagicMock(text=text)
    return client


def test_not_configured_without_key():
    with patch.object(gemini_client.settings, "gemini_api_key", ""):
        assert gemini_client.is_configured() is False
        assert gemini_client.get_client() is None


def test_disabled_by_setting():
    with patch.object(gemini_client.settings, "gemini_api_key", "key"), \
            patch.object(gemini_client.settings, "ai_critique_enabled", False):
        assert gemini_client.is_configured() is False


@pytest.mark.asyncio
async def test_generate_json_strips_fences():
    client = _client_returning('```json\n{"summary": "ok"}\n```')
    with patch("services.gemini_client.get_client", return_value=client):
        assert await gemini_client.generate_json("prompt") == {"summary": "ok"}


@pytest.mark.asyncio
async def test_generate_json_rejects_non_object():
    with patch("services.gemini_client.get_client", return_value=_client_returning("[1, 2]")):
        assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_text_strips_fences():
    client = _client_returning("```markdown\n# Jane Smith\n```")
    with patch("services.gemini_client.get_client", return_value=client):
        assert await gemini_client.generate_text("prompt") == "# Jane Smith"


@pytest.mark.asyncio
async def test_generate_text_api_error():
    client = MagicMock()
    client.models.generate_content.side_effect = RuntimeError("quota exceeded")
    with patch("services.gemini_client.get_client", return_value=client):
        assert await gemini_client.generate_text("prompt") is None


@pytest.mark.asyncio
async def test_transcribe_document_sends_inline_bytes():
    client = _client_returning("Jane Smith\nSkills\n")
    with patch("services.gemini_client.get_client", return_value=client):
        text = await gemini_client.transcribe_document(b"\x89PNG", "image/png")
    assert text == "Jane Smith\nSkills"
    part = client.models.generate_content.call_args.kwargs["contents"][0]
    assert isinstance(part, types.Part)
    assert part.inline_data.mime_type == "image/png"
    assert part.inline_data.data == b"\x89PNG"


@pytest.mark.asyncio
async def test_transcribe_document_empty_reply():
    with patch("services.gemini_client.get_client", return_value=_client_returning("  ")):
        assert await gemini_client.transcribe_document(b"data", "image/jpeg") is None
