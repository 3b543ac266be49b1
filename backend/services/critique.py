"""Qualitative AI critique of a résumé, independent of the ATS score."""

import logging

from models.responses import AiAnalysis
from services import gemini_client

logger = logging.getLogger(__name__)

MAX_PROMPT_CHARS = 10000


def build_critique_prompt(resume_text: str) -> str:
    """Single fixed prompt; the résumé is truncated to bound the context."""
    return f"""You are an expert resume reviewer.

Analyze the following resume for a general professional role.
Provide a summary, list 3-5 key strengths, identify missing critical keywords
(generic or inferred from the content), and evaluate the professional tone.

RESUME:
---
{resume_text[:MAX_PROMPT_CHARS]}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "summary": "<2-sentence executive summary of the candidate>",
  "strengths": ["<3-5 strong points>"],
  "missing_keywords": ["<5 likely missing keywords for the candidate's industry>"],
  "tone_check": "<brief critique of the resume's voice, e.g. 'Too passive'>"
}}"""


def _as_str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def parse_critique(data: dict) -> AiAnalysis | None:
    """Validate a raw model response. Returns None when nothing usable came back."""
    summary = str(data.get("summary") or "").strip()
    # Accept camelCase keys some model versions emit
    missing = data.get("missing_keywords", data.get("missingKeywords"))
    tone = data.get("tone_check", data.get("toneCheck"))

    analysis = AiAnalysis(
        summary=summary,
        strengths=_as_str_list(data.get("strengths")),
        missing_keywords=_as_str_list(missing),
        tone_check=str(tone or "").strip(),
    )
    if not analysis.summary and not analysis.strengths:
        logger.warning("AI critique response had no summary or strengths")
        return None
    return analysis


async def critique_resume(resume_text: str) -> AiAnalysis | None:
    data = await gemini_client.generate_json(build_critique_prompt(resume_text))
    if data is None:
        return None
    return parse_critique(data)
