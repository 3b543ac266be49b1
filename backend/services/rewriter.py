"""AI rewrite of a résumé following a free-form instruction."""

import logging

from services import gemini_client

logger = logging.getLogger(__name__)

MAX_REWRITE_CHARS = 12000


def build_improve_prompt(resume_text: str, instruction: str) -> str:
    return f"""You are an expert Resume Writer and ATS Optimization Specialist.

TASK: Rewrite the following resume content to be more impactful, concise, and ATS-friendly.
INSTRUCTION: {instruction}

ORIGINAL CONTENT:
---
{resume_text[:MAX_REWRITE_CHARS]}
---

OUTPUT REQUIREMENTS:
- Use STRICT Markdown formatting.
- Use # for Name/Title, ## for Sections, ### for Roles/Companies, and - for bullet points.
- Keep every contact detail (email, phone, LinkedIn) from the original.
- Use strong action verbs.
- Quantify achievements where numbers are present or can be inferred (e.g. "Managed team of 5").
- Replace any skill bars, star ratings or strength graphs with plain lists.
- Return ONLY the rewritten markdown. Do not add conversational filler."""


async def improve_resume(resume_text: str, instruction: str) -> str | None:
    """Return the rewritten résumé, or None when the model gave nothing usable."""
    rewritten = await gemini_client.generate_text(build_improve_prompt(resume_text, instruction))
    if rewritten is None:
        return None
    logger.info("Rewrote resume: %d -> %d chars", len(resume_text), len(rewritten))
    return rewritten
