"""Orchestrator: deterministic ATS score + optional AI critique.

Pipeline:
1. ATS scoring (pure, always succeeds)
2. Quick-fix annotation of issue ids
3. Gemini qualitative critique (optional, enhances results)
4. Merge into one report; AI failure only marks the report degraded

``improve`` rewrites the text with Gemini and rescores it the same way.
"""

import logging

from models.responses import AnalysisResponse, CompareResponse, ImproveResponse
from services import critique, gemini_client, rewriter
from services.ats_scorer import score_resume
from services.quick_fix import is_fixable
from services.text_diff import diff_words

logger = logging.getLogger(__name__)


async def analyze(resume_text: str, include_ai: bool = True) -> AnalysisResponse:
    """Run the full analysis for one résumé text."""
    report = score_resume(resume_text)
    fixable = [issue.id for issue in report.issues if is_fixable(issue.id)]

    ai_analysis = None
    degraded = False
    if include_ai:
        if gemini_client.is_configured():
            ai_analysis = await critique.critique_resume(resume_text)
            if ai_analysis is None:
                logger.warning("AI critique unavailable, returning ATS score only")
                degraded = True
        else:
            logger.info("AI critique requested but Gemini is not configured")
            degraded = True

    return AnalysisResponse(
        score=report.score,
        issues=list(report.issues),
        fixable_issue_ids=fixable,
        ai_analysis=ai_analysis,
        degraded=degraded,
    )


def compare_revisions(before: str, after: str) -> CompareResponse:
    """Rescore two revisions and describe what changed between them."""
    old = score_resume(before)
    new = score_resume(after)

    old_breakdown = old.score.breakdown.model_dump()
    new_breakdown = new.score.breakdown.model_dump()
    old_ids = old.issue_ids()
    new_ids = new.issue_ids()

    return CompareResponse(
        before=old.score,
        after=new.score,
        total_delta=new.score.total - old.score.total,
        breakdown_delta={k: new_breakdown[k] - old_breakdown[k] for k in new_breakdown},
        resolved_issues=[i for i in old_ids if i not in new_ids],
        new_issues=[i for i in new_ids if i not in old_ids],
        diff=diff_words(before, after),
    )


async def improve(resume_text: str, instruction: str) -> ImproveResponse:
    """AI rewrite, rescored and diffed against the input.

    Without a usable rewrite the input comes back unchanged and the response
    is marked degraded.
    """
    rewritten = None
    if gemini_client.is_configured():
        rewritten = await rewriter.improve_resume(resume_text, instruction)
        if rewritten is None:
            logger.warning("AI rewrite unavailable, returning the original text")
    else:
        logger.info("AI rewrite requested but Gemini is not configured")

    text = resume_text if rewritten is None else rewritten
    report = score_resume(text)
    return ImproveResponse(
        resume_text=text,
        report=report,
        total_delta=report.score.total - score_resume(resume_text).score.total,
        diff=diff_words(resume_text, text),
        degraded=rewritten is None,
    )
