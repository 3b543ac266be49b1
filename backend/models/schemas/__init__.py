"""Pydantic contracts produced by the deterministic ATS scorer."""

from models.schemas.ats_result import (
    AnalysisDetails,
    AtsScoreResult,
    Issue,
    IssueCategory,
    IssueSeverity,
    ScoreBreakdown,
    ScoreReport,
)

__all__ = [
    "AnalysisDetails",
    "AtsScoreResult",
    "Issue",
    "IssueCategory",
    "IssueSeverity",
    "ScoreBreakdown",
    "ScoreReport",
]
