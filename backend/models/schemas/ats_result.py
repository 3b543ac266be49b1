"""Deterministic ATS score output: breakdown, details and issues."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class IssueSeverity(str, Enum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    MINOR = "minor"


IssueCategory = Literal["format", "content", "ats", "keywords", "impact"]


class Issue(BaseModel):
    """One finding. ``id`` is a stable slug UI layers may key off."""

    model_config = ConfigDict(frozen=True)

    id: str
    category: IssueCategory
    severity: IssueSeverity
    message: str
    remediation: str


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    format: int = 0
    content: int = 0
    ats_compatibility: int = 0
    keywords: int = 0
    impact: int = 0


class AnalysisDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = 0
    page_count_estimate: int = 0
    email_detected: bool = False
    phone_detected: bool = False
    linkedin_detected: bool = False
    sections_found: tuple[str, ...] = ()


class AtsScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    breakdown: ScoreBreakdown
    details: AnalysisDetails


class ScoreReport(BaseModel):
    """Single return shape of the scoring engine."""

    model_config = ConfigDict(frozen=True)

    score: AtsScoreResult
    issues: tuple[Issue, ...] = ()

    def issue_ids(self) -> list[str]:
        return [issue.id for issue in self.issues]
