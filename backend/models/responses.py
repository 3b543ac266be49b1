from typing import Literal

from pydantic import BaseModel

from models.schemas.ats_result import AtsScoreResult, Issue, ScoreReport


class AiAnalysis(BaseModel):
    summary: str = ""
    strengths: list[str] = []
    missing_keywords: list[str] = []
    tone_check: str = ""


class AnalysisResponse(BaseModel):
    score: AtsScoreResult
    issues: list[Issue] = []
    fixable_issue_ids: list[str] = []
    ai_analysis: AiAnalysis | None = None
    degraded: bool = False


class QuickFixResponse(BaseModel):
    resume_text: str
    report: ScoreReport


class DiffSegment(BaseModel):
    op: Literal["equal", "insert", "delete"]
    text: str


class CompareResponse(BaseModel):
    before: AtsScoreResult
    after: AtsScoreResult
    total_delta: int = 0
    breakdown_delta: dict[str, int] = {}
    resolved_issues: list[str] = []
    new_issues: list[str] = []
    diff: list[DiffSegment] = []


class ProfileResponse(BaseModel):
    name: str
    category_max: dict[str, int]
    max_total: int
    quantifier_target: int
    min_words: int
    max_pages: int
    sections: list[str] = []


class ImproveResponse(BaseModel):
    resume_text: str
    report: ScoreReport
    total_delta: int = 0
    diff: list[DiffSegment] = []
    degraded: bool = False
