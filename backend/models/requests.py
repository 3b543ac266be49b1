from pydantic import BaseModel, Field


class ScoreRequest(BaseModel):
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
    include_ai: bool = Field(True, description="Request the qualitative AI critique")


class QuickFixRequest(BaseModel):
    resume_text: str = Field("", max_length=50000)
    issue_id: str = Field(..., max_length=100, description="Id of the issue to fix, e.g. 'missing-email'")
    value: str = Field(..., max_length=5000, description="Value typed by the user")


class CompareRequest(BaseModel):
    before: str = Field(..., max_length=50000, description="Previous revision")
    after: str = Field(..., max_length=50000, description="Edited revision")


class ImproveRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
    instruction: str = Field(
        "Make the whole resume more impactful and ATS-friendly",
        min_length=1,
        max_length=2000,
        description="What the rewrite should focus on",
    )
