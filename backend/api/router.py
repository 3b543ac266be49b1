import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    CompareRequest,
    ImproveRequest,
    QuickAnalyzeRequest,
    QuickFixRequest,
    ScoreRequest,
)
from models.responses import (
    AnalysisResponse,
    CompareResponse,
    ImproveResponse,
    ProfileResponse,
    QuickFixResponse,
)
from models.schemas.ats_result import ScoreReport
from services import gemini_client, resume_analyzer, text_extractor
from services.ats_patterns import DEFAULT_PATTERNS
from services.ats_scorer import score_resume
from services.quick_fix import QuickFixError, apply_quick_fix
from services.scoring_profile import STRICT_PROFILE

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
    }


@router.get("/profile", response_model=ProfileResponse)
async def profile():
    return ProfileResponse(
        name=STRICT_PROFILE.name,
        category_max=dict(STRICT_PROFILE.category_max),
        max_total=STRICT_PROFILE.max_total,
        quantifier_target=STRICT_PROFILE.quantifier_target,
        min_words=STRICT_PROFILE.min_words,
        max_pages=STRICT_PROFILE.max_pages,
        sections=list(DEFAULT_PATTERNS.section_names),
    )


@router.post("/score", response_model=ScoreReport)
async def score(body: ScoreRequest):
    # Live-edit endpoint: called on every (debounced) change, not rate limited
    return score_resume(body.resume_text)


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.analyze_rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
):
    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = await text_extractor.extract_upload(resume_file.filename or "", content)
    except text_extractor.UnsupportedFileType as e:
        raise HTTPException(status_code=400, detail=str(e))
    except text_extractor.ExtractionUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        logger.exception("Failed to extract text from %s", resume_file.filename)
        raise HTTPException(status_code=400, detail="Could not parse the uploaded file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from the file")

    return await resume_analyzer.analyze(resume_text[: settings.max_text_chars])


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.analyze_rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return await resume_analyzer.analyze(body.resume_text, include_ai=body.include_ai)


@router.post("/quick-fix", response_model=QuickFixResponse)
async def quick_fix(body: QuickFixRequest):
    try:
        fixed = apply_quick_fix(body.resume_text, body.issue_id, body.value)
    except QuickFixError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return QuickFixResponse(resume_text=fixed, report=score_resume(fixed))


@router.post("/compare", response_model=CompareResponse)
async def compare(body: CompareRequest):
    return resume_analyzer.compare_revisions(body.before, body.after)


@router.post("/improve", response_model=ImproveResponse)
@limiter.limit(settings.analyze_rate_limit)
async def improve(request: Request, body: ImproveRequest):
    return await resume_analyzer.improve(body.resume_text, body.instruction)
