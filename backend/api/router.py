import logging
from datetime import datetime, timezone

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeTextRequest
from models.responses import AnalysisPayload, AnalyzeResponse, AtsReport
from services import ats_scorer, text_extractor
from services.vocabulary import get_vocabulary

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

SERVICE_NAME = "Resume ATS Analyzer"
SERVICE_MODE = "heuristic"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _envelope(report: AtsReport) -> AnalyzeResponse:
    return AnalyzeResponse(
        success=True,
        analysis=AnalysisPayload(**report.model_dump(), timestamp=_timestamp()),
    )


def _fail(status_code: int, error: str, message: str) -> HTTPException:
    """HTTPException carrying the error envelope fields (see main.http_error_handler)."""
    return HTTPException(status_code=status_code, detail={"error": error, "message": message})


def _check_text_length(text: str) -> None:
    if len(text.strip()) < settings.min_text_length:
        raise _fail(400, "Empty File", "File contains no readable text")


@router.get("/")
async def root():
    return {
        "message": f"{SERVICE_NAME} API",
        "version": "2.0",
        "endpoint": "POST /api/analyze",
        "mode": SERVICE_MODE,
    }


@router.get("/health")
async def health():
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": _timestamp(),
        "mode": SERVICE_MODE,
    }


@router.post("/api/analyze", response_model=AnalyzeResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, resume: UploadFile | None = File(None)):
    if resume is None or not resume.filename:
        raise _fail(400, "No file uploaded", "Please select a resume file")

    # Read and validate size
    content = await resume.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise _fail(
            413,
            "File Too Large",
            f"File size exceeds {settings.max_upload_size_mb}MB limit",
        )

    logger.info("Processing upload: %s", resume.filename)
    try:
        resume_text = text_extractor.extract_text(content, resume.filename, resume.content_type)
    except text_extractor.ExtractionError as e:
        raise _fail(400, "File Error", str(e))

    _check_text_length(resume_text)
    report = ats_scorer.analyze(resume_text, vocabulary=get_vocabulary())
    logger.info("Analysis complete: %s (raw %s)", report.ats_score, report.raw_score)
    return _envelope(report)


@router.post("/api/analyze/text", response_model=AnalyzeResponse)
@limiter.limit(settings.rate_limit)
async def analyze_text(request: Request, body: AnalyzeTextRequest):
    _check_text_length(body.resume_text)
    return _envelope(ats_scorer.analyze(body.resume_text, vocabulary=get_vocabulary()))
