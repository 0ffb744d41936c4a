"""HTTP routes exposing the analyzer."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from sentiru import __version__
from sentiru.analysis.analyzer import AnalysisResult, SentimentAnalyzer
from sentiru.analysis.samples import run_samples


SERVICE_NAME = "Russian Sentiment Analysis API"
MISSING_TEXT_ERROR = "Text parameter is required"

router = APIRouter(prefix="/api")


def get_analyzer(request: Request) -> SentimentAnalyzer:
    return request.app.state.analyzer


def _missing_text() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": MISSING_TEXT_ERROR})


def _stamped(result: AnalysisResult) -> dict[str, object]:
    payload = result.to_dict()
    payload["timestamp"] = datetime.now(timezone.utc).isoformat()
    return payload


@router.get("/sentiment", tags=["sentiment"])
def analyze_sentiment(
    text: str | None = Query(None, description="Russian text to classify"),
    analyzer: SentimentAnalyzer = Depends(get_analyzer),
):
    if text is None or not text.strip():
        return _missing_text()
    return _stamped(analyzer.analyze(text))


@router.get("/health", tags=["health"])
def health():
    return {"status": "UP", "service": SERVICE_NAME, "version": __version__}


@router.get("/model/info", tags=["model"])
def model_info(analyzer: SentimentAnalyzer = Depends(get_analyzer)):
    return analyzer.describe_lexicon().to_dict()


@router.get("/debug", tags=["sentiment"])
def debug_analysis(
    text: str | None = Query(None, description="Text to trace through normalization and matching"),
    analyzer: SentimentAnalyzer = Depends(get_analyzer),
):
    if text is None or not text.strip():
        return _missing_text()

    report = analyzer.debug(text)
    payload = report.to_dict()
    payload["analysis_result"] = _stamped(report.analysis_result)
    return payload


@router.get("/test", tags=["sentiment"])
def sample_analysis(analyzer: SentimentAnalyzer = Depends(get_analyzer)):
    return {key: _stamped(result) for key, result in run_samples(analyzer).items()}


def create_app(analyzer: SentimentAnalyzer) -> FastAPI:
    """Build the FastAPI application around a shared analyzer."""
    app = FastAPI(title=SERVICE_NAME, version=__version__)
    app.state.analyzer = analyzer
    app.include_router(router)
    return app
