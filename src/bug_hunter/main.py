"""FastAPI application for bug-hunter."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .analyzer import analyze, list_supported_languages
from .config import Settings
from .models import Analysis, AnalyzeRequest, AnalyzeResponse
from .store import AnalysisStore

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = Settings.from_env()
store = AnalysisStore(max_size=settings.history_size)

app = FastAPI(
    title="Bug Hunter",
    description="Pattern-based bug and vulnerability detection for source snippets in 13 languages",
    version="0.1.0",
)

# CORS - allow common development origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8000",
    ],
    allow_methods=["POST", "GET", "DELETE"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/languages")
async def languages():
    """List the language ids that have a rule set."""
    return {"languages": sorted(list_supported_languages())}


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_code(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    Scan a code snippet for bugs.

    - **code**: Source text to scan
    - **language**: Language id, see /languages
    """
    if not request.code or not request.language:
        raise HTTPException(status_code=400, detail="Code and language are required")

    code_size = len(request.code.encode("utf-8"))
    if code_size > settings.max_code_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Code exceeds maximum size of {settings.max_code_bytes} bytes",
        )

    try:
        logger.info(f"Analyzing {code_size} bytes of {request.language}")
        result = analyze(request.code, request.language)
    except Exception as e:
        logger.error(f"Analysis failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze code")

    try:
        analysis_id = store.save(Analysis(
            code=request.code,
            language=request.language,
            bugs=result.bugs,
            summary=result.summary,
        ))
    except Exception as e:
        logger.error(f"Failed to save analysis: {e}")
        return AnalyzeResponse(
            bugs=result.bugs,
            summary=result.summary,
            warning="Results not saved to database",
        )

    return AnalyzeResponse(id=analysis_id, bugs=result.bugs, summary=result.summary)


@app.get("/history")
async def history():
    """Most recent analyses, newest first, without source code."""
    try:
        return {"analyses": store.list_recent()}
    except Exception as e:
        logger.error(f"Failed to fetch history: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch history")


@app.get("/history/{analysis_id}")
async def get_analysis(analysis_id: str):
    """Fetch one stored analysis, including its source code."""
    analysis = store.get(analysis_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return {"analysis": analysis}


@app.delete("/history/{analysis_id}")
async def delete_analysis(analysis_id: str):
    """Delete one stored analysis."""
    if not store.delete(analysis_id):
        raise HTTPException(status_code=404, detail="Analysis not found")
    return {"success": True}
