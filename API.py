from fastapi import FastAPI, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

import config
from log import setup_logging
from schemas import AnalysisRequest, AnalysisResult
from catalog import suggest
import analysis_service

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PillPal AI",
    description="AI-powered drug interaction assistant"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/analyze", response_model=AnalysisResult)
async def analyze(request: AnalysisRequest):
    """
    Analyze a list of medications for interactions.

    Expects: {"medications": [{"name": "Warfarin", "dosage": "5mg"}, ...]}
    Returns: {"summary": "...", "error": null} or {"summary": null, "error": "..."}
    """
    logger.info(f"📝 Analysis requested for {len(request.medications)} medications")
    # The LLM call is blocking, keep it off the event loop
    return await run_in_threadpool(analysis_service.analyze, request)


@app.get("/suggestions")
def suggestions(q: str = Query("", description="Typed medication name prefix")):
    """Autocomplete for the medication name input."""
    return {"query": q, "suggestions": suggest(q)}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "PillPal AI"}


if __name__ == "__main__":
    uvicorn.run(
        "API:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=True
    )
