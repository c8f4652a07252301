"""
INTERACTION ANALYSIS SERVICE
Validates a medication list, asks the LLM for an interaction summary and
returns an AnalysisResult with either the summary or a user-facing error.

Flow:
1. Reject an empty medication list locally (no model call)
2. Render the prompt from prompt_builder.py
3. One completion through llm_client.py
4. Validate the output shape ({"summary": str})

Every fault from steps 2-4 is logged once and collapsed into one generic message.
"""
from typing import Any, Callable, Dict, Optional
import logging

from schemas import AnalysisRequest, AnalysisResult, InteractionSummary
from prompt_builder import build_prompt
import llm_client

logger = logging.getLogger(__name__)

NO_MEDICATIONS_ERROR = "No medications provided for analysis."
UNEXPECTED_ERROR = "An unexpected error occurred while analyzing interactions. Please try again later."

CompleteFn = Callable[[str], Dict[str, Any]]


def analyze(request: AnalysisRequest, complete: Optional[CompleteFn] = None) -> AnalysisResult:
    """
    Analyze a list of medications for interactions.

    Args:
        request: Medications and dosages to check
        complete: Completion function (prompt -> {"summary": ...}); defaults to llm_client.complete

    Returns:
        AnalysisResult with exactly one of summary / error set
    """
    if not request.medications:
        logger.info("[ANALYZE] Empty medication list, skipping model call")
        return AnalysisResult.failure(NO_MEDICATIONS_ERROR)

    if complete is None:
        complete = llm_client.complete

    try:
        logger.info(f"[ANALYZE] Checking {len(request.medications)} medications")
        prompt = build_prompt(request.medications)
        output = InteractionSummary.model_validate(complete(prompt))
    except Exception as e:
        logger.error(f"[ANALYZE] Error analyzing drug interactions: {e}", exc_info=True)
        return AnalysisResult.failure(UNEXPECTED_ERROR)

    logger.info(f"[ANALYZE] Summary received ({len(output.summary)} chars)")
    return AnalysisResult.success(output.summary)
