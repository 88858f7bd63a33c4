"""
API endpoint for math/STEM explanations.
"""
from fastapi import APIRouter, HTTPException
from typing import Optional
import logging

from agent.explanation import ExplanationError
from app.core.openai_client import OpenAINotConfiguredError
from app.schemas.explanation import ExplanationRequest, ExplanationResponse
from app.schemas.keywords import ErrorResponse
from app.services.explanation_service import ExplanationService

router = APIRouter()
logger = logging.getLogger(__name__)

_service: Optional[ExplanationService] = None


def get_service() -> ExplanationService:
    """Service singleton instance"""
    global _service
    if _service is None:
        _service = ExplanationService()
    return _service


@router.post(
    "/explain",
    response_model=ExplanationResponse,
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def explain(request: ExplanationRequest):
    """
    Explain LaTeX/Markdown math content in plain language.
    """
    try:
        result = await get_service().explain(request.mathContent, model=request.model)
        return ExplanationResponse(**result)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OpenAINotConfiguredError as e:
        logger.error(f"Explanation unavailable: {str(e)}")
        raise HTTPException(status_code=503, detail="Explanation service is not configured")
    except ExplanationError as e:
        logger.error(f"Explanation failed: {str(e)}", exc_info=True)
        raise HTTPException(status_code=502, detail="Failed to generate explanation")
