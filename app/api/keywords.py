"""
API endpoints for STEM keyword detection.
Handles routing and validation only - business logic is in KeywordService.
"""
from fastapi import APIRouter, HTTPException
from typing import Optional
import logging

from agent.keyword_detection import KeywordDetectionError
from app.schemas.keywords import DetectRequest, DetectResponse, ErrorResponse, FieldsResponse
from app.services.keyword_service import KeywordService

router = APIRouter(prefix="/keywords")
logger = logging.getLogger(__name__)

# Service instance
_service: Optional[KeywordService] = None


def get_service() -> KeywordService:
    """Service singleton instance"""
    global _service
    if _service is None:
        _service = KeywordService()
    return _service


@router.get("")
async def describe_api():
    """
    Describe the keyword detection API.

    Returns:
        Endpoint list and an example request
    """
    return {
        "success": True,
        "name": "STEM Keyword Detection API",
        "version": "1.0.0",
        "description": "Detects STEM keywords in OCR words with position tracking",
        "endpoints": {
            "POST /api/ai/keywords/detect": {
                "description": "Detect keywords in a word array",
                "body": {
                    "words": "Array<{text, x, y, width, height, confidence?}>",
                    "targetFields": "string[] (optional) - STEM fields to search",
                    "minConfidence": "number (optional) - Minimum confidence threshold (0-1)",
                    "caseSensitive": "boolean (optional) - Case-sensitive matching",
                    "multiWordMatching": "boolean (optional) - Enable phrase matching",
                },
                "returns": {
                    "keywords": "Detected keywords with positions",
                    "statistics": "Detection statistics",
                    "config": "Effective detector configuration",
                },
            },
            "GET /api/ai/keywords/fields": {
                "description": "List available STEM fields",
            },
            "GET /api/ai/keywords/health": {
                "description": "Health check",
            },
        },
        "example": DetectRequest.model_config["json_schema_extra"]["example"],
    }


@router.post(
    "/detect",
    response_model=DetectResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def detect_keywords(request: DetectRequest):
    """
    Detect STEM keywords in OCR words.

    Example:
        >>> POST /api/ai/keywords/detect
        >>> {
        >>>   "words": [
        >>>     {"text": "deep", "x": 0, "y": 0, "width": 40, "height": 15},
        >>>     {"text": "learning", "x": 45, "y": 0, "width": 60, "height": 15}
        >>>   ]
        >>> }
        >>> Response: {"success": true, "keywords": [{"text": "deep learning", ...}], ...}
    """
    try:
        result = get_service().detect(request)
        return DetectResponse(**result)

    except (KeywordDetectionError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Keyword detection failed: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error during keyword detection")


@router.get("/fields", response_model=FieldsResponse)
async def list_fields():
    """List every STEM field, grouped by discipline."""
    return FieldsResponse(**get_service().list_fields())


@router.get("/health")
async def health_check():
    """Keyword detection API health check."""
    return {"success": True, "status": "ok", "service": "keyword-detection"}
