"""
Pydantic schemas for keyword detection API request/response validation.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ===== Request Schemas =====

class WordInput(BaseModel):
    """One OCR-recognized word with its bounding box."""
    text: str = Field(..., min_length=1, description="Word text")
    x: float = Field(..., allow_inf_nan=False, description="Left edge (pixels)")
    y: float = Field(..., allow_inf_nan=False, description="Top edge (pixels)")
    width: float = Field(..., ge=0, allow_inf_nan=False, description="Box width (pixels)")
    height: float = Field(..., ge=0, allow_inf_nan=False, description="Box height (pixels)")
    confidence: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, allow_inf_nan=False, description="OCR confidence 0.0-1.0"
    )


class DetectRequest(BaseModel):
    """Request schema for keyword detection."""
    words: List[WordInput] = Field(..., description="Words in reading order")
    targetFields: Optional[List[str]] = Field(
        default=None, alias="targetFields", description="STEM fields to search (default: all)"
    )
    minConfidence: Optional[float] = Field(
        default=None, alias="minConfidence", ge=0.0, le=1.0, description="Minimum confidence threshold"
    )
    caseSensitive: bool = Field(default=False, alias="caseSensitive", description="Case-sensitive matching")
    multiWordMatching: bool = Field(default=True, alias="multiWordMatching", description="Enable phrase matching")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "words": [
                    {"text": "neural", "x": 50, "y": 100, "width": 60, "height": 20},
                    {"text": "network", "x": 120, "y": 100, "width": 70, "height": 20}
                ],
                "targetFields": ["machine learning"],
                "minConfidence": 0.7
            }
        }


# ===== Response Schemas =====

class PositionResponse(BaseModel):
    """Bounding box of a detected keyword."""
    x: float
    y: float
    width: float
    height: float


class DetectedKeywordResponse(BaseModel):
    """A detected keyword."""
    text: str = Field(..., description="Keyword in dictionary casing")
    normalizedText: str = Field(..., description="Matched phrase after normalization")
    field: str = Field(..., description="STEM field")
    confidence: float = Field(..., ge=0.0, le=1.0)
    position: PositionResponse
    wordIndices: List[int] = Field(..., description="Indices of the matched words")


class StatisticsResponse(BaseModel):
    """Detection statistics."""
    total: int
    byField: Dict[str, int]
    averageConfidence: float
    uniqueTerms: int


class DetectorConfigResponse(BaseModel):
    """Effective detector configuration."""
    targetFields: List[str]
    minConfidence: float
    caseSensitive: bool
    multiWordMatching: bool
    maxPhraseLength: int
    indexedKeywords: int


class DetectResponse(BaseModel):
    """Response schema for keyword detection."""
    success: bool = True
    keywords: List[DetectedKeywordResponse]
    statistics: StatisticsResponse
    config: DetectorConfigResponse
    timestamp: datetime = Field(default_factory=_utc_now)


class FieldsResponse(BaseModel):
    """Available STEM fields."""
    success: bool = True
    fields: List[str]
    count: int
    categories: Dict[str, List[str]]
    timestamp: datetime = Field(default_factory=_utc_now)


class ErrorResponse(BaseModel):
    """Structured error result."""
    success: bool = False
    error: str
    timestamp: datetime = Field(default_factory=_utc_now)
