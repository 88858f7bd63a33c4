"""
Pydantic schemas for the explanation API.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone


class ExplanationRequest(BaseModel):
    """Request schema for a math/STEM explanation."""
    mathContent: str = Field(..., alias="mathContent", description="LaTeX or Markdown content")
    model: Optional[str] = Field(default=None, description="Chat model override")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "mathContent": "$\\nabla \\cdot \\mathbf{E} = \\rho / \\varepsilon_0$"
            }
        }


class ExplanationResponse(BaseModel):
    """Response schema for a math/STEM explanation."""
    success: bool = True
    explanation: str
    model: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
