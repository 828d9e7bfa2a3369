"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., example="healthy")
    version: str = Field(..., example="0.1.0")


class DiffResponse(BaseModel):
    """Patch returned by /diff when output_format is json."""
    status: str = Field(..., example="success")
    patch: str = Field(..., example='-- Table: "public"."users"\nALTER TABLE "public"."users" ADD COLUMN "email" text;\n\n')
    statements: Optional[int] = Field(None, description="Statement count, set when the patch was checked", example=1)


class ParseErrorDetail(BaseModel):
    """One syntax error of one input."""
    file: str = Field(..., example="desired")
    line: int = Field(..., example=3)
    message: str = Field(..., example="expected ;, found end of input")


class DiffErrorResponse(BaseModel):
    """Returned when either input failed to parse."""
    status: str = Field("error", example="error")
    summary: str = Field(..., example="desired has 1 errors")
    errors: List[ParseErrorDetail] = Field(default_factory=list)
