"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for API errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_COHORT", "TASK_UPDATE_FAILED")
        message: Human-readable error message
        details: Optional additional error details (upstream status/body, offending value)
    """

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "code": "INVALID_COHORT",
                "message": 'Unknown cohort value; expected "october" or "january" '
                "(or DTCA-2502/DTCA-2601 label).",
                "details": {"exception_type": "InvalidCohortError", "cohort": "spring"},
            }
        }
