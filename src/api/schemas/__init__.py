"""
API Schemas Package

Contains shared Pydantic models for API Layer.
"""

from src.api.schemas.applications import (
    ApplySuccessResponse,
    ApplyTaskCreateFailedResponse,
    ApplyValidationErrorResponse,
    CohortRequest,
    CohortResponse,
    GuaranteeSignRequest,
    GuaranteeSignResponse,
    PaymentMethodRequest,
    PaymentMethodResponse,
    TaskReferenceRequest,
)
from src.api.schemas.common import ErrorResponse

__all__ = [
    "ApplySuccessResponse",
    "ApplyTaskCreateFailedResponse",
    "ApplyValidationErrorResponse",
    "CohortRequest",
    "CohortResponse",
    "ErrorResponse",
    "GuaranteeSignRequest",
    "GuaranteeSignResponse",
    "PaymentMethodRequest",
    "PaymentMethodResponse",
    "TaskReferenceRequest",
]
