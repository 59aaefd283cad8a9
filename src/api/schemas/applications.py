"""
Application Intake Schemas

Request and response models of the /api endpoints.

Wire format:
    camelCase on the wire (storefront JavaScript), snake_case in Python.
    Every model accepts both spellings on input.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.domain.applications.value_objects.attachment_result import AttachmentResult


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ============================================================================
# REQUEST MODELS
# ============================================================================


class TaskReferenceRequest(CamelModel):
    """
    Reference to an existing application task.

    Attributes:
        task_id: Internal task id
        custom_task_id: Workspace custom id (e.g. "DTCA-1234")
    """

    task_id: Optional[str] = Field(default=None, description="Internal task id")
    custom_task_id: Optional[str] = Field(default=None, description="Custom task id")


class CohortRequest(TaskReferenceRequest):
    cohort: Optional[str] = Field(
        default=None, description='"october", "january" or a cohort label like "DTCA-2502"'
    )

    model_config = {
        "json_schema_extra": {
            "example": {"taskId": "86a1b2c3d", "cohort": "DTCA-2502 (October)"}
        }
    }


class PaymentMethodRequest(TaskReferenceRequest):
    method: Optional[str] = Field(
        default=None, description="pay_in_full | pay_as_you_go | climb_loan"
    )

    model_config = {
        "json_schema_extra": {"example": {"customTaskId": "DTCA-1042", "method": "pay_in_full"}}
    }


class GuaranteeSignRequest(TaskReferenceRequest):
    """
    Signed job-guarantee submission.

    Attributes:
        full_name: Signer name
        signed_at: Signing time, ISO-8601
        terms_text: Guarantee terms shown to the signer
        signature_png: Drawn signature as data URL or bare base64 PNG
    """

    full_name: Optional[str] = None
    signed_at: Optional[str] = None
    terms_text: Optional[str] = None
    signature_png: Optional[str] = None


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class ApplySuccessResponse(CamelModel):
    """POST /api/apply: task created (upload outcome embedded)."""

    status: Literal["ok"] = "ok"
    task_id: Optional[str] = None
    custom_task_id: Optional[str] = None
    task_url: Optional[str] = None
    upload: Optional[AttachmentResult] = None


class ApplyValidationErrorResponse(CamelModel):
    """POST /api/apply: rejected before contacting the tracker (HTTP 200)."""

    status: Literal["validation_error"] = "validation_error"
    field: Optional[str] = None
    message: str


class TaskCreateDebug(CamelModel):
    list_id: Optional[str] = Field(default=None, alias="list")
    sent_custom_fields: list[str] = Field(default_factory=list)


class ApplyTaskCreateFailedResponse(CamelModel):
    """POST /api/apply: tracker refused to create the task (HTTP 200)."""

    status: Literal["task_create_failed"] = "task_create_failed"
    upstream_status: Optional[int] = None
    error: Any = None
    debug: TaskCreateDebug


class CohortResponse(CamelModel):
    status: Literal["ok"] = "ok"
    id_used: str
    used_custom: bool
    cohort: str
    option_id: str


class PaymentMethodResponse(CamelModel):
    status: Literal["ok"] = "ok"
    method: str
    used_custom: bool
    field_id: str
    option_id: str


class GuaranteeSignResponse(CamelModel):
    """POST /api/guarantee-sign result. A failed upload is reported in `attachment`."""

    ok: bool = True
    task_id: str
    file_name: str
    attachment: AttachmentResult
    guarantee_field_updated: bool = False
