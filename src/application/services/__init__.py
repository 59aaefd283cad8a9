"""
Application Services (use cases)

Contains:
    - SubmitApplicationUseCase: form submission -> task + video attachment
    - AssignCohortUseCase / SetPaymentMethodUseCase: lifecycle dropdown updates
    - SignGuaranteeUseCase: signed guarantee PDF -> task attachment
    - AttachmentPipeline: upload + best-effort field recording
    - TaskLocator: (taskId, customTaskId) -> TaskTarget

Does NOT contain:
    - Domain business logic (use Domain services)
    - Direct infrastructure calls (use dependency injection)
"""

from .attachment_pipeline import AttachmentPipeline
from .sign_guarantee_use_case import (
    GuaranteeSignResult,
    SignGuaranteeUseCase,
    build_guarantee_file_name,
    decode_signature_image,
)
from .submit_application_use_case import SubmissionResult, SubmitApplicationUseCase
from .task_locator import TaskLocator
from .update_task_field_use_case import (
    AssignCohortUseCase,
    CohortAssignmentResult,
    PaymentMethodResult,
    SetPaymentMethodUseCase,
)

__all__ = [
    "AssignCohortUseCase",
    "AttachmentPipeline",
    "CohortAssignmentResult",
    "GuaranteeSignResult",
    "PaymentMethodResult",
    "SetPaymentMethodUseCase",
    "SignGuaranteeUseCase",
    "SubmissionResult",
    "SubmitApplicationUseCase",
    "TaskLocator",
    "build_guarantee_file_name",
    "decode_signature_image",
]
