"""
Applications Subdomain

Job-application intake: mapping storefront answers onto a remote
project-management task and managing the applicant lifecycle fields.
"""

from .entities import ApplicationPayload
from .field_config import CohortOptions, FieldConfig, PaymentMethodOptions
from .services import OptionCache, OptionResolver
from .value_objects import (
    AttachmentResult,
    FieldAssignment,
    FieldOption,
    TaskTarget,
    UploadStatus,
)

__all__ = [
    "ApplicationPayload",
    "AttachmentResult",
    "CohortOptions",
    "FieldAssignment",
    "FieldConfig",
    "FieldOption",
    "OptionCache",
    "OptionResolver",
    "PaymentMethodOptions",
    "TaskTarget",
    "UploadStatus",
]
