"""
Application Subdomain Value Objects

Immutable objects defined by their values.
"""

from .attachment_result import AttachmentResult, UploadStatus
from .field_assignment import FieldAssignment
from .field_option import FieldOption
from .task_target import TaskTarget

__all__ = [
    "AttachmentResult",
    "FieldAssignment",
    "FieldOption",
    "TaskTarget",
    "UploadStatus",
]
