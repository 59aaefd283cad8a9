"""
Shared Application Models

Responsibility:
    Contains shared models used across Application Layer.
    Prevents circular dependencies and code duplication.

Contains:
    - SubmissionStatus: outcome of an application submission
    - VideoUpload: the binary part of a submission, detached from HTTP types

Does NOT contain:
    - Business logic (belongs to Domain Layer)
    - HTTP models (belongs to API Layer)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SubmissionStatus(str, Enum):
    """
    Outcome of POST /api/apply.

    Attributes:
        OK: Task created (attachment outcome reported separately)
        TASK_CREATE_FAILED: Tracker refused to create the task
    """

    OK = "ok"
    TASK_CREATE_FAILED = "task_create_failed"


@dataclass(frozen=True)
class VideoUpload:
    """
    Uploaded video as received from the form.

    Attributes:
        filename: Client-side file name (may be None)
        content_type: Declared MIME type (may be None)
        content: Raw bytes
    """

    filename: Optional[str]
    content_type: Optional[str]
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)
