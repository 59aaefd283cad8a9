"""
AttachmentResult Value Object

Outcome of one attachment upload to a remote task.

Responsibility:
    - Carry remote attachment id/url on success
    - Carry upstream status/body (or exception text) on failure
    - Serialize into API responses so failures stay visible to the caller

Architecture Notes:
    - Value Object (immutable)
    - Uses Pydantic because it is embedded directly in HTTP responses
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UploadStatus(str, Enum):
    """Upload outcome. FAILED never aborts the surrounding flow."""

    OK = "ok"
    FAILED = "failed"


class AttachmentResult(BaseModel):
    """
    Immutable result of an attachment upload.

    Attributes:
        remote_id: Attachment id reported by the task tracker (None if unknown)
        url: Attachment URL reported by the task tracker (None if unknown)
        upload_status: ok | failed
        failure: Failure detail when upload_status == failed. Shape:
            {"step": "upload", "status": 500, "body": {...}} for upstream rejections,
            {"step": "exception", "error": "..."} for transport errors.

    Examples:
        >>> AttachmentResult.succeeded("att_1", "https://t.example/att_1.mp4").ok
        True
        >>> AttachmentResult.failed({"step": "upload", "status": 500, "body": {}}).ok
        False
    """

    remote_id: Optional[str] = Field(default=None)
    url: Optional[str] = Field(default=None)
    upload_status: UploadStatus
    failure: Optional[dict[str, Any]] = Field(default=None)

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @property
    def ok(self) -> bool:
        return self.upload_status == UploadStatus.OK

    @classmethod
    def succeeded(cls, remote_id: Optional[str], url: Optional[str]) -> "AttachmentResult":
        return cls(remote_id=remote_id, url=url, upload_status=UploadStatus.OK)

    @classmethod
    def failed(cls, failure: dict[str, Any]) -> "AttachmentResult":
        return cls(upload_status=UploadStatus.FAILED, failure=failure)
