"""
Attachment Pipeline

Uploads binaries (intro videos, signed guarantee PDFs) to remote tasks and
records follow-up field values.

Business Rules:
    - Exactly one upload call per binary, no retries
    - Upload failures are returned as AttachmentResult(failed), never raised,
      so the surrounding flow always completes
    - Field updates after an upload are best-effort: failures are logged
"""

import logging
from typing import Any, Optional

from src.application.ports.task_tracker import TaskTrackerError, TaskTrackerProtocol
from src.domain.applications.value_objects.attachment_result import AttachmentResult
from src.domain.applications.value_objects.task_target import TaskTarget

logger = logging.getLogger(__name__)


def _first_attachment(body: Any) -> dict[str, Any]:
    """The tracker answers with the attachment, {attachment: {...}} or a list."""
    if isinstance(body, list):
        return body[0] if body and isinstance(body[0], dict) else {}
    if not isinstance(body, dict):
        return {}
    nested = body.get("attachment")
    if not body.get("url") and not body.get("id") and isinstance(nested, dict):
        return nested
    return body


class AttachmentPipeline:
    """
    Attachment upload + best-effort field recording.

    Examples:
        >>> pipeline = AttachmentPipeline(tracker)
        >>> result = await pipeline.upload(target, video_bytes, "intro.mp4", "video/mp4")
        >>> if result.ok and video_url_field:
        ...     await pipeline.record_url(target, video_url_field, result.url)
    """

    def __init__(self, tracker: TaskTrackerProtocol) -> None:
        self.tracker = tracker

    async def upload(
        self,
        target: TaskTarget,
        content: bytes,
        filename: str,
        mime_type: Optional[str],
    ) -> AttachmentResult:
        """
        Upload one binary as an attachment of `target`.

        Returns:
            AttachmentResult with the remote id/url, or failed() carrying the
            upstream status and body (or the exception text)
        """
        mime = mime_type or "application/octet-stream"
        logger.info(
            f"Uploading attachment to task {target.task_id}: "
            f"name={filename} size={len(content)} type={mime}"
        )

        try:
            body = await self.tracker.upload_attachment(target, content, filename, mime)
        except TaskTrackerError as e:
            failure = {"step": "upload", "status": e.status_code, "body": e.body}
            logger.warning(f"Attachment upload failed for task {target.task_id}: {failure}")
            return AttachmentResult.failed(failure)
        except Exception as e:
            logger.warning(f"Attachment upload error for task {target.task_id}: {e}", exc_info=True)
            return AttachmentResult.failed({"step": "exception", "error": str(e)})

        attachment = _first_attachment(body)
        remote_id = attachment.get("id")
        url = attachment.get("url")
        logger.info(f"Upload success for task {target.task_id}: attId={remote_id} attUrl={url}")
        return AttachmentResult.succeeded(
            remote_id=str(remote_id) if remote_id is not None else None,
            url=str(url) if url else None,
        )

    async def record_value(self, target: TaskTarget, field_id: str, value: Any) -> bool:
        """Best-effort custom-field update. Returns False (and logs) on failure."""
        try:
            await self.tracker.set_field(target, field_id, value)
        except Exception as e:
            logger.warning(f"Could not set field {field_id} on task {target.task_id}: {e}")
            return False
        logger.info(f"Set field {field_id} on task {target.task_id}")
        return True

    async def record_url(self, target: TaskTarget, field_id: str, url: str) -> bool:
        """Store an attachment URL in a text/link field (best-effort)."""
        return await self.record_value(target, field_id, url)
