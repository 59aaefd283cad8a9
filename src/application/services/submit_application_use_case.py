"""
Submit Application Use Case

Responsibility:
    Orchestrates one storefront application submission:
    validate video -> refresh option cache -> map answers -> create task ->
    upload video -> record video URL.

Architecture Notes:
    - Part of Application Layer (Services)
    - Called by API Layer (applications.py router)
    - Tracker access through TaskTrackerProtocol (dependency injection)
    - Returns SubmissionResult DTO; API Layer turns it into the HTTP body

Business Rules:
    - The video is required, must declare a video/* content type and must not
      exceed the configured size cap. Checked before any remote call.
    - Unresolvable dropdown answers are dropped, not submitted as raw text
    - A failed video upload never fails the submission: the created task is
      returned together with the upload failure detail
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from src.application.models import SubmissionStatus, VideoUpload
from src.application.ports.task_tracker import TaskTrackerError, TaskTrackerProtocol
from src.application.services.attachment_pipeline import AttachmentPipeline
from src.domain.applications.constants import (
    DEFAULT_MAX_VIDEO_SIZE_MB,
    VIDEO_FIELD_NAME,
    VIDEO_MIME_PREFIX,
)
from src.domain.applications.entities.application_payload import ApplicationPayload
from src.domain.applications.field_config import FieldConfig
from src.domain.applications.services.application_mapper import (
    build_field_assignments,
    build_task_description,
    build_task_name,
)
from src.domain.applications.services.option_cache import OptionCache
from src.domain.applications.services.option_resolver import OptionResolver
from src.domain.applications.value_objects.attachment_result import AttachmentResult
from src.domain.applications.value_objects.task_target import TaskTarget
from src.domain.shared.exceptions import ApplicationValidationError

logger = logging.getLogger(__name__)


# ============================================================================
# DATA TRANSFER OBJECTS (DTOs)
# ============================================================================


class SubmissionResult(BaseModel):
    """
    Result of SubmitApplicationUseCase.execute().

    Attributes:
        status: ok | task_create_failed
        task_id: Internal id of the created task (ok only)
        custom_task_id: Custom id of the created task, if the workspace uses them
        task_url: Browser URL of the created task
        upload: Outcome of the video upload (ok only)
        upstream_status: Tracker HTTP status (task_create_failed only)
        error: Tracker error body (task_create_failed only)
        sent_custom_fields: Field ids that were sent (task_create_failed only)
    """

    status: SubmissionStatus
    task_id: Optional[str] = None
    custom_task_id: Optional[str] = None
    task_url: Optional[str] = None
    upload: Optional[AttachmentResult] = None
    upstream_status: Optional[int] = None
    error: Any = None
    sent_custom_fields: list[str] = Field(default_factory=list)


# ============================================================================
# USE CASE
# ============================================================================


class SubmitApplicationUseCase:
    """
    Use case for turning a form submission into a remote task.

    Process Flow:
        Storefront posts multipart form
        -> API Layer extracts form fields + VideoUpload
        -> validate_video()             (no remote calls on failure)
        -> OptionCache.refresh()        (failure -> empty cache, text fallback)
        -> ApplicationPayload.from_raw()
        -> build_field_assignments()    (OptionResolver cascade)
        -> tracker.create_task()
        -> AttachmentPipeline.upload()  (failure embedded, not raised)
        -> AttachmentPipeline.record_url() when CF_DCA_VIDEO_URL is set

    Attributes:
        tracker: TaskTrackerProtocol implementation
        cache: OptionCache owned by the application
        resolver: OptionResolver over `cache`
        pipeline: AttachmentPipeline
        fields: FieldConfig of this deployment
        list_id: Task list receiving applications
        max_video_bytes: Upload size cap
    """

    def __init__(
        self,
        tracker: TaskTrackerProtocol,
        cache: OptionCache,
        resolver: OptionResolver,
        pipeline: AttachmentPipeline,
        fields: FieldConfig,
        list_id: Optional[str],
        max_video_bytes: int = DEFAULT_MAX_VIDEO_SIZE_MB * 1024 * 1024,
    ) -> None:
        self.tracker = tracker
        self.cache = cache
        self.resolver = resolver
        self.pipeline = pipeline
        self.fields = fields
        self.list_id = list_id
        self.max_video_bytes = max_video_bytes

    def validate_video(self, video: Optional[VideoUpload]) -> VideoUpload:
        """
        Check the video part of a submission.

        Raises:
            ApplicationValidationError: wrong content type, too large, or missing
        """
        if video is None or video.size == 0:
            raise ApplicationValidationError(
                "Please upload a short intro video (required).", field=VIDEO_FIELD_NAME
            )

        self.check_declared_video(video.content_type, video.size)
        return video

    def check_declared_video(self, content_type: Optional[str], size: Optional[int]) -> None:
        """
        Type and size checks on what the upload declares, before its bytes are read.

        Raises:
            ApplicationValidationError: not video/*, or larger than max_video_bytes
        """
        if not (content_type or "").startswith(VIDEO_MIME_PREFIX):
            raise ApplicationValidationError(
                "File must be a video (e.g., .mp4, .mov).", field=VIDEO_FIELD_NAME
            )

        if size is not None and size > self.max_video_bytes:
            max_mb = self.max_video_bytes // (1024 * 1024)
            raise ApplicationValidationError(
                f"Video too large. Maximum size is {max_mb} MB.", field=VIDEO_FIELD_NAME
            )

    async def execute(
        self, raw_form: Mapping[str, Any], video: Optional[VideoUpload]
    ) -> SubmissionResult:
        """
        Create the remote task for one submission.

        Args:
            raw_form: Submitted form fields (camelCase names)
            video: Uploaded video, or None if the form had no file

        Returns:
            SubmissionResult (ok or task_create_failed)

        Raises:
            ApplicationValidationError: If the video is missing or invalid
        """
        video = self.validate_video(video)

        await self.cache.refresh()

        payload = ApplicationPayload.from_raw(raw_form)
        assignments = build_field_assignments(payload, self.fields, self.resolver)
        custom_fields = [a.to_payload() for a in assignments]
        name = build_task_name(payload)
        description = build_task_description(payload)

        logger.info(f"Creating task '{name}' with {len(custom_fields)} custom fields")
        logger.debug(f"Task custom fields: {custom_fields}")

        try:
            created = await self.tracker.create_task(
                list_id=self.list_id or "",
                name=name,
                description=description,
                custom_fields=custom_fields,
            )
        except TaskTrackerError as e:
            logger.error(f"Task create failed: {e.status_code} {e.body}")
            return SubmissionResult(
                status=SubmissionStatus.TASK_CREATE_FAILED,
                upstream_status=e.status_code,
                error=e.body if e.body is not None else e.message,
                sent_custom_fields=[a.field_id for a in assignments],
            )

        task_id = created.get("id")
        upload: Optional[AttachmentResult] = None
        if task_id:
            target = TaskTarget(task_id=str(task_id))
            upload = await self.pipeline.upload(
                target,
                video.content,
                video.filename or "video.mp4",
                video.content_type,
            )
            if upload.ok and upload.url and self.fields.video_url:
                await self.pipeline.record_url(target, self.fields.video_url, upload.url)
        else:
            logger.warning("Tracker response carried no task id; skipping video upload")

        return SubmissionResult(
            status=SubmissionStatus.OK,
            task_id=str(task_id) if task_id else None,
            custom_task_id=created.get("custom_id"),
            task_url=created.get("url"),
            upload=upload,
        )
