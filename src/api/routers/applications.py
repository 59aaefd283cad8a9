"""
API Router for Application Submissions

Responsibility:
    HTTP interface of the storefront apply form (Flow A).
    Thin layer that delegates to SubmitApplicationUseCase.

Contains:
    - POST /apply - multipart form fields + `videoFile` -> remote task

Response contract (always HTTP 200 for the form):
    {"status": "ok", ...}                 task created, upload outcome embedded
    {"status": "validation_error", ...}   see ApplicationValidationError handler
    {"status": "task_create_failed", ...} tracker refused the task
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from src.api.dependencies import get_submit_application_use_case
from src.api.schemas.applications import (
    ApplySuccessResponse,
    ApplyTaskCreateFailedResponse,
    ApplyValidationErrorResponse,
    TaskCreateDebug,
)
from src.application.models import SubmissionStatus, VideoUpload
from src.application.services.submit_application_use_case import SubmitApplicationUseCase
from src.domain.applications.constants import VIDEO_FIELD_NAME

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


async def _video_from_part(
    part: UploadFile, use_case: SubmitApplicationUseCase
) -> Optional[VideoUpload]:
    """
    Detach the uploaded file from Starlette; an empty file input counts as missing.

    A non-empty part is checked against its declared type and size first, so
    an oversized upload is rejected without reading it into memory.
    """
    if part.size:
        use_case.check_declared_video(part.content_type, part.size)
    content = await part.read()
    if not part.filename and not content:
        return None
    return VideoUpload(filename=part.filename, content_type=part.content_type, content=content)


@router.post(
    "/apply",
    response_model=None,
    summary="Submit a job application",
    responses={
        200: {
            "description": "ok, validation_error or task_create_failed",
            "model": ApplySuccessResponse,
        }
    },
)
async def submit_application(
    request: Request,
    use_case: SubmitApplicationUseCase = Depends(get_submit_application_use_case),
) -> JSONResponse:
    """
    Create an application task from the storefront form.

    Process Flow:
        1. Split the multipart body into text fields and the `videoFile` part
        2. Delegate to SubmitApplicationUseCase (video validation happens first)
        3. Shape the SubmissionResult as camelCase JSON

    Raises:
        ApplicationValidationError: rendered as HTTP 200 validation_error
    """
    form = await request.form()
    raw: dict[str, Any] = {}
    video: Optional[VideoUpload] = None

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == VIDEO_FIELD_NAME and video is None:
                video = await _video_from_part(value, use_case)
            continue
        raw.setdefault(key, value)

    logger.info(
        f"Application received: {len(raw)} fields, "
        f"video={'yes' if video else 'no'} ({video.size if video else 0} bytes)"
    )

    result = await use_case.execute(raw, video)

    if result.status == SubmissionStatus.TASK_CREATE_FAILED:
        body: Any = ApplyTaskCreateFailedResponse(
            upstream_status=result.upstream_status,
            error=result.error,
            debug=TaskCreateDebug(
                list_id=use_case.list_id,
                sent_custom_fields=result.sent_custom_fields,
            ),
        )
    else:
        body = ApplySuccessResponse(
            task_id=result.task_id,
            custom_task_id=result.custom_task_id,
            task_url=result.task_url,
            upload=result.upload,
        )

    return JSONResponse(content=body.model_dump(by_alias=True, mode="json"))


def validation_error_body(message: str, field: Optional[str]) -> dict[str, Any]:
    """Body of an apply validation failure (used by the global handler)."""
    return ApplyValidationErrorResponse(field=field, message=message).model_dump(
        by_alias=True, mode="json"
    )
