"""
API Router for the Job Guarantee

Contains:
    - POST /guarantee-sign - render the signed guarantee PDF and attach it (Flow B)
"""

import logging

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_sign_guarantee_use_case
from src.api.schemas.applications import GuaranteeSignRequest, GuaranteeSignResponse
from src.api.schemas.common import ErrorResponse
from src.application.services.sign_guarantee_use_case import SignGuaranteeUseCase

logger = logging.getLogger(__name__)

router = APIRouter(tags=["guarantee"])


@router.post(
    "/guarantee-sign",
    response_model=GuaranteeSignResponse,
    summary="Sign the job guarantee",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def sign_guarantee(
    body: GuaranteeSignRequest,
    use_case: SignGuaranteeUseCase = Depends(get_sign_guarantee_use_case),
) -> GuaranteeSignResponse:
    """
    Render the guarantee and attach it to the applicant's task.

    A failed upload still answers 200 with `attachment.uploadStatus == "failed"`.
    """
    result = await use_case.execute(
        task_id=body.task_id,
        custom_task_id=body.custom_task_id,
        full_name=body.full_name,
        signed_at=body.signed_at,
        terms_text=body.terms_text,
        signature_png=body.signature_png,
    )
    if not result.attachment.ok:
        logger.warning(f"Guarantee upload failed for task {result.task_id}: {result.attachment.failure}")

    return GuaranteeSignResponse(
        ok=True,
        task_id=result.task_id,
        file_name=result.file_name,
        attachment=result.attachment,
        guarantee_field_updated=result.guarantee_field_updated,
    )
