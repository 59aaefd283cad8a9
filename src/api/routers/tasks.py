"""
API Router for Lifecycle Field Updates

Responsibility:
    Set dropdown fields on an existing application task.

Contains:
    - POST /cohort - cohort keyword/label -> cohort option
    - POST /payment-method - method key -> payment option

Errors (global handlers in main.py):
    - InvalidCohortError / InvalidPaymentMethodError / TaskNotFoundError -> 400
    - TaskTrackerError -> 400 TASK_UPDATE_FAILED (upstream body in details)
    - ConfigurationError -> 500
"""

import logging

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_assign_cohort_use_case,
    get_set_payment_method_use_case,
)
from src.api.schemas.applications import (
    CohortRequest,
    CohortResponse,
    PaymentMethodRequest,
    PaymentMethodResponse,
)
from src.api.schemas.common import ErrorResponse
from src.application.services.update_task_field_use_case import (
    AssignCohortUseCase,
    SetPaymentMethodUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "/cohort",
    response_model=CohortResponse,
    summary="Assign an applicant to a cohort",
    responses=ERROR_RESPONSES,
)
async def assign_cohort(
    body: CohortRequest,
    use_case: AssignCohortUseCase = Depends(get_assign_cohort_use_case),
) -> CohortResponse:
    """
    Examples:
        POST /api/cohort {"taskId": "86a1b2c3d", "cohort": "DTCA-2502 extra text"}
        -> {"status": "ok", "idUsed": "86a1b2c3d", "usedCustom": false,
            "cohort": "DTCA-2502 extra text", "optionId": "<october option id>"}
    """
    result = await use_case.execute(body.task_id, body.custom_task_id, body.cohort)
    return CohortResponse(
        id_used=result.id_used,
        used_custom=result.used_custom,
        cohort=result.cohort,
        option_id=result.option_id,
    )


@router.post(
    "/payment-method",
    response_model=PaymentMethodResponse,
    summary="Record the chosen payment method",
    responses=ERROR_RESPONSES,
)
async def set_payment_method(
    body: PaymentMethodRequest,
    use_case: SetPaymentMethodUseCase = Depends(get_set_payment_method_use_case),
) -> PaymentMethodResponse:
    result = await use_case.execute(body.task_id, body.custom_task_id, body.method)
    return PaymentMethodResponse(
        method=result.method,
        used_custom=result.used_custom,
        field_id=result.field_id,
        option_id=result.option_id,
    )
