"""
Lifecycle Field Use Cases

Responsibility:
    Set dropdown fields on an existing application task later in the
    applicant's lifecycle:
    - AssignCohortUseCase: cohort keyword/label -> cohort option id
    - SetPaymentMethodUseCase: method key -> payment option id

Architecture Notes:
    - Part of Application Layer (Services)
    - Called by API Layer (tasks.py router)
    - Option ids are fixed configuration, not resolved through the OptionCache

Error Handling:
    - Unknown cohort/method -> InvalidCohortError / InvalidPaymentMethodError
    - Field id not configured -> ConfigurationError
    - No usable task reference -> TaskNotFoundError
    - Tracker rejection -> TaskTrackerError propagates to the API Layer
"""

import logging
from typing import Optional

from pydantic import BaseModel

from src.application.ports.task_tracker import TaskTrackerError, TaskTrackerProtocol
from src.application.services.task_locator import TaskLocator
from src.domain.applications.field_config import CohortOptions, PaymentMethodOptions
from src.domain.applications.services.cohort_resolver import resolve_cohort
from src.domain.shared.exceptions import (
    ConfigurationError,
    InvalidCohortError,
    InvalidPaymentMethodError,
)

logger = logging.getLogger(__name__)


class CohortAssignmentResult(BaseModel):
    """Result of AssignCohortUseCase.execute()."""

    id_used: str
    used_custom: bool
    cohort: str
    option_id: str


class PaymentMethodResult(BaseModel):
    """Result of SetPaymentMethodUseCase.execute()."""

    id_used: str
    used_custom: bool
    method: str
    field_id: str
    option_id: str


class AssignCohortUseCase:
    """
    Set the cohort dropdown of an application task.

    Examples:
        >>> use_case = AssignCohortUseCase(tracker, locator, cohort_field, CohortOptions(...))
        >>> result = await use_case.execute(task_id="86abc", custom_task_id=None, cohort="DTCA-2601 (January)")
        >>> result.option_id
        'opt-jan'
    """

    def __init__(
        self,
        tracker: TaskTrackerProtocol,
        locator: TaskLocator,
        cohort_field_id: Optional[str],
        options: CohortOptions,
    ) -> None:
        self.tracker = tracker
        self.locator = locator
        self.cohort_field_id = cohort_field_id
        self.options = options

    async def execute(
        self,
        task_id: Optional[str],
        custom_task_id: Optional[str],
        cohort: Optional[str],
    ) -> CohortAssignmentResult:
        if not cohort or not cohort.strip():
            raise InvalidCohortError("cohort is required")

        if not self.cohort_field_id:
            raise ConfigurationError("CF_COHORT not configured on server", setting="CF_COHORT")

        canonical = resolve_cohort(cohort)
        if canonical is None:
            raise InvalidCohortError(
                'Unknown cohort value; expected "october" or "january" '
                "(or DTCA-2502/DTCA-2601 label).",
                cohort=cohort,
            )

        option_id = self.options.option_for(canonical)
        if not option_id:
            setting = "COHORT_OCT_ID" if canonical == "october" else "COHORT_JAN_ID"
            raise ConfigurationError(
                f"Option id for cohort '{canonical}' is not configured", setting=setting
            )

        target = await self.locator.locate(task_id, custom_task_id)

        try:
            await self.tracker.set_field(target, self.cohort_field_id, option_id)
        except TaskTrackerError as e:
            logger.error(f"Cohort update failed for task {target.task_id}: {e.status_code} {e.body}")
            raise

        logger.info(f"Cohort '{canonical}' set on task {target.task_id}")
        return CohortAssignmentResult(
            id_used=target.task_id,
            used_custom=target.use_custom_id,
            cohort=cohort,
            option_id=option_id,
        )


class SetPaymentMethodUseCase:
    """Set the payment-method dropdown of an application task."""

    def __init__(
        self,
        tracker: TaskTrackerProtocol,
        locator: TaskLocator,
        payment_field_id: Optional[str],
        options: Optional[PaymentMethodOptions] = None,
    ) -> None:
        self.tracker = tracker
        self.locator = locator
        self.payment_field_id = payment_field_id
        self.options = options or PaymentMethodOptions()

    async def execute(
        self,
        task_id: Optional[str],
        custom_task_id: Optional[str],
        method: Optional[str],
    ) -> PaymentMethodResult:
        if not self.payment_field_id:
            raise ConfigurationError(
                "CF_PAYMENT_METHOD not configured", setting="CF_PAYMENT_METHOD"
            )

        key = (method or "").strip()
        option_id = self.options.option_for(key)
        if not option_id:
            raise InvalidPaymentMethodError(
                f"Unknown method. Expected {' | '.join(self.options.keys)}",
                method=method,
            )

        target = await self.locator.locate(task_id, custom_task_id)

        try:
            await self.tracker.set_field(target, self.payment_field_id, option_id)
        except TaskTrackerError as e:
            logger.error(
                f"Payment method update failed for task {target.task_id}: {e.status_code} {e.body}"
            )
            raise

        logger.info(f"Payment method '{key}' set on task {target.task_id}")
        return PaymentMethodResult(
            id_used=target.task_id,
            used_custom=target.use_custom_id,
            method=key,
            field_id=self.payment_field_id,
            option_id=option_id,
        )
