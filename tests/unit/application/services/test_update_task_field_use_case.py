"""
Tests for AssignCohortUseCase and SetPaymentMethodUseCase.
"""

import pytest

from src.application.ports.task_tracker import TaskTrackerError
from src.application.services.task_locator import TaskLocator
from src.application.services.update_task_field_use_case import (
    AssignCohortUseCase,
    SetPaymentMethodUseCase,
)
from src.domain.applications.constants import PAYMENT_METHOD_OPTIONS
from src.domain.applications.field_config import CohortOptions
from src.domain.applications.value_objects.task_target import TaskTarget
from src.domain.shared.exceptions import (
    ConfigurationError,
    InvalidCohortError,
    InvalidPaymentMethodError,
    TaskNotFoundError,
)


@pytest.fixture
def cohort_use_case(mock_tracker, cohort_options):
    return AssignCohortUseCase(
        tracker=mock_tracker,
        locator=TaskLocator(mock_tracker),
        cohort_field_id="cf-cohort",
        options=cohort_options,
    )


@pytest.fixture
def payment_use_case(mock_tracker):
    return SetPaymentMethodUseCase(
        tracker=mock_tracker,
        locator=TaskLocator(mock_tracker, use_custom_task_ids=True),
        payment_field_id="cf-payment",
    )


# ============================================================================
# COHORT
# ============================================================================


@pytest.mark.asyncio
async def test_cohort_label_sets_october_option(cohort_use_case, mock_tracker):
    result = await cohort_use_case.execute("86abc123", None, "DTCA-2502 extra text")

    assert result.option_id == "opt-oct"
    assert result.id_used == "86abc123"
    assert result.used_custom is False
    assert result.cohort == "DTCA-2502 extra text"
    mock_tracker.set_field.assert_awaited_once_with(
        TaskTarget(task_id="86abc123"), "cf-cohort", "opt-oct"
    )


@pytest.mark.asyncio
async def test_cohort_keyword_january(cohort_use_case):
    result = await cohort_use_case.execute("86abc123", None, "January")

    assert result.option_id == "opt-jan"


@pytest.mark.asyncio
@pytest.mark.parametrize("cohort", ["unknown", "", None])
async def test_invalid_cohort(cohort_use_case, mock_tracker, cohort):
    with pytest.raises(InvalidCohortError):
        await cohort_use_case.execute("86abc123", None, cohort)

    mock_tracker.set_field.assert_not_awaited()


@pytest.mark.asyncio
async def test_cohort_field_not_configured(mock_tracker, cohort_options):
    use_case = AssignCohortUseCase(mock_tracker, TaskLocator(mock_tracker), None, cohort_options)

    with pytest.raises(ConfigurationError) as exc_info:
        await use_case.execute("86abc123", None, "october")

    assert exc_info.value.setting == "CF_COHORT"


@pytest.mark.asyncio
async def test_cohort_option_not_configured(mock_tracker):
    use_case = AssignCohortUseCase(
        mock_tracker, TaskLocator(mock_tracker), "cf-cohort", CohortOptions(october="opt-oct")
    )

    with pytest.raises(ConfigurationError) as exc_info:
        await use_case.execute("86abc123", None, "jan")

    assert exc_info.value.setting == "COHORT_JAN_ID"


@pytest.mark.asyncio
async def test_cohort_without_task_reference(cohort_use_case):
    with pytest.raises(TaskNotFoundError):
        await cohort_use_case.execute(None, None, "october")


@pytest.mark.asyncio
async def test_cohort_tracker_rejection_propagates(cohort_use_case, mock_tracker):
    mock_tracker.set_field.side_effect = TaskTrackerError("set field failed", status_code=400, body={"err": "x"})

    with pytest.raises(TaskTrackerError):
        await cohort_use_case.execute("86abc123", None, "october")


# ============================================================================
# PAYMENT METHOD
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["pay_in_full", "pay_as_you_go", "climb_loan"])
async def test_payment_method_sets_fixed_option(payment_use_case, mock_tracker, method):
    result = await payment_use_case.execute(None, "DTCA-1042", method)

    assert result.option_id == PAYMENT_METHOD_OPTIONS[method]
    assert result.method == method
    assert result.field_id == "cf-payment"
    assert result.used_custom is True
    mock_tracker.set_field.assert_awaited_once_with(
        TaskTarget(task_id="DTCA-1042", use_custom_id=True), "cf-payment", PAYMENT_METHOD_OPTIONS[method]
    )


@pytest.mark.asyncio
async def test_unknown_payment_method(payment_use_case):
    with pytest.raises(InvalidPaymentMethodError) as exc_info:
        await payment_use_case.execute("86abc123", None, "bitcoin")

    assert exc_info.value.message == "Unknown method. Expected pay_in_full | pay_as_you_go | climb_loan"


@pytest.mark.asyncio
async def test_payment_field_not_configured(mock_tracker):
    use_case = SetPaymentMethodUseCase(mock_tracker, TaskLocator(mock_tracker), None)

    with pytest.raises(ConfigurationError):
        await use_case.execute("86abc123", None, "pay_in_full")
