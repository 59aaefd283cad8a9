"""Tests for TaskLocator (taskId / customTaskId resolution)."""

import pytest

from src.application.ports.task_tracker import TaskTrackerError
from src.application.services.task_locator import TaskLocator
from src.domain.applications.value_objects.task_target import TaskTarget
from src.domain.shared.exceptions import TaskNotFoundError


@pytest.mark.asyncio
async def test_custom_id_addressed_directly_when_enabled(mock_tracker):
    locator = TaskLocator(mock_tracker, use_custom_task_ids=True)

    target = await locator.locate("86abc123", "DTCA-1042")

    assert target == TaskTarget(task_id="DTCA-1042", use_custom_id=True)
    mock_tracker.get_task.assert_not_awaited()


@pytest.mark.asyncio
async def test_internal_id_preferred_when_custom_ids_disabled(mock_tracker):
    locator = TaskLocator(mock_tracker, use_custom_task_ids=False)

    target = await locator.locate(" 86abc123 ", "DTCA-1042")

    assert target == TaskTarget(task_id="86abc123")
    mock_tracker.get_task.assert_not_awaited()


@pytest.mark.asyncio
async def test_internal_id_used_when_custom_enabled_but_missing(mock_tracker):
    target = await TaskLocator(mock_tracker, use_custom_task_ids=True).locate("86abc123", None)

    assert target == TaskTarget(task_id="86abc123")


@pytest.mark.asyncio
async def test_custom_id_only_is_looked_up(mock_tracker):
    locator = TaskLocator(mock_tracker, use_custom_task_ids=False)

    target = await locator.locate(None, "DTCA-1042")

    assert target == TaskTarget(task_id="86abc123")
    mock_tracker.get_task.assert_awaited_once_with(
        TaskTarget(task_id="DTCA-1042", use_custom_id=True)
    )


@pytest.mark.asyncio
async def test_custom_id_lookup_failure(mock_tracker):
    mock_tracker.get_task.side_effect = TaskTrackerError("missing", status_code=404, body={})

    with pytest.raises(TaskNotFoundError) as exc_info:
        await TaskLocator(mock_tracker).locate(None, "DTCA-9999")

    assert exc_info.value.custom_task_id == "DTCA-9999"


@pytest.mark.asyncio
async def test_custom_id_lookup_without_id_in_answer(mock_tracker):
    mock_tracker.get_task.return_value = {}

    with pytest.raises(TaskNotFoundError):
        await TaskLocator(mock_tracker).locate(None, "DTCA-9999")


@pytest.mark.asyncio
@pytest.mark.parametrize("use_custom", [True, False])
async def test_no_reference_raises(mock_tracker, use_custom):
    with pytest.raises(TaskNotFoundError):
        await TaskLocator(mock_tracker, use_custom).locate("  ", None)
