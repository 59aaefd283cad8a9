"""
Task Locator

Turns the (taskId, customTaskId) pair posted by lifecycle pages into a
TaskTarget the tracker adapter can address.

Rules:
    1. Custom task ids enabled and a custom id given -> address the custom id
    2. Internal id given -> address it
    3. Only a custom id given -> look the task up and use its internal id
    4. Nothing given -> TaskNotFoundError
"""

import logging
from typing import Optional

from src.application.ports.task_tracker import TaskTrackerError, TaskTrackerProtocol
from src.domain.applications.value_objects.task_target import TaskTarget
from src.domain.shared.exceptions import TaskNotFoundError

logger = logging.getLogger(__name__)


class TaskLocator:
    """Resolve task references against the tracker configuration."""

    def __init__(self, tracker: TaskTrackerProtocol, use_custom_task_ids: bool = False) -> None:
        self.tracker = tracker
        self.use_custom_task_ids = use_custom_task_ids

    async def locate(
        self, task_id: Optional[str], custom_task_id: Optional[str]
    ) -> TaskTarget:
        """
        Resolve a task reference.

        Raises:
            TaskNotFoundError: No reference given, or the custom id lookup failed
        """
        task_id = (task_id or "").strip() or None
        custom_task_id = (custom_task_id or "").strip() or None

        if self.use_custom_task_ids and custom_task_id:
            return TaskTarget(task_id=custom_task_id, use_custom_id=True)

        if task_id:
            return TaskTarget(task_id=task_id)

        if custom_task_id:
            try:
                task = await self.tracker.get_task(
                    TaskTarget(task_id=custom_task_id, use_custom_id=True)
                )
            except TaskTrackerError as e:
                logger.warning(f"Custom task id lookup failed for {custom_task_id}: {e}")
                raise TaskNotFoundError(
                    f"Task not found for customTaskId {custom_task_id}",
                    custom_task_id=custom_task_id,
                ) from e

            internal_id = (task or {}).get("id")
            if not internal_id:
                raise TaskNotFoundError(
                    f"Task not found for customTaskId {custom_task_id}",
                    custom_task_id=custom_task_id,
                )
            return TaskTarget(task_id=str(internal_id))

        if self.use_custom_task_ids:
            raise TaskNotFoundError("customTaskId (or taskId) is required")
        raise TaskNotFoundError("taskId is required (or customTaskId)")
