"""
Task Tracker Port

Contract the Application Layer needs from the remote task-tracking API.
Infrastructure Layer (src/infrastructure/clickup) implements it.

Contains:
    - TaskTrackerProtocol: list fields, create task, look up task,
      set a custom field, upload an attachment
    - TaskTrackerError: upstream rejection (non-2xx) or transport failure
"""

from typing import Any, Optional, Protocol

from src.domain.applications.value_objects.task_target import TaskTarget


class TaskTrackerError(Exception):
    """
    Raised when the task tracker rejects a request or cannot be reached.

    Attributes:
        status_code: Upstream HTTP status (None for transport errors)
        body: Parsed upstream JSON body, raw text, or None

    Examples:
        >>> raise TaskTrackerError("create task failed", status_code=400, body={"err": "bad field"})
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class TaskTrackerProtocol(Protocol):
    """
    Remote task-tracking API as seen by the use cases.

    Every call is attempted exactly once. Methods raise TaskTrackerError on
    any upstream non-success status or transport error.
    """

    async def list_fields(self, list_id: str) -> list[dict[str, Any]]:
        """Custom-field definitions of a list (incl. dropdown option sets)."""
        ...

    async def create_task(
        self,
        list_id: str,
        name: str,
        description: str,
        custom_fields: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Create a task; returns the created task (`id`, `custom_id`, `url`)."""
        ...

    async def get_task(self, target: TaskTarget) -> dict[str, Any]:
        """Fetch a task (used to resolve custom ids to internal ids)."""
        ...

    async def set_field(self, target: TaskTarget, field_id: str, value: Any) -> Any:
        """Set one custom field of a task."""
        ...

    async def upload_attachment(
        self,
        target: TaskTarget,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> Any:
        """Upload a binary as a task attachment; returns the upstream body."""
        ...
