"""
ClickUp Client

httpx-based adapter for the ClickUp v2 REST API.

Responsibility:
    - Implements TaskTrackerProtocol from Application Layer
    - Adds the Authorization header and custom-task-id query parameters
    - Converts upstream non-2xx answers and transport errors into TaskTrackerError

Architecture Notes:
    - Infrastructure Layer (remote API)
    - One shared httpx.AsyncClient per application, closed at shutdown
    - No retries: every call is attempted exactly once

Endpoints used:
    GET  /list/{list_id}/field
    POST /list/{list_id}/task
    GET  /task/{task_id}
    POST /task/{task_id}/field/{field_id}
    POST /task/{task_id}/attachment        (multipart part "attachment")
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from src.application.ports.task_tracker import TaskTrackerError
from src.domain.applications.value_objects.task_target import TaskTarget

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.clickup.com/api/v2"
DEFAULT_TIMEOUT_SECONDS = 420.0


def _segment(value: Any) -> str:
    """Percent-encode one path segment (ids may contain "/" or "?")."""
    return quote(str(value), safe="")


def _response_body(response: httpx.Response) -> Any:
    """Parsed JSON body, or the raw text when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


class ClickUpClient:
    """
    Async ClickUp API client.

    Attributes:
        base_url: API root (default https://api.clickup.com/api/v2)
        team_id: Workspace id, required when addressing custom task ids

    Examples:
        >>> client = ClickUpClient(token="pk_123", team_id="9011")
        >>> fields = await client.list_fields("901100")
        >>> await client.aclose()
    """

    def __init__(
        self,
        token: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        team_id: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            token: Personal or OAuth token sent as the Authorization header
            base_url: API root
            team_id: Workspace id for custom task id calls
            timeout: Per-call ceiling in seconds
            transport: Optional transport override (httpx.MockTransport in tests)
        """
        if not token:
            logger.warning("CLICKUP_TOKEN is not set; ClickUp calls will be rejected")

        self.base_url = base_url.rstrip("/")
        self.team_id = team_id
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": token or ""},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _task_params(self, target: TaskTarget) -> dict[str, str]:
        if not target.use_custom_id:
            return {}
        params = {"custom_task_ids": "true"}
        if self.team_id:
            params["team_id"] = self.team_id
        return params

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        **kwargs: Any,
    ) -> Any:
        """Send one request; TaskTrackerError on transport error or non-2xx."""
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"ClickUp {action} transport error: {e}")
            raise TaskTrackerError(f"ClickUp {action} failed: {e}") from e

        if not response.is_success:
            body = _response_body(response)
            logger.error(f"ClickUp {action} failed: {response.status_code} {body}")
            raise TaskTrackerError(
                f"ClickUp {action} failed",
                status_code=response.status_code,
                body=body,
            )

        if not response.content:
            return {}
        return _response_body(response)

    # ------------------------------------------------------------------
    # TaskTrackerProtocol
    # ------------------------------------------------------------------

    async def list_fields(self, list_id: str) -> list[dict[str, Any]]:
        body = await self._request("GET", f"/list/{_segment(list_id)}/field", "list fields")
        fields = body.get("fields") if isinstance(body, dict) else None
        return fields if isinstance(fields, list) else []

    async def create_task(
        self,
        list_id: str,
        name: str,
        description: str,
        custom_fields: list[dict[str, Any]],
    ) -> dict[str, Any]:
        body = await self._request(
            "POST",
            f"/list/{_segment(list_id)}/task",
            "create task",
            json={
                "name": name,
                "description": description,
                "custom_fields": custom_fields,
            },
        )
        created = body if isinstance(body, dict) else {}
        logger.info(f"Created ClickUp task {created.get('id')} in list {list_id}")
        return created

    async def get_task(self, target: TaskTarget) -> dict[str, Any]:
        body = await self._request(
            "GET",
            f"/task/{_segment(target.task_id)}",
            "get task",
            params=self._task_params(target),
        )
        return body if isinstance(body, dict) else {}

    async def set_field(self, target: TaskTarget, field_id: str, value: Any) -> Any:
        return await self._request(
            "POST",
            f"/task/{_segment(target.task_id)}/field/{_segment(field_id)}",
            "set field",
            params=self._task_params(target),
            json={"value": value},
        )

    async def upload_attachment(
        self,
        target: TaskTarget,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> Any:
        return await self._request(
            "POST",
            f"/task/{_segment(target.task_id)}/attachment",
            "upload attachment",
            params=self._task_params(target),
            files={"attachment": (filename, content, mime_type)},
        )
