"""
Tests for ClickUpClient (httpx.MockTransport, no network).

Covers:
- Request shape of every TaskTrackerProtocol call
- Custom task id query parameters
- Non-2xx answers and transport errors -> TaskTrackerError
"""

import json

import httpx
import pytest

from src.application.ports.task_tracker import TaskTrackerError
from src.domain.applications.value_objects.task_target import TaskTarget
from src.infrastructure.clickup import ClickUpClient

BASE_URL = "https://clickup.test/api/v2"


def _client(handler, team_id="team-9"):
    return ClickUpClient(
        token="pk_test",
        base_url=BASE_URL,
        team_id=team_id,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_list_fields_returns_field_list():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"fields": [{"id": "cf-1", "type_config": {}}]})

    client = _client(handler)
    fields = await client.list_fields("list-1")
    await client.aclose()

    assert fields == [{"id": "cf-1", "type_config": {}}]
    assert seen["request"].method == "GET"
    assert seen["request"].url.path == "/api/v2/list/list-1/field"
    assert seen["request"].headers["Authorization"] == "pk_test"


@pytest.mark.asyncio
async def test_list_fields_tolerates_missing_key():
    client = _client(lambda request: httpx.Response(200, json={}))

    assert await client.list_fields("list-1") == []


@pytest.mark.asyncio
async def test_create_task_posts_json_body():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        seen["path"] = request.url.path
        return httpx.Response(200, json={"id": "86abc", "custom_id": "DTCA-1", "url": "https://t/86abc"})

    client = _client(handler)
    created = await client.create_task(
        "list-1", "Ada Lovelace", "- **Email:** a@b.co", [{"id": "cf-1", "value": "x"}]
    )

    assert created["id"] == "86abc"
    assert seen["path"] == "/api/v2/list/list-1/task"
    assert seen["body"] == {
        "name": "Ada Lovelace",
        "description": "- **Email:** a@b.co",
        "custom_fields": [{"id": "cf-1", "value": "x"}],
    }


@pytest.mark.asyncio
async def test_error_status_raises_with_parsed_body():
    client = _client(lambda request: httpx.Response(400, json={"err": "Custom field invalid", "ECODE": "FIELD_1"}))

    with pytest.raises(TaskTrackerError) as exc_info:
        await client.create_task("list-1", "n", "d", [])

    assert exc_info.value.status_code == 400
    assert exc_info.value.body == {"err": "Custom field invalid", "ECODE": "FIELD_1"}


@pytest.mark.asyncio
async def test_error_status_with_text_body():
    client = _client(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(TaskTrackerError) as exc_info:
        await client.list_fields("list-1")

    assert exc_info.value.body == "Bad Gateway"


@pytest.mark.asyncio
async def test_transport_error_raises_tracker_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)

    with pytest.raises(TaskTrackerError) as exc_info:
        await client.get_task(TaskTarget(task_id="86abc"))

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_set_field_with_custom_id_adds_query_params():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={})

    client = _client(handler)
    await client.set_field(TaskTarget(task_id="DTCA-1", use_custom_id=True), "cf-cohort", "opt-oct")

    request = seen["request"]
    assert request.url.path == "/api/v2/task/DTCA-1/field/cf-cohort"
    assert request.url.params["custom_task_ids"] == "true"
    assert request.url.params["team_id"] == "team-9"
    assert json.loads(request.content) == {"value": "opt-oct"}


@pytest.mark.asyncio
async def test_task_id_is_percent_encoded_in_path():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={})

    client = _client(handler)
    await client.set_field(TaskTarget(task_id="DTCA/7?x=1", use_custom_id=True), "cf-cohort", "opt-oct")

    request = seen["request"]
    assert request.url.raw_path.split(b"?")[0] == b"/api/v2/task/DTCA%2F7%3Fx%3D1/field/cf-cohort"
    assert request.url.params["custom_task_ids"] == "true"
    assert "x" not in request.url.params


@pytest.mark.asyncio
async def test_internal_id_has_no_custom_params():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"id": "86abc"})

    client = _client(handler)
    task = await client.get_task(TaskTarget(task_id="86abc"))

    assert task == {"id": "86abc"}
    assert "custom_task_ids" not in seen["request"].url.params


@pytest.mark.asyncio
async def test_upload_attachment_sends_multipart_part():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"id": "att-1", "url": "https://files/att-1"})

    client = _client(handler)
    body = await client.upload_attachment(
        TaskTarget(task_id="86abc"), b"video-bytes", "intro.mp4", "video/mp4"
    )

    request = seen["request"]
    assert body == {"id": "att-1", "url": "https://files/att-1"}
    assert request.url.path == "/api/v2/task/86abc/attachment"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="attachment"; filename="intro.mp4"' in request.content
    assert b"video-bytes" in request.content


@pytest.mark.asyncio
async def test_empty_success_body():
    client = _client(lambda request: httpx.Response(200))

    assert await client.set_field(TaskTarget(task_id="86abc"), "cf-1", True) == {}
