"""
Tests for POST /api/apply.
"""

from unittest.mock import AsyncMock, patch

from fastapi import status
from starlette.datastructures import UploadFile

from src.application.ports.task_tracker import TaskTrackerError

FORM = {
    "fullName": "Ada Lovelace",
    "email": "ada@example.com",
    "workEligibility": "U.S. Citizen",
    "reliableComputer": "yes",
}
VIDEO = {"videoFile": ("intro.mp4", b"\x00" * 4096, "video/mp4")}


def test_apply_success(client, mock_tracker):
    response = client.post("/api/apply", data=FORM, files=VIDEO)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "ok"
    assert body["taskId"] == "86abc123"
    assert body["customTaskId"] == "DTCA-1042"
    assert body["taskUrl"] == "https://app.clickup.com/t/86abc123"
    assert body["upload"]["uploadStatus"] == "ok"
    assert body["upload"]["url"] == "https://attachments.clickup.com/att-1/intro.mp4"

    sent = mock_tracker.create_task.await_args.kwargs["custom_fields"]
    assert {"id": "cf-work", "value": "opt-us"} in sent
    assert mock_tracker.upload_attachment.await_args.args[2] == "intro.mp4"


def test_apply_missing_video_is_validation_error(client, mock_tracker):
    response = client.post("/api/apply", data=FORM)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": "validation_error",
        "field": "videoFile",
        "message": "Please upload a short intro video (required).",
    }
    mock_tracker.list_fields.assert_not_awaited()
    mock_tracker.create_task.assert_not_awaited()


def test_apply_wrong_file_type(client, mock_tracker):
    response = client.post(
        "/api/apply", data=FORM, files={"videoFile": ("resume.pdf", b"%PDF", "application/pdf")}
    )

    body = response.json()
    assert body["status"] == "validation_error"
    assert body["message"] == "File must be a video (e.g., .mp4, .mov)."
    mock_tracker.create_task.assert_not_awaited()


def test_apply_video_too_large(client):
    big = {"videoFile": ("big.mp4", b"\x00" * (1024 * 1024 + 1), "video/mp4")}

    body = client.post("/api/apply", data=FORM, files=big).json()

    assert body["status"] == "validation_error"
    assert body["message"] == "Video too large. Maximum size is 1 MB."


def test_apply_oversized_video_is_rejected_before_reading(client, mock_tracker):
    big = {"videoFile": ("big.mp4", b"\x00" * (2 * 1024 * 1024), "video/mp4")}

    with patch.object(UploadFile, "read", new_callable=AsyncMock) as read:
        body = client.post("/api/apply", data=FORM, files=big).json()

    assert body == {
        "status": "validation_error",
        "field": "videoFile",
        "message": "Video too large. Maximum size is 1 MB.",
    }
    read.assert_not_awaited()
    mock_tracker.list_fields.assert_not_awaited()
    mock_tracker.create_task.assert_not_awaited()


def test_apply_wrong_type_is_rejected_before_reading(client):
    pdf = {"videoFile": ("resume.pdf", b"%PDF-1.4", "application/pdf")}

    with patch.object(UploadFile, "read", new_callable=AsyncMock) as read:
        body = client.post("/api/apply", data=FORM, files=pdf).json()

    assert body["message"] == "File must be a video (e.g., .mp4, .mov)."
    read.assert_not_awaited()


def test_apply_attachment_failure_still_reports_task(client, mock_tracker):
    mock_tracker.upload_attachment.side_effect = TaskTrackerError(
        "upload failed", status_code=500, body={"err": "Internal"}
    )

    response = client.post("/api/apply", data=FORM, files=VIDEO)

    body = response.json()
    assert response.status_code == status.HTTP_200_OK
    assert body["status"] == "ok"
    assert body["taskId"] == "86abc123"
    assert body["upload"]["uploadStatus"] == "failed"
    assert body["upload"]["failure"] == {"step": "upload", "status": 500, "body": {"err": "Internal"}}


def test_apply_task_create_failure(client, mock_tracker):
    mock_tracker.create_task.side_effect = TaskTrackerError(
        "create task failed", status_code=400, body={"err": "Value is not a valid option"}
    )

    response = client.post("/api/apply", data=FORM, files=VIDEO)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": "task_create_failed",
        "upstreamStatus": 400,
        "error": {"err": "Value is not a valid option"},
        "debug": {"list": "list-1", "sentCustomFields": ["cf-email", "cf-work", "cf-computer"]},
    }
