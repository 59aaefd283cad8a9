"""
Tests for SignGuaranteeUseCase and its helpers.
"""

import threading
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.application.ports.task_tracker import TaskTrackerError
from src.application.services.attachment_pipeline import AttachmentPipeline
from src.application.services.sign_guarantee_use_case import (
    SignGuaranteeUseCase,
    build_guarantee_file_name,
    decode_signature_image,
)
from src.application.services.task_locator import TaskLocator
from src.domain.applications.value_objects.task_target import TaskTarget
from src.domain.shared.exceptions import InvalidSignatureError, TaskNotFoundError
from src.infrastructure.documents import GuaranteePdfRenderer
from src.infrastructure.file_storage import FileStorageService


# ============================================================================
# HELPERS
# ============================================================================


def test_decode_signature_accepts_data_url(signature_png_b64, signature_png):
    assert decode_signature_image(f"data:image/png;base64,{signature_png_b64}") == signature_png


def test_decode_signature_accepts_bare_base64(signature_png_b64, signature_png):
    assert decode_signature_image(signature_png_b64) == signature_png


@pytest.mark.parametrize("value", [None, "", "   ", "data:image/png;base64,", "not base64 !!"])
def test_decode_signature_rejects_invalid(value):
    with pytest.raises(InvalidSignatureError):
        decode_signature_image(value)


def test_guarantee_file_name():
    moment = datetime(2025, 1, 1, tzinfo=timezone.utc)

    assert build_guarantee_file_name("Ada O'Neil", moment) == "DCA-Job-Guarantee-Ada ONeil-1735689600000.pdf"
    assert build_guarantee_file_name(None, moment) == "DCA-Job-Guarantee-Applicant-1735689600000.pdf"


# ============================================================================
# USE CASE
# ============================================================================


@pytest.fixture
def renderer():
    renderer = MagicMock()
    renderer.render.return_value = b"%PDF-1.4 fake"
    return renderer


@pytest.fixture
def file_storage(tmp_path):
    storage = MagicMock()
    workspace = tmp_path / "ws"
    workspace.mkdir()
    storage.create_workspace.return_value = workspace
    return storage


@pytest.fixture
def use_case(mock_tracker, renderer, file_storage):
    return SignGuaranteeUseCase(
        locator=TaskLocator(mock_tracker),
        pipeline=AttachmentPipeline(mock_tracker),
        renderer=renderer,
        file_storage=file_storage,
        guarantee_field_id="cf-guarantee",
    )


async def _sign(use_case, signature_png_b64, **overrides):
    kwargs = dict(
        task_id="86abc123",
        custom_task_id=None,
        full_name="Ada Lovelace",
        signed_at="2025-09-30T14:05:00Z",
        terms_text="Terms of the guarantee",
        signature_png=signature_png_b64,
    )
    kwargs.update(overrides)
    return await use_case.execute(**kwargs)


@pytest.mark.asyncio
async def test_sign_renders_uploads_and_records(
    use_case, mock_tracker, renderer, file_storage, signature_png_b64, signature_png
):
    result = await _sign(use_case, signature_png_b64)

    assert result.task_id == "86abc123"
    assert result.file_name.startswith("DCA-Job-Guarantee-Ada Lovelace-")
    assert result.attachment.ok
    assert result.guarantee_field_updated is True

    workspace = file_storage.create_workspace.return_value
    render_args = renderer.render.call_args
    assert render_args.args == ("Ada Lovelace", "2025-09-30T14:05:00Z", "Terms of the guarantee", signature_png)
    assert render_args.kwargs["workdir"] == workspace

    target = TaskTarget(task_id="86abc123")
    mock_tracker.upload_attachment.assert_awaited_once_with(
        target, b"%PDF-1.4 fake", result.file_name, "application/pdf"
    )
    mock_tracker.set_field.assert_awaited_once_with(target, "cf-guarantee", True)
    file_storage.cleanup_workspace.assert_called_once_with(workspace)


@pytest.mark.asyncio
async def test_render_runs_off_the_event_loop_thread(use_case, renderer, signature_png_b64):
    render_threads = []

    def record_thread(*args, **kwargs):
        render_threads.append(threading.get_ident())
        return b"%PDF-1.4 fake"

    renderer.render.side_effect = record_thread

    await _sign(use_case, signature_png_b64)

    assert render_threads
    assert render_threads[0] != threading.get_ident()


@pytest.mark.asyncio
async def test_workspace_cleaned_when_render_fails(use_case, renderer, file_storage, signature_png_b64):
    renderer.render.side_effect = RuntimeError("disk full")

    with pytest.raises(RuntimeError):
        await _sign(use_case, signature_png_b64)

    file_storage.cleanup_workspace.assert_called_once()


@pytest.mark.asyncio
async def test_upload_failure_reported_not_raised(use_case, mock_tracker, signature_png_b64):
    mock_tracker.upload_attachment.side_effect = TaskTrackerError("upload failed", status_code=500, body="oops")

    result = await _sign(use_case, signature_png_b64)

    assert not result.attachment.ok
    assert result.attachment.failure["status"] == 500


@pytest.mark.asyncio
async def test_field_update_skipped_without_field(use_case, mock_tracker, signature_png_b64):
    use_case.guarantee_field_id = None

    result = await _sign(use_case, signature_png_b64)

    assert result.guarantee_field_updated is False
    mock_tracker.set_field.assert_not_awaited()


@pytest.mark.asyncio
async def test_invalid_signature_stops_before_remote_calls(use_case, mock_tracker, file_storage):
    with pytest.raises(InvalidSignatureError):
        await _sign(use_case, "@@@")

    file_storage.create_workspace.assert_not_called()
    mock_tracker.upload_attachment.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_task_reference(use_case, file_storage, signature_png_b64):
    with pytest.raises(TaskNotFoundError):
        await _sign(use_case, signature_png_b64, task_id=None)

    file_storage.create_workspace.assert_not_called()


@pytest.mark.asyncio
async def test_real_renderer_output_is_uploaded(mock_tracker, tmp_path, signature_png_b64):
    storage = FileStorageService(str(tmp_path))
    use_case = SignGuaranteeUseCase(
        locator=TaskLocator(mock_tracker),
        pipeline=AttachmentPipeline(mock_tracker),
        renderer=GuaranteePdfRenderer(),
        file_storage=storage,
    )

    await _sign(use_case, signature_png_b64)

    uploaded = mock_tracker.upload_attachment.await_args.args[1]
    assert uploaded.startswith(b"%PDF-")
    assert list(Path(tmp_path).iterdir()) == []
