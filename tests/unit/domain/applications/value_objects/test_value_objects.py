"""Tests for FieldOption, FieldAssignment and AttachmentResult."""

import pytest
from pydantic import ValidationError

from src.domain.applications.value_objects.attachment_result import (
    AttachmentResult,
    UploadStatus,
)
from src.domain.applications.value_objects.field_assignment import FieldAssignment
from src.domain.applications.value_objects.field_option import FieldOption


def test_field_option_identity_is_id():
    assert FieldOption(id="a1", name="Yes") == FieldOption(id="a1", name="Yes (renamed)")
    assert FieldOption(id="a1", name="Yes") != FieldOption(id="a2", name="Yes")


def test_field_option_from_remote():
    option = FieldOption.from_remote({"id": 7, "name": None, "color": "#fff"})

    assert option.id == "7"
    assert option.name == ""


def test_field_assignment_payload():
    assert FieldAssignment(field_id="cf-1", value="opt-1").to_payload() == {
        "id": "cf-1",
        "value": "opt-1",
    }


def test_attachment_result_success_serializes_camel_case():
    result = AttachmentResult.succeeded("att-1", "https://files/att-1")

    assert result.ok
    assert result.model_dump(by_alias=True, mode="json") == {
        "remoteId": "att-1",
        "url": "https://files/att-1",
        "uploadStatus": "ok",
        "failure": None,
    }


def test_attachment_result_failure():
    result = AttachmentResult.failed({"step": "upload", "status": 500, "body": {"err": "x"}})

    assert not result.ok
    assert result.upload_status == UploadStatus.FAILED
    assert result.failure["status"] == 500


def test_attachment_result_is_frozen():
    result = AttachmentResult.succeeded("att-1", None)

    with pytest.raises(ValidationError):
        result.url = "changed"
