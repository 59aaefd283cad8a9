"""
Pytest Configuration and Shared Fixtures

Fixtures:
    - field_definitions: ClickUp `GET /list/{id}/field` payload of a test list
    - field_config: FieldConfig pointing at those fields
    - mock_tracker: AsyncMock TaskTrackerProtocol serving `field_definitions`
    - option_cache: OptionCache already refreshed from `mock_tracker`
    - signature_png: 1x1 PNG, base64

Architecture Notes:
    - No network: the tracker is always a mock (or httpx.MockTransport)
    - Async tests use @pytest.mark.asyncio (pytest-asyncio, strict mode)
"""

import asyncio
import base64
import logging
from unittest.mock import AsyncMock

import pytest

from src.domain.applications.field_config import CohortOptions, FieldConfig
from src.domain.applications.services.option_cache import OptionCache
from src.domain.applications.services.option_matchers import default_matchers
from src.domain.applications.services.option_resolver import OptionResolver

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

SIGNATURE_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


# ============================================================================
# FIELD FIXTURES
# ============================================================================


@pytest.fixture
def field_definitions():
    """Custom fields of the test list: five dropdowns and two text fields."""
    return [
        {
            "id": "cf-work",
            "name": "Work Eligibility",
            "type": "drop_down",
            "type_config": {
                "options": [
                    {"id": "opt-us", "name": "US Citizen / Permanent Resident"},
                    {"id": "opt-ca", "name": "Canadian Citizen / Permanent Resident"},
                    {"id": "opt-none", "name": "Not eligible"},
                ]
            },
        },
        {
            "id": "cf-computer",
            "name": "Reliable Computer",
            "type": "drop_down",
            "type_config": {"options": [{"id": "opt-yes", "name": "Yes"}, {"id": "opt-no", "name": "No"}]},
        },
        {
            "id": "cf-edu",
            "name": "Education",
            "type": "drop_down",
            "type_config": {
                "options": [
                    {"id": "opt-hs", "name": "High School &amp; GED"},
                    {"id": "opt-bachelor", "name": "Bachelor's Degree"},
                    {"id": "opt-other", "name": "Other"},
                ]
            },
        },
        {
            "id": "cf-schedule",
            "name": "Class Schedule",
            "type": "drop_down",
            "type_config": {"options": [{"id": "sched-yes", "name": "Yes"}, {"id": "sched-no", "name": "No"}]},
        },
        {
            "id": "cf-heard",
            "name": "Heard About",
            "type": "drop_down",
            "type_config": {
                "options": [
                    {"id": "heard-yt", "name": "YouTube"},
                    {"id": "heard-friend", "name": "Friend or Family"},
                ]
            },
        },
        {"id": "cf-email", "name": "Email", "type": "email", "type_config": {}},
        {"id": "cf-location", "name": "Location", "type": "short_text", "type_config": {}},
    ]


@pytest.fixture
def field_config():
    """FieldConfig matching `field_definitions`."""
    return FieldConfig(
        email="cf-email",
        phone="cf-phone",
        location="cf-location",
        other_location="cf-other-location",
        work_eligibility="cf-work",
        reliable_computer="cf-computer",
        education="cf-edu",
        other_education="cf-other-edu",
        class_schedule="cf-schedule",
        commitment_level=None,
        background_check=None,
        heard_about="cf-heard",
        engagement_req="cf-engagement",
        additional_comments="cf-comments",
        video_url="cf-video-url",
        cohort="cf-cohort",
        payment_method="cf-payment",
        guarantee_signed="cf-guarantee",
    )


@pytest.fixture
def cohort_options():
    return CohortOptions(october="opt-oct", january="opt-jan")


# ============================================================================
# TRACKER / CACHE FIXTURES
# ============================================================================


@pytest.fixture
def mock_tracker(field_definitions):
    """AsyncMock task tracker with happy-path answers."""
    tracker = AsyncMock()
    tracker.list_fields.return_value = field_definitions
    tracker.create_task.return_value = {
        "id": "86abc123",
        "custom_id": "DTCA-1042",
        "url": "https://app.clickup.com/t/86abc123",
    }
    tracker.get_task.return_value = {"id": "86abc123", "custom_id": "DTCA-1042"}
    tracker.set_field.return_value = {}
    tracker.upload_attachment.return_value = {
        "id": "att-1",
        "url": "https://attachments.clickup.com/att-1/intro.mp4",
    }
    return tracker


@pytest.fixture
def option_cache(mock_tracker):
    """OptionCache refreshed once from `mock_tracker` (for sync tests)."""
    cache = OptionCache(mock_tracker, "list-1")
    asyncio.run(cache.refresh())
    return cache


@pytest.fixture
def option_resolver(option_cache, field_config):
    return OptionResolver(option_cache, default_matchers(field_config.work_eligibility))


@pytest.fixture
def signature_png():
    """Decoded 1x1 PNG."""
    return base64.b64decode(SIGNATURE_PNG_B64)


@pytest.fixture
def signature_png_b64():
    return SIGNATURE_PNG_B64
