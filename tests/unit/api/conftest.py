"""
Common fixtures for API unit tests.

Provides:
- settings: AppSettings for a test deployment (no environment access)
- app: create_app() wired to the shared `mock_tracker`
- client: FastAPI TestClient (lifespan not started unless used as context manager)
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.shared.config import AppSettings


@pytest.fixture
def settings(field_config, cohort_options, tmp_path):
    return AppSettings(
        clickup_token="pk_test",
        clickup_list_id="list-1",
        clickup_team_id="team-9",
        use_custom_task_ids=False,
        max_video_size_mb=1,
        temp_dir=str(tmp_path / "work"),
        fields=field_config,
        cohort_options=cohort_options,
    )


@pytest.fixture
def app(settings, mock_tracker):
    return create_app(settings, tracker=mock_tracker)


@pytest.fixture
def client(app):
    """
    FastAPI TestClient for testing endpoints.

    Server exceptions are rendered by the global handlers instead of being
    re-raised into the test.
    """
    return TestClient(app, raise_server_exceptions=False)
