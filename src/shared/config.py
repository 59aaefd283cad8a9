"""
Application Settings

Environment variables (optionally loaded from a .env file) resolved once into
an immutable AppSettings object.

Responsibility:
    - Read every deployment setting in one place
    - Build the FieldConfig / CohortOptions the use cases receive
    - Configure logging (level from LOG_LEVEL)

Architecture Notes:
    - Shared (cross-cutting)
    - create_app() calls AppSettings.from_env() unless settings are injected
      (tests pass AppSettings(...) directly)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from src.domain.applications.constants import DEFAULT_MAX_VIDEO_SIZE_MB
from src.domain.applications.field_config import CohortOptions, FieldConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_CLICKUP_API_URL = "https://api.clickup.com/api/v2"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 420.0
DEFAULT_PORT = 8787
DEFAULT_GUARANTEE_TITLE = "Dion Training - Career Accelerator Job Guarantee"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Stripped variable value; blank counts as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_bool(name: str, default: bool = False) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    value = _env(name)
    try:
        return float(value) if value is not None else default
    except ValueError:
        logging.getLogger(__name__).warning(f"Invalid {name}={value!r}; using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    return int(_env_float(name, float(default)))


def field_config_from_env() -> FieldConfig:
    """FieldConfig with CF_* overrides; shipped defaults stay for dropdown fields."""
    defaults = FieldConfig()
    return FieldConfig(
        email=_env("CF_EMAIL"),
        phone=_env("CF_PHONE"),
        location=_env("CF_LOCATION"),
        other_location=_env("CF_OTHER_LOCATION"),
        work_eligibility=_env("CF_WORK_ELIGIBILITY", defaults.work_eligibility),
        reliable_computer=_env("CF_RELIABLE_COMPUTER", defaults.reliable_computer),
        education=_env("CF_EDUCATION", defaults.education),
        other_education=_env("CF_OTHER_EDUCATION"),
        class_schedule=_env("CF_CLASS_SCHEDULE", defaults.class_schedule),
        commitment_level=_env("CF_COMMITMENT_LEVEL"),
        background_check=_env("CF_BACKGROUND_CHECK", defaults.background_check),
        heard_about=_env("CF_HEARD_ABOUT", defaults.heard_about),
        engagement_req=_env("CF_ENGAGEMENT_REQ"),
        additional_comments=_env("CF_ADDITIONAL_COMMENTS"),
        video_url=_env("CF_DCA_VIDEO_URL"),
        cohort=_env("CF_COHORT"),
        payment_method=_env("CF_PAYMENT_METHOD"),
        guarantee_signed=_env("CF_GUARANTEE_SIGNED"),
    )


@dataclass(frozen=True)
class AppSettings:
    """
    Resolved deployment settings.

    Examples:
        >>> settings = AppSettings.from_env()
        >>> settings.max_video_bytes
        314572800
        >>> AppSettings(clickup_list_id="901100", fields=FieldConfig(cohort="cf-cohort"))
    """

    clickup_token: Optional[str] = None
    clickup_list_id: Optional[str] = None
    clickup_team_id: Optional[str] = None
    clickup_api_url: str = DEFAULT_CLICKUP_API_URL
    use_custom_task_ids: bool = False
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    max_video_size_mb: int = DEFAULT_MAX_VIDEO_SIZE_MB
    temp_dir: Optional[str] = None
    guarantee_title: str = DEFAULT_GUARANTEE_TITLE
    cors_allow_origins: tuple[str, ...] = ("*",)
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    fields: FieldConfig = field(default_factory=FieldConfig)
    cohort_options: CohortOptions = field(default_factory=CohortOptions)

    @property
    def max_video_bytes(self) -> int:
        return self.max_video_size_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Load .env (if present) and read the process environment."""
        load_dotenv()

        origins = _env("CORS_ALLOW_ORIGINS", "*") or "*"
        return cls(
            clickup_token=_env("CLICKUP_TOKEN"),
            clickup_list_id=_env("CLICKUP_LIST_ID"),
            clickup_team_id=_env("CLICKUP_TEAM_ID"),
            clickup_api_url=_env("CLICKUP_API_URL", DEFAULT_CLICKUP_API_URL),
            use_custom_task_ids=_env_bool("CLICKUP_CUSTOM_TASK_IDS"),
            request_timeout_seconds=_env_float(
                "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
            ),
            max_video_size_mb=_env_int("MAX_VIDEO_SIZE_MB", DEFAULT_MAX_VIDEO_SIZE_MB),
            temp_dir=_env("TEMP_DIR"),
            guarantee_title=_env("GUARANTEE_TITLE", DEFAULT_GUARANTEE_TITLE),
            cors_allow_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            port=_env_int("PORT", DEFAULT_PORT),
            log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
            fields=field_config_from_env(),
            cohort_options=CohortOptions(
                october=_env("COHORT_OCT_ID"),
                january=_env("COHORT_JAN_ID"),
            ),
        )


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup shared by the API and scripts."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
