"""
Applications Subdomain Constants

Fixed identifiers of the production ClickUp workspace and the keyword
tables used to interpret lifecycle requests.
"""

from typing import Final


# ============================================================================
# DEFAULT CUSTOM-FIELD IDS - used when the matching CF_* variable is unset
# ============================================================================

DEFAULT_WORK_ELIGIBILITY_FIELD: Final[str] = "aec8f523-e21d-4cd7-a359-d52f712009cb"
DEFAULT_RELIABLE_COMPUTER_FIELD: Final[str] = "ba53f6aa-997f-4af6-9e52-dd4e76c31723"
DEFAULT_EDUCATION_FIELD: Final[str] = "54a767b7-175a-46b6-b380-741c654017b2"
DEFAULT_CLASS_SCHEDULE_FIELD: Final[str] = "90cf8381-4096-4b5c-8d8d-46f679ae7ef0"
DEFAULT_BACKGROUND_CHECK_FIELD: Final[str] = "bda2b4d0-d66e-49ef-b315-b8dce562abfd"
DEFAULT_HEARD_ABOUT_FIELD: Final[str] = "f44b2bb5-0120-40fd-97c6-17ca42c85d32"


# ============================================================================
# PAYMENT METHODS - method key -> dropdown option id of the payment field
# ============================================================================

PAYMENT_METHOD_OPTIONS: Final[dict[str, str]] = {
    "pay_in_full": "203361fe-94f4-4173-96d9-2e7335cc6be7",
    "pay_as_you_go": "5f6b1dc7-b5b4-4a30-817b-8e5e5026e3a6",
    "climb_loan": "ff05f2a5-a7c4-42f9-8a48-bb1c6ce1eb2c",
}


# ============================================================================
# COHORTS - keyword tables (matched against a trimmed, lowercased label)
# ============================================================================

COHORT_OCTOBER: Final[str] = "october"
COHORT_JANUARY: Final[str] = "january"

# Order matters: October is checked before January.
COHORT_KEYWORDS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    (COHORT_OCTOBER, ("dtca-2502", "oct")),
    (COHORT_JANUARY, ("dtca-2601", "jan")),
)


# ============================================================================
# UPLOAD LIMITS
# ============================================================================

VIDEO_FIELD_NAME: Final[str] = "videoFile"
DEFAULT_MAX_VIDEO_SIZE_MB: Final[int] = 300
VIDEO_MIME_PREFIX: Final[str] = "video/"
