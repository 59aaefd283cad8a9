"""
Field Configuration

Maps business meanings ("education", "cohort", ...) onto the remote
custom-field ids of one deployment.

Design Principles:
    - Resolved once at startup (see src/shared/config.py), passed in explicitly
    - Immutable (frozen dataclass)
    - Optional ids: an unset field is simply not written
"""

from dataclasses import dataclass, field
from typing import Optional

from src.domain.applications.constants import (
    COHORT_JANUARY,
    COHORT_OCTOBER,
    DEFAULT_BACKGROUND_CHECK_FIELD,
    DEFAULT_CLASS_SCHEDULE_FIELD,
    DEFAULT_EDUCATION_FIELD,
    DEFAULT_HEARD_ABOUT_FIELD,
    DEFAULT_RELIABLE_COMPUTER_FIELD,
    DEFAULT_WORK_ELIGIBILITY_FIELD,
    PAYMENT_METHOD_OPTIONS,
)


@dataclass(frozen=True)
class FieldConfig:
    """
    Custom-field ids of the applications list.

    Text fields: email, phone, other_location, other_education,
    engagement_req, additional_comments, video_url.
    Dropdown-or-text fields: location, work_eligibility, reliable_computer,
    background_check, education, class_schedule, commitment_level, heard_about.
    Lifecycle fields: cohort, payment_method, guarantee_signed.
    """

    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    other_location: Optional[str] = None
    work_eligibility: Optional[str] = DEFAULT_WORK_ELIGIBILITY_FIELD
    reliable_computer: Optional[str] = DEFAULT_RELIABLE_COMPUTER_FIELD
    education: Optional[str] = DEFAULT_EDUCATION_FIELD
    other_education: Optional[str] = None
    class_schedule: Optional[str] = DEFAULT_CLASS_SCHEDULE_FIELD
    commitment_level: Optional[str] = None
    background_check: Optional[str] = DEFAULT_BACKGROUND_CHECK_FIELD
    heard_about: Optional[str] = DEFAULT_HEARD_ABOUT_FIELD
    engagement_req: Optional[str] = None
    additional_comments: Optional[str] = None
    video_url: Optional[str] = None
    cohort: Optional[str] = None
    payment_method: Optional[str] = None
    guarantee_signed: Optional[str] = None


@dataclass(frozen=True)
class CohortOptions:
    """
    Dropdown option ids of the cohort field, keyed by canonical cohort name.

    Examples:
        >>> opts = CohortOptions(october="opt-oct", january=None)
        >>> opts.option_for("october")
        'opt-oct'
        >>> opts.option_for("january") is None
        True
    """

    october: Optional[str] = None
    january: Optional[str] = None

    def option_for(self, cohort: str) -> Optional[str]:
        if cohort == COHORT_OCTOBER:
            return self.october
        if cohort == COHORT_JANUARY:
            return self.january
        return None


@dataclass(frozen=True)
class PaymentMethodOptions:
    """Dropdown option ids of the payment-method field, keyed by method key."""

    options: dict[str, str] = field(default_factory=lambda: dict(PAYMENT_METHOD_OPTIONS))

    def option_for(self, method: str) -> Optional[str]:
        return self.options.get(method)

    @property
    def keys(self) -> list[str]:
        return list(self.options)
