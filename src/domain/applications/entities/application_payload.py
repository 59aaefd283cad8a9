"""
ApplicationPayload Entity

Normalized view of one storefront application submission.

Responsibility:
    - Pick the known answer fields out of an arbitrary raw submission
    - Trim every value; blank answers become absent (None)
    - No other validation: any field may be missing

Architecture Notes:
    - Part of Applications subdomain
    - Wire names are camelCase (as posted by the storefront form),
      Python attributes are snake_case
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def _clean(value: Any) -> Optional[str]:
    """Trim a raw form value; None and blank strings become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class ApplicationPayload(BaseModel):
    """
    Trimmed, optional answers of an application form.

    Examples:
        >>> payload = ApplicationPayload.from_raw({"fullName": "  Ada Lovelace ", "email": ""})
        >>> payload.full_name
        'Ada Lovelace'
        >>> payload.email is None
        True
    """

    full_name: Optional[str] = None

    email: Optional[str] = None
    phone: Optional[str] = None

    location: Optional[str] = None
    other_location: Optional[str] = None

    work_eligibility: Optional[str] = None

    reliable_computer: Optional[str] = None
    background_check: Optional[str] = None

    has_experience: Optional[str] = None
    experience_description: Optional[str] = None

    cert_completed: Optional[str] = None
    certifications_listed: Optional[str] = None

    education: Optional[str] = None
    other_education: Optional[str] = None

    class_schedule: Optional[str] = None
    commitment_level: Optional[str] = None

    heard_about: Optional[str] = None

    engagement_text: Optional[str] = None
    additional_comments: Optional[str] = None

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ApplicationPayload":
        """
        Build a payload from a raw submission mapping (form data or JSON).

        Unknown keys are ignored. Each known field is looked up under its
        camelCase wire name first, then under its snake_case name.

        Args:
            raw: Mapping of submitted field names to values

        Returns:
            ApplicationPayload with trimmed values
        """
        values: dict[str, Optional[str]] = {}
        for name, field_info in cls.model_fields.items():
            alias = field_info.alias or name
            if alias in raw:
                values[name] = _clean(raw[alias])
            elif name in raw:
                values[name] = _clean(raw[name])
        return cls(**values)
