"""
Application Mapper - Domain Service

Turns an ApplicationPayload into the pieces of a remote task:
name, Markdown description and custom-field assignments.

Business Rules:
    - Contact details, "other" write-ins, engagement acknowledgement and
      comments are plain text fields
    - Location, work eligibility, reliable computer, background check,
      education, class schedule, commitment and heard-about go through
      OptionResolver.push_dropdown_or_text
    - Experience and certification answers are description-only
"""

from datetime import datetime, timezone
from typing import Optional

from src.domain.applications.entities.application_payload import ApplicationPayload
from src.domain.applications.field_config import FieldConfig
from src.domain.applications.services.option_resolver import OptionResolver
from src.domain.applications.value_objects.field_assignment import FieldAssignment


def build_task_name(payload: ApplicationPayload, now: Optional[datetime] = None) -> str:
    """Applicant name, or a timestamped placeholder when the name is missing."""
    if payload.full_name:
        return payload.full_name
    moment = now or datetime.now(timezone.utc)
    return f"Application {moment.isoformat()}"


def _with_other(value: str, other: Optional[str]) -> str:
    return f"{value} ({other})" if other else value


def build_task_description(payload: ApplicationPayload) -> str:
    """
    Render the Markdown task description shown to reviewers.

    Examples:
        >>> build_task_description(ApplicationPayload(email="a@b.co", location="Other", other_location="Guam"))
        '- **Email:** a@b.co\\n- **Location:** Other (Guam)'
    """
    p = payload
    rows: list[str] = []
    if p.email:
        rows.append(f"- **Email:** {p.email}")
    if p.phone:
        rows.append(f"- **Phone:** {p.phone}")
    if p.location:
        rows.append(f"- **Location:** {_with_other(p.location, p.other_location)}")
    if p.work_eligibility:
        rows.append(f"- **Work eligibility:** {p.work_eligibility}")
    if p.education:
        rows.append(f"- **Education:** {_with_other(p.education, p.other_education)}")
    if p.heard_about:
        rows.append(f"- **Heard about us:** {p.heard_about}")
    if p.class_schedule:
        rows.append(f"- **Class availability:** {p.class_schedule}")
    if p.commitment_level:
        rows.append(f"- **Commitment:** {p.commitment_level}")

    if p.has_experience:
        rows.append(f"- **Prior IT experience:** {p.has_experience}")
    if p.experience_description:
        rows.append(f"\n**Experience details**\n{p.experience_description}")
    if p.cert_completed:
        rows.append(f"\n**Certifications status:** {p.cert_completed}")
    if p.certifications_listed:
        rows.append(f"**Certifications listed:** {p.certifications_listed}")

    if p.engagement_text:
        rows.append(f"\n**Engagement requirement ack:** {p.engagement_text}")
    if p.additional_comments:
        rows.append(f"\n**Additional comments**\n{p.additional_comments}")

    return "\n".join(rows)


def _push_text(
    assignments: list[FieldAssignment], field_id: Optional[str], value: Optional[str]
) -> None:
    if field_id and value:
        assignments.append(FieldAssignment(field_id=field_id, value=value))


def build_field_assignments(
    payload: ApplicationPayload,
    fields: FieldConfig,
    resolver: OptionResolver,
) -> list[FieldAssignment]:
    """
    Build the custom-field list for a new application task.

    Args:
        payload: Normalized form answers
        fields: Custom-field ids of this deployment
        resolver: OptionResolver backed by a freshly refreshed OptionCache

    Returns:
        Assignments in form order; unresolvable dropdown answers are omitted
    """
    p = payload
    assignments: list[FieldAssignment] = []

    _push_text(assignments, fields.email, p.email)
    _push_text(assignments, fields.phone, p.phone)

    resolver.push_dropdown_or_text(assignments, fields.location, p.location)
    _push_text(assignments, fields.other_location, p.other_location)

    resolver.push_dropdown_or_text(assignments, fields.work_eligibility, p.work_eligibility)
    resolver.push_dropdown_or_text(assignments, fields.reliable_computer, p.reliable_computer)
    resolver.push_dropdown_or_text(assignments, fields.background_check, p.background_check)

    resolver.push_dropdown_or_text(assignments, fields.education, p.education)
    _push_text(assignments, fields.other_education, p.other_education)

    resolver.push_dropdown_or_text(assignments, fields.class_schedule, p.class_schedule)
    resolver.push_dropdown_or_text(assignments, fields.commitment_level, p.commitment_level)
    resolver.push_dropdown_or_text(assignments, fields.heard_about, p.heard_about)

    _push_text(assignments, fields.engagement_req, p.engagement_text)
    _push_text(assignments, fields.additional_comments, p.additional_comments)

    return assignments
