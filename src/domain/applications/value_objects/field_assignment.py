"""
FieldAssignment Value Object

One entry destined for the remote task's `custom_fields` list.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldAssignment:
    """
    Custom-field id plus the value to store.

    For enumerated fields `value` is a resolved option id, for text fields
    it is the applicant's raw (trimmed) text.
    """

    field_id: str
    value: str

    def to_payload(self) -> dict[str, str]:
        """Serialize into the `{id, value}` shape the task API expects."""
        return {"id": self.field_id, "value": self.value}
