"""
FieldOption Value Object

One selectable value of a remote enumerated (dropdown/labels) field.

Architecture Notes:
    - Value Object (immutable, identity is `id`)
    - Built from the `type_config.options` entries of the list-fields response
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldOption:
    """
    Immutable (id, display-name) pair of an enumerated field.

    Equality and hashing use `id` only, so two fetches returning the same
    option under a renamed label still compare equal.

    Examples:
        >>> opt = FieldOption.from_remote({"id": "a1", "name": "Yes", "color": "#0f0"})
        >>> opt.id, opt.name
        ('a1', 'Yes')
    """

    id: str
    name: str = field(compare=False)

    @classmethod
    def from_remote(cls, raw: dict[str, Any]) -> "FieldOption":
        """Build from a raw option dict; a missing name becomes an empty string."""
        return cls(id=str(raw.get("id", "")), name=str(raw.get("name") or ""))

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}
