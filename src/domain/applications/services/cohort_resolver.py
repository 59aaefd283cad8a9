"""
Cohort keyword resolution.

Maps whatever the approved/cohort page posts ("october", "DTCA-2601 (January)",
"Oct 2025", ...) to a canonical cohort name.
"""

from typing import Optional

from src.domain.applications.constants import COHORT_KEYWORDS


def resolve_cohort(label: Optional[str]) -> Optional[str]:
    """
    Canonical cohort name for a keyword or label, or None if unrecognized.

    Examples:
        >>> resolve_cohort("DTCA-2502 extra text")
        'october'
        >>> resolve_cohort(" January ")
        'january'
        >>> resolve_cohort("unknown") is None
        True
    """
    value = str(label or "").strip().lower()
    if not value:
        return None

    for cohort, _ in COHORT_KEYWORDS:
        if value == cohort:
            return cohort

    for cohort, keywords in COHORT_KEYWORDS:
        if any(keyword in value for keyword in keywords):
            return cohort

    return None
