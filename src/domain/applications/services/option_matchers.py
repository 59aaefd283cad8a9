"""
Option Matchers - Domain Services

Individual free-text -> dropdown-option matching rules. OptionResolver runs
them as an ordered cascade, first hit wins:

    1. ExactMatcher            normalized text equality
    2. SubstringMatcher        containment in either direction
    3. YesNoShorthandMatcher   "y"/"n" shorthands for Yes/No dropdowns
    4. WorkEligibilityMatcher  phrasing heuristics for the work-eligibility field

Every matcher receives the already-normalized query and the candidate list
as (normalized_name, FieldOption) pairs, so each rule can be tested on its
own and new rules can be slotted in without touching the others.
"""

import re
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from src.domain.applications.value_objects.field_option import FieldOption

Candidate = tuple[str, FieldOption]

_AMPERSAND_PATTERN = re.compile(r"&amp;|&")
_NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]+")


def normalize_option_text(value: object) -> str:
    """
    Normalize free text for option comparison.

    Lowercases, expands the ampersand token ("&amp;" or "&") to "and",
    collapses every run of non-alphanumeric characters to one space and trims.

    Examples:
        >>> normalize_option_text("  U.S. Citizen ")
        'u s citizen'
        >>> normalize_option_text("High School &amp; GED")
        'high school and ged'
    """
    text = str(value or "").lower()
    text = _AMPERSAND_PATTERN.sub(" and ", text)
    text = _NON_ALNUM_PATTERN.sub(" ", text)
    return text.strip()


class OptionMatcher(Protocol):
    """One rule of the resolution cascade."""

    def match(
        self, field_id: str, query: str, candidates: Sequence[Candidate]
    ) -> Optional[FieldOption]:
        ...


class ExactMatcher:
    """Normalized query equals a normalized option name."""

    def match(
        self, field_id: str, query: str, candidates: Sequence[Candidate]
    ) -> Optional[FieldOption]:
        for name, option in candidates:
            if name == query:
                return option
        return None


class SubstringMatcher:
    """
    Query contains an option name, or an option name contains the query.

    Options that normalize to an empty name are ignored (an empty string is
    contained in everything).
    """

    def match(
        self, field_id: str, query: str, candidates: Sequence[Candidate]
    ) -> Optional[FieldOption]:
        for name, option in candidates:
            if name and (name in query or query in name):
                return option
        return None


class YesNoShorthandMatcher:
    """'yes'/'y' -> option named "yes"; 'no'/'n' -> option named "no"."""

    SHORTHANDS = {"yes": "yes", "y": "yes", "no": "no", "n": "no"}

    def match(
        self, field_id: str, query: str, candidates: Sequence[Candidate]
    ) -> Optional[FieldOption]:
        target = self.SHORTHANDS.get(query)
        if target is None:
            return None
        for name, option in candidates:
            if name == target:
                return option
        return None


# Word-bounded so "business" or "campus" never count as "us".
_US_TOKEN = r"(?:us|u s|usa|u s a|united states)"
_MENTIONS_US = re.compile(rf"(?:^| ){_US_TOKEN}(?: |$)")
_US_STATUS_PHRASE = re.compile(
    rf"(?:^| )(?:i am )?(?:a )?{_US_TOKEN} (?:citizen|permanent resident)"
)


def _mentions_us(text: str) -> bool:
    return bool(_MENTIONS_US.search(text))


@dataclass(frozen=True)
class WorkEligibilityMatcher:
    """
    Heuristics for the three-option work-eligibility dropdown.

    Only applies to `field_id`. Recognizes:
        - US citizen / permanent resident phrasing
        - anything mentioning Canada / Canadian
        - "none" / "not eligible"
    and picks the first option whose name carries the matching keywords.
    """

    field_id: Optional[str]

    def match(
        self, field_id: str, query: str, candidates: Sequence[Candidate]
    ) -> Optional[FieldOption]:
        if not self.field_id or field_id != self.field_id:
            return None

        if _US_STATUS_PHRASE.search(query) or (
            _mentions_us(query) and "permanent resident" in query
        ):
            found = self._first(
                candidates,
                lambda n: _mentions_us(n) and ("citizen" in n or "permanent resident" in n),
            )
            if found:
                return found

        if "canada" in query or "canadian" in query:
            found = self._first(candidates, lambda n: "canada" in n or "canadian" in n)
            if found:
                return found

        if "none" in query or "not eligible" in query:
            found = self._first(candidates, lambda n: "not eligible" in n or "none" in n)
            if found:
                return found

        return None

    @staticmethod
    def _first(candidates: Sequence[Candidate], predicate) -> Optional[FieldOption]:
        for name, option in candidates:
            if predicate(name):
                return option
        return None


def default_matchers(work_eligibility_field_id: Optional[str]) -> list[OptionMatcher]:
    """The production cascade, in priority order."""
    return [
        ExactMatcher(),
        SubstringMatcher(),
        YesNoShorthandMatcher(),
        WorkEligibilityMatcher(field_id=work_eligibility_field_id),
    ]
