"""
OptionResolver - Domain Service

Resolves applicant free text to the option id of a remote enumerated field,
and decides whether a form answer is written to the task at all.

Architecture Notes:
    - Reads options from an injected OptionCache (never touches the network)
    - Matching rules are an ordered list of OptionMatcher strategies
      (see option_matchers.py)
    - Stateless apart from its collaborators

Business Rules:
    - Field known to be enumerated + no match -> answer is dropped (warning logged).
      The tracker rejects or silently coerces unknown option ids, so the raw
      string is never sent in place of an option id.
    - Field not known to be enumerated -> raw answer is written as text.
"""

import logging
from typing import Optional, Sequence

from src.domain.applications.services.option_cache import OptionCache
from src.domain.applications.services.option_matchers import (
    OptionMatcher,
    default_matchers,
    normalize_option_text,
)
from src.domain.applications.value_objects.field_assignment import FieldAssignment

logger = logging.getLogger(__name__)


class OptionResolver:
    """
    Free-text -> option id resolution over an OptionCache.

    Attributes:
        cache: OptionCache with the current enumerated fields
        matchers: Ordered matching rules, first hit wins

    Examples:
        >>> resolver = OptionResolver(cache, default_matchers(work_eligibility_field))
        >>> resolver.resolve(education_field, "Bachelor's degree")
        'opt-bachelor'
        >>> assignments = []
        >>> resolver.push_dropdown_or_text(assignments, heard_about_field, "Reddit")
    """

    def __init__(
        self,
        cache: OptionCache,
        matchers: Optional[Sequence[OptionMatcher]] = None,
    ) -> None:
        self.cache = cache
        self.matchers = list(matchers) if matchers is not None else default_matchers(None)

    def resolve(self, field_id: Optional[str], raw_text: Optional[str]) -> Optional[str]:
        """
        Find the option id of `field_id` that best matches `raw_text`.

        Args:
            field_id: Remote custom-field id
            raw_text: Applicant answer as typed/selected on the form

        Returns:
            Matching option id, or None when the field has no cached options,
            the answer normalizes to nothing, or no rule matched
        """
        if not field_id or not raw_text:
            return None

        options = self.cache.lookup(field_id)
        if not options:
            return None

        query = normalize_option_text(raw_text)
        if not query:
            return None

        candidates = [(normalize_option_text(o.name), o) for o in options]
        for matcher in self.matchers:
            found = matcher.match(field_id, query, candidates)
            if found is not None:
                return found.id

        logger.warning(
            f'No dropdown match for field {field_id} value "{raw_text}". '
            f"Options={[o.name for o in options]}"
        )
        return None

    def push_dropdown_or_text(
        self,
        assignments: list[FieldAssignment],
        field_id: Optional[str],
        raw: Optional[str],
    ) -> None:
        """
        Append the assignment for one form answer, if it should be written.

        - No field id or no answer: nothing appended
        - Answer resolves to an option: option id appended
        - Field has no cached options (plain text field): raw answer appended
        - Enumerated field without a match: nothing appended
        """
        if not field_id or not raw:
            return

        option_id = self.resolve(field_id, raw)
        if option_id:
            assignments.append(FieldAssignment(field_id=field_id, value=option_id))
        elif not self.cache.has_options(field_id):
            assignments.append(FieldAssignment(field_id=field_id, value=raw))
        else:
            logger.warning(f'Skipped field {field_id} for raw="{raw}" (dropdown with no match)')
