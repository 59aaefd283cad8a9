"""
Applications Domain Services

Stateless (or explicitly owned) business logic:
    - OptionCache: enumerated-field options of the applications list
    - OptionResolver + matchers: free text -> option id
    - application_mapper: payload -> task name / description / custom fields
    - cohort_resolver: cohort keyword -> canonical cohort
"""

from .application_mapper import (
    build_field_assignments,
    build_task_description,
    build_task_name,
)
from .cohort_resolver import resolve_cohort
from .option_cache import FieldDefinitionSource, OptionCache
from .option_matchers import (
    ExactMatcher,
    OptionMatcher,
    SubstringMatcher,
    WorkEligibilityMatcher,
    YesNoShorthandMatcher,
    default_matchers,
    normalize_option_text,
)
from .option_resolver import OptionResolver

__all__ = [
    "ExactMatcher",
    "FieldDefinitionSource",
    "OptionCache",
    "OptionMatcher",
    "OptionResolver",
    "SubstringMatcher",
    "WorkEligibilityMatcher",
    "YesNoShorthandMatcher",
    "build_field_assignments",
    "build_task_description",
    "build_task_name",
    "default_matchers",
    "normalize_option_text",
    "resolve_cohort",
]
