"""
Domain Layer - Core Business Logic

Business rules of the application intake bridge. Framework-independent and
free of HTTP/ClickUp details, so every rule is unit-testable in isolation.

Subdomains:
    - applications: option cache/resolution, payload mapping, cohort rules
    - shared: cross-subdomain concepts (exceptions)

Usage:
    >>> from src.domain import OptionCache, OptionResolver, DomainException
    >>> from src.domain.applications.services import normalize_option_text
"""

from .applications import (
    ApplicationPayload,
    AttachmentResult,
    FieldAssignment,
    FieldConfig,
    FieldOption,
    OptionCache,
    OptionResolver,
    TaskTarget,
)
from .shared import DomainException

__all__ = [
    "ApplicationPayload",
    "AttachmentResult",
    "DomainException",
    "FieldAssignment",
    "FieldConfig",
    "FieldOption",
    "OptionCache",
    "OptionResolver",
    "TaskTarget",
]
