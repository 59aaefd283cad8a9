"""
Shared Domain

Cross-subdomain domain concepts (currently the exception hierarchy).
"""

from .exceptions import (
    ApplicationValidationError,
    ConfigurationError,
    DomainException,
    InvalidCohortError,
    InvalidPaymentMethodError,
    InvalidSignatureError,
    TaskNotFoundError,
)

__all__ = [
    "ApplicationValidationError",
    "ConfigurationError",
    "DomainException",
    "InvalidCohortError",
    "InvalidPaymentMethodError",
    "InvalidSignatureError",
    "TaskNotFoundError",
]
