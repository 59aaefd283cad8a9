"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - API Layer converts these to HTTP status codes (see src/api/main.py)
    - Upstream (task tracker) failures are NOT domain errors, see
      src/application/ports/task_tracker.py
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class ApplicationValidationError(DomainException):
    """
    Raised when an application submission fails input validation.

    The storefront form shows `message` next to the offending input, so
    `field` carries the wire name of that input (e.g. "videoFile").

    Examples:
        >>> raise ApplicationValidationError(
        ...     "Please upload a short intro video (required).", field="videoFile"
        ... )
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidCohortError(DomainException):
    """Raised when a cohort keyword/label is missing or cannot be recognized."""

    def __init__(self, message: str, cohort: str | None = None) -> None:
        self.cohort = cohort
        super().__init__(message)


class InvalidPaymentMethodError(DomainException):
    """Raised when a payment method key is not one of the supported methods."""

    def __init__(self, message: str, method: str | None = None) -> None:
        self.method = method
        super().__init__(message)


class InvalidSignatureError(DomainException):
    """
    Raised when a guarantee signature payload cannot be decoded.

    Examples:
        >>> raise InvalidSignatureError("signaturePng is not valid base64")
    """


class TaskNotFoundError(DomainException):
    """
    Raised when a request does not identify a remote task.

    Either no task reference was supplied at all, or a custom task id
    could not be resolved to an internal task id.
    """

    def __init__(
        self,
        message: str,
        task_id: str | None = None,
        custom_task_id: str | None = None,
    ) -> None:
        self.task_id = task_id
        self.custom_task_id = custom_task_id
        super().__init__(message)


class ConfigurationError(DomainException):
    """
    Raised when the server is missing configuration required by an operation.

    Examples:
        >>> raise ConfigurationError("CF_COHORT not configured on server", setting="CF_COHORT")
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        super().__init__(message)
