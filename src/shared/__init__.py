"""
Shared Utilities

Responsibility:
    Cross-cutting concerns used across all layers.

Contains:
    - config: AppSettings (environment / .env) and logging setup

Does NOT contain:
    - Layer-specific code
    - Business logic
    - Infrastructure implementations
"""

from .config import AppSettings, configure_logging

__all__ = ["AppSettings", "configure_logging"]
