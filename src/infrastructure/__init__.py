"""
Infrastructure Layer - External Dependencies

Implements the technical capabilities the Application Layer depends on.

Architecture:
    - Implements Application Layer protocols (TaskTrackerProtocol,
      FileStorageServiceProtocol)
    - Depends on external libraries (httpx, reportlab)
    - No Domain business logic (only technical implementations)

Modules:
    - clickup: async ClickUp v2 REST adapter (httpx)
    - documents: guarantee PDF rendering (reportlab)
    - file_storage: temporary workspaces

Usage:
    >>> from src.infrastructure import ClickUpClient, GuaranteePdfRenderer, FileStorageService
"""

from .clickup import ClickUpClient
from .documents import GuaranteePdfRenderer
from .file_storage import FileStorageService

__all__ = [
    "ClickUpClient",
    "FileStorageService",
    "GuaranteePdfRenderer",
]
