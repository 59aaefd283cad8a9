"""
File Storage Port

Contract for the per-request scratch directories used while rendering
documents. Infrastructure Layer (FileStorageService) implements it.
"""

from pathlib import Path
from typing import Protocol


class FileStorageServiceProtocol(Protocol):
    """Create and remove isolated temporary workspaces."""

    def create_workspace(self, prefix: str) -> Path:
        """Create a fresh, empty directory and return its path."""
        ...

    def cleanup_workspace(self, workspace: Path) -> None:
        """Remove a workspace and everything in it. Never raises."""
        ...
