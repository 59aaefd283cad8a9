"""
File Storage Service

Manages per-request scratch directories used while rendering documents.

Responsibility:
    - Create isolated workspace directories under a base temp dir
    - Hard-delete workspaces after use (called on every exit path)
    - Implements FileStorageServiceProtocol from Application Layer

Architecture Notes:
    - Infrastructure Layer (file system operations)
    - Nothing is kept: submissions are not stored durably

Storage Structure:
    Base directory: system temp dir (from env: TEMP_DIR)
        {base_dir}/{prefix}{random}/sig.png
        {base_dir}/{prefix}{random}/DCA-Job-Guarantee-....pdf
"""

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class FileStorageService:
    """
    Service for temporary workspace management.

    Examples:
        >>> service = FileStorageService()
        >>> with service.workspace("dtca-") as workdir:
        ...     (workdir / "sig.png").write_bytes(png)
        # workdir and its contents are gone here, even after an exception
    """

    def __init__(self, base_dir: Optional[str] = None) -> None:
        """
        Initialize file storage service.

        Args:
            base_dir: Base directory for workspaces (default from env: TEMP_DIR,
                falling back to the system temp dir)

        Raises:
            OSError: If base directory cannot be created
        """
        self.base_dir = Path(base_dir or os.getenv("TEMP_DIR") or tempfile.gettempdir())
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def create_workspace(self, prefix: str = "dtca-") -> Path:
        """Create a fresh private directory under base_dir."""
        workspace = Path(tempfile.mkdtemp(prefix=prefix, dir=self.base_dir))
        logger.debug(f"Created workspace: {workspace}")
        return workspace

    def cleanup_workspace(self, workspace: Path) -> None:
        """
        Delete a workspace recursively.

        Missing directories are ignored and deletion errors are logged, so
        this is safe to call from `finally` blocks.
        """
        if not workspace.exists():
            logger.debug(f"Workspace already removed: {workspace}")
            return
        try:
            shutil.rmtree(workspace)
            logger.debug(f"Cleaned up workspace: {workspace}")
        except OSError as e:
            logger.warning(f"Failed to clean up workspace {workspace}: {e}")

    @contextmanager
    def workspace(self, prefix: str = "dtca-") -> Iterator[Path]:
        """Context manager wrapping create_workspace()/cleanup_workspace()."""
        path = self.create_workspace(prefix)
        try:
            yield path
        finally:
            self.cleanup_workspace(path)
