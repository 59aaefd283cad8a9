"""
File Storage Infrastructure Module

Temporary workspace management on the local file system.

Exports:
    - FileStorageService: Create/cleanup scratch directories (implements Protocol)
"""

from .file_storage_service import FileStorageService

__all__ = ["FileStorageService"]
