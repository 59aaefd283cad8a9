"""
Application Ports

Protocols the use cases depend on; Infrastructure Layer implements them.
"""

from .document_renderer import DocumentRendererProtocol
from .file_storage import FileStorageServiceProtocol
from .task_tracker import TaskTrackerError, TaskTrackerProtocol

__all__ = [
    "DocumentRendererProtocol",
    "FileStorageServiceProtocol",
    "TaskTrackerError",
    "TaskTrackerProtocol",
]
