"""ClickUp v2 API adapter (httpx)."""

from .client import ClickUpClient

__all__ = ["ClickUpClient"]
