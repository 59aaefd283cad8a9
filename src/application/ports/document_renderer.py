"""
Document Renderer Port

Contract for rendering the signed job-guarantee document.
Infrastructure Layer (GuaranteePdfRenderer) implements it.
"""

from pathlib import Path
from typing import Optional, Protocol


class DocumentRendererProtocol(Protocol):
    """Render a two-page signed guarantee PDF."""

    def render(
        self,
        full_name: Optional[str],
        signed_at: Optional[str],
        terms_text: Optional[str],
        signature_image: Optional[bytes],
        workdir: Optional[Path] = None,
        file_name: str = "guarantee.pdf",
    ) -> bytes:
        """Return complete PDF bytes. A bad signature image is skipped, not raised."""
        ...
