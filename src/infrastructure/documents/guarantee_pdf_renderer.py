"""
Guarantee PDF Renderer

Renders the signed job-guarantee document with reportlab.

Layout:
    Page 1: title, "Signed by", "Signed at", terms paragraph
    Page 2: "Signature" heading, signature image fitted into a 400x120 pt box,
            signer name and human-readable date

Business Rules:
    - A missing or undecodable signature image is skipped; the rest of the
      document still renders
    - Output is a complete PDF byte stream, ready for upload
    - Intermediate files are written into a caller-owned workspace (or a
      private temporary directory that is removed before returning)
"""

import logging
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Dion Training - Career Accelerator Job Guarantee"
SIGNATURE_BOX = (400.0, 120.0)
PAGE_MARGIN = 50.0


def format_signed_date(signed_at: Optional[str]) -> str:
    """
    Human-readable signing date.

    ISO-8601 input (with or without a trailing "Z") is reformatted;
    anything else is shown as received.

    Examples:
        >>> format_signed_date("2025-09-30T14:05:00Z")
        'September 30, 2025, 02:05 PM'
        >>> format_signed_date("yesterday")
        'yesterday'
    """
    if not signed_at:
        moment = datetime.now(timezone.utc)
    else:
        try:
            moment = datetime.fromisoformat(signed_at.strip().replace("Z", "+00:00"))
        except ValueError:
            return signed_at
    return moment.strftime("%B %d, %Y, %I:%M %p")


def _paragraph_text(text: str) -> str:
    """Escape reportlab mini-markup and keep line breaks."""
    return escape(text).replace("\r\n", "\n").replace("\n", "<br/>")


class GuaranteePdfRenderer:
    """
    reportlab renderer for the job-guarantee PDF.

    Attributes:
        title: Heading of page 1
        compress: Compress page content streams (disable to inspect output)

    Examples:
        >>> renderer = GuaranteePdfRenderer()
        >>> pdf = renderer.render("Ada Lovelace", "2025-09-30T14:05:00Z", terms, png_bytes)
        >>> pdf[:5]
        b'%PDF-'
    """

    def __init__(self, title: str = DEFAULT_TITLE, compress: bool = True) -> None:
        self.title = title
        self.compress = compress

        styles = getSampleStyleSheet()
        self.title_style = styles["Title"]
        self.meta_style = ParagraphStyle(
            "GuaranteeMeta",
            parent=styles["Normal"],
            fontSize=10,
            leading=13,
            textColor=colors.HexColor("#555555"),
        )
        self.body_style = ParagraphStyle(
            "GuaranteeBody",
            parent=styles["Normal"],
            fontSize=12,
            leading=15,
            alignment=TA_LEFT,
        )
        self.heading_style = ParagraphStyle(
            "GuaranteeHeading",
            parent=styles["Normal"],
            fontName="Helvetica-Bold",
            fontSize=14,
            leading=18,
        )

    def render(
        self,
        full_name: Optional[str],
        signed_at: Optional[str],
        terms_text: Optional[str],
        signature_image: Optional[bytes],
        workdir: Optional[Path] = None,
        file_name: str = "guarantee.pdf",
    ) -> bytes:
        """
        Render the guarantee document.

        Args:
            full_name: Signer name
            signed_at: Signing timestamp as posted (ISO-8601 expected)
            terms_text: Guarantee terms shown on page 1
            signature_image: Decoded signature image bytes (PNG), may be None
            workdir: Directory for intermediate files. The caller owns and
                removes it. When None a private temporary directory is used.
            file_name: Name of the PDF written into the workspace

        Returns:
            PDF bytes
        """
        if workdir is None:
            with tempfile.TemporaryDirectory(prefix="dtca-") as tmp:
                return self._render_into(
                    Path(tmp), full_name, signed_at, terms_text, signature_image, file_name
                )
        return self._render_into(
            workdir, full_name, signed_at, terms_text, signature_image, file_name
        )

    def _render_into(
        self,
        workdir: Path,
        full_name: Optional[str],
        signed_at: Optional[str],
        terms_text: Optional[str],
        signature_image: Optional[bytes],
        file_name: str,
    ) -> bytes:
        pdf_path = workdir / file_name
        signed_at_text = signed_at or datetime.now(timezone.utc).isoformat()

        story = [
            Paragraph(_paragraph_text(self.title), self.title_style),
            Spacer(1, 6),
            Paragraph(_paragraph_text(f"Signed by: {full_name or 'N/A'}"), self.meta_style),
            Paragraph(_paragraph_text(f"Signed at: {signed_at_text}"), self.meta_style),
            Spacer(1, 14),
            Paragraph(_paragraph_text(terms_text or ""), self.body_style),
            PageBreak(),
            Paragraph("<u>Signature</u>", self.heading_style),
            Spacer(1, 8),
        ]

        image = self._signature_flowable(workdir, signature_image)
        if image is not None:
            story.append(image)
        story.extend(
            [
                Spacer(1, 8),
                Paragraph(_paragraph_text(f"Name: {full_name or ''}"), self.body_style),
                Paragraph(
                    _paragraph_text(f"Date: {format_signed_date(signed_at)}"), self.body_style
                ),
            ]
        )

        doc = SimpleDocTemplate(
            str(pdf_path),
            pagesize=LETTER,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=self.title,
            author=full_name or "",
            pageCompression=1 if self.compress else 0,
        )
        doc.build(story)

        pdf_bytes = pdf_path.read_bytes()
        logger.info(f"Rendered guarantee PDF {file_name} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    def _signature_flowable(
        self, workdir: Path, signature_image: Optional[bytes]
    ) -> Optional[Image]:
        """Write the signature to disk and fit it into SIGNATURE_BOX, or None."""
        if not signature_image:
            logger.warning("No signature image supplied; rendering without it")
            return None

        image_path = workdir / "sig.png"
        try:
            image_path.write_bytes(signature_image)
            reader = ImageReader(str(image_path))
            width, height = reader.getSize()
            if not width or not height:
                raise ValueError(f"empty image size {width}x{height}")
            # getSize() reads the header only; decode the pixels here
            reader.getRGBData()
        except Exception as e:
            logger.warning(f"Signature image could not be placed: {e}")
            return None

        box_width, box_height = SIGNATURE_BOX
        scale = min(box_width / width, box_height / height)
        flowable = Image(str(image_path), width=width * scale, height=height * scale)
        flowable.hAlign = "LEFT"
        return flowable
