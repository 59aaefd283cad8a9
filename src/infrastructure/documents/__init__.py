"""
Document rendering (reportlab).

Contains:
    - GuaranteePdfRenderer: signed job-guarantee PDF
    - format_signed_date: human-readable signing date
"""

from .guarantee_pdf_renderer import GuaranteePdfRenderer, format_signed_date

__all__ = ["GuaranteePdfRenderer", "format_signed_date"]
