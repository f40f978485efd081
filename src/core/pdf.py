"""PDF generation utilities using WeasyPrint."""
import logging
import re
from io import BytesIO

from django.conf import settings
from django.http import HttpResponse
from django.template.loader import render_to_string

logger = logging.getLogger("hr360")


def safe_pdf_filename(stem: str, fallback: str = "document") -> str:
    """Build a download filename from a human-readable stem.

    Whitespace becomes underscores and characters that are invalid in file
    names are dropped.
    """
    safe = re.sub(r'[\\/:*?"<>|]+', "", (stem or "").strip())
    safe = re.sub(r"\s+", "_", safe).strip("._")
    if not safe:
        safe = fallback
    return f"{safe}.pdf"


def render_pdf_bytes(template_name: str, context: dict) -> bytes:
    """Render a Django template to PDF and return the raw bytes."""
    try:
        from weasyprint import HTML
    except Exception as exc:
        logger.exception("WeasyPrint is unavailable for PDF rendering.")
        raise RuntimeError("PDF rendering backend unavailable") from exc

    html_string = render_to_string(template_name, context)
    pdf_file = BytesIO()
    HTML(string=html_string, base_url=str(settings.BASE_DIR)).write_pdf(pdf_file)
    return pdf_file.getvalue()


def pdf_response(content: bytes, filename: str, *, inline: bool = False) -> HttpResponse:
    """Wrap rendered PDF bytes in a download response."""
    response = HttpResponse(content, content_type="application/pdf")
    disposition = "inline" if inline else "attachment"
    response["Content-Disposition"] = f'{disposition}; filename="{filename}"'
    return response
