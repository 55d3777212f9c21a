import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

INVOICE_LINES = [
    "ACME Supplies Ltd. - Invoice Number: INV-1023",
    "Bill To: Jane Doe, 42 Main Street, Springfield",
    "Date: 2024-03-15",
    "Description: office chairs, desks and assorted stationery items",
    "Payment is due within thirty days of the invoice date shown above.",
    "Total: $452.10",
]


def _pdf(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf([[]])


@pytest.fixture()
def invoice_pdf_bytes() -> bytes:
    """Generate a one-page invoice with a text layer well above the scanned threshold."""
    return _pdf([INVOICE_LINES])


@pytest.fixture()
def png_image_bytes() -> bytes:
    """Generate a small white PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (64, 32), color="white").save(buf, format="PNG")
    return buf.getvalue()
