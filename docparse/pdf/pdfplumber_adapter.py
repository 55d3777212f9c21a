import io

import pdfplumber

from docparse.pdf.base import BaseTextLayerParser, TextLayer
from docparse.pdf.exceptions import PdfParseError


class PdfPlumberAdapter(BaseTextLayerParser):
    """Reads the PDF text layer using pdfplumber."""

    def parse(self, pdf_bytes: bytes) -> TextLayer:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfParseError(f"pdfplumber parsing failed: {exc}") from exc
        return TextLayer(text="\n".join(pages).strip(), page_count=len(pages))
