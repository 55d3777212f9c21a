import pymupdf

from docparse.pdf.base import BaseTextLayerParser, TextLayer
from docparse.pdf.exceptions import PdfParseError


class PyMuPdfAdapter(BaseTextLayerParser):
    """Reads the PDF text layer using PyMuPDF."""

    def parse(self, pdf_bytes: bytes) -> TextLayer:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfParseError(f"pymupdf parsing failed: {exc}") from exc
        return TextLayer(text="\n".join(pages).strip(), page_count=len(pages))
