"""Heuristic that tells text-based PDFs apart from scanned ones.

The decision only looks at text-layer statistics, so documents right at the
thresholds can land on either side. A PDF whose text layer cannot be read is
treated as scanned: OCR works for every PDF, only slower.
"""

from docparse.logging.logger import Log
from docparse.pdf.base import BaseTextLayerParser
from docparse.pdf.exceptions import PdfParseError

MIN_TEXT_LENGTH = 50
MIN_TEXT_PER_PAGE = 100


class PdfAnalyzer:
    def __init__(self, parser: BaseTextLayerParser) -> None:
        self._parser = parser

    def is_text_based(self, pdf_bytes: bytes) -> bool:
        try:
            layer = self._parser.parse(pdf_bytes)
        except PdfParseError as exc:
            Log.error(f"Could not analyze PDF text layer, assuming scanned: {exc}")
            return False

        text_length = len(layer.text)
        if text_length < MIN_TEXT_LENGTH:
            Log.info(f"PDF has {text_length} chars of text, treating as scanned")
            return False
        if layer.page_count <= 0:
            return False

        text_per_page = text_length / layer.page_count
        Log.info(
            f"PDF text layer: {text_length} chars over {layer.page_count} pages "
            f"({text_per_page:.1f} per page)"
        )
        return text_per_page > MIN_TEXT_PER_PAGE
