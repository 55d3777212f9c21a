import pytest

from docparse.pdf.exceptions import PdfParseError
from docparse.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_parse_returns_text_and_page_count(self, sample_pdf_bytes: bytes) -> None:
        layer = PyMuPdfAdapter().parse(sample_pdf_bytes)
        assert "Hello PDF World" in layer.text
        assert layer.page_count == 1

    def test_parse_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        layer = PyMuPdfAdapter().parse(multi_page_pdf_bytes)
        assert layer.page_count == 2
        assert layer.text.index("Page one") < layer.text.index("Page two")

    def test_parse_result_is_stripped(self, sample_pdf_bytes: bytes) -> None:
        layer = PyMuPdfAdapter().parse(sample_pdf_bytes)
        assert layer.text == layer.text.strip()

    def test_parse_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfParseError, match="pymupdf"):
            PyMuPdfAdapter().parse(b"not a pdf")
