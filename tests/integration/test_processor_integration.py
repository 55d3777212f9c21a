"""End-to-end runs with the real PDF stack; OCR and language identification are scripted."""

from pathlib import Path

import pytest

from docparse.classification.classifier import DocumentClassifier
from docparse.classification.field_extractor import FieldExtractor
from docparse.language.base import BaseLanguageIdentifier
from docparse.language.detector import LanguageDetector
from docparse.ocr.aggregator import OcrAggregator
from docparse.ocr.base import BaseOcrEngine
from docparse.ocr.exceptions import OcrEngineError
from docparse.pdf.analyzer import PdfAnalyzer
from docparse.pdf.base import BasePageRenderer
from docparse.pdf.exceptions import PdfRenderError
from docparse.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docparse.pdf.pymupdf_renderer import PyMuPdfPageRenderer
from docparse.pdf.rasterizer import PageRasterizer
from docparse.processor.processor import DocumentProcessor
from docparse.processor.scanned_reader import ScannedPdfReader
from docparse.processor.steps import (
    SCANNED_PDF_WARNING,
    ClassifyStep,
    ExtractContentStep,
    ExtractFieldsStep,
    PrepareWorkingAreaStep,
    RouteStep,
)


class FixedLanguageIdentifier(BaseLanguageIdentifier):
    def __init__(self, code: str) -> None:
        self._code = code

    def identify(self, text: str, min_length: int) -> str:
        return self._code


class PageNameOcrEngine(BaseOcrEngine):
    """Pretends every image reads as a receipt mentioning its own file name."""

    def __init__(self) -> None:
        self.seen: list[Path] = []

    def recognize(self, image_path: Path, language: str) -> str:
        if not image_path.read_bytes().startswith(b"\x89PNG"):
            raise OcrEngineError(f"{image_path.name} is not a PNG")
        self.seen.append(image_path)
        return f"Receipt No: {image_path.stem} scanned with the {language} model. Total: 12.50"


class FailingRenderer(BasePageRenderer):
    def page_count(self, pdf_path: Path) -> int:
        return 1

    def render(self, pdf_path: Path, page_index: int) -> bytes:
        raise PdfRenderError("renderer crashed")


def _build(root: Path, renderer: BasePageRenderer | None = None) -> tuple[DocumentProcessor, PageNameOcrEngine]:
    parser = PdfPlumberAdapter()
    detector = LanguageDetector(FixedLanguageIdentifier("deu"))
    engine = PageNameOcrEngine()
    aggregator = OcrAggregator(engine, detector, max_workers=2)
    rasterizer = PageRasterizer(renderer or PyMuPdfPageRenderer())
    steps = [
        RouteStep(),
        PrepareWorkingAreaStep(root),
        ExtractContentStep(
            analyzer=PdfAnalyzer(parser),
            parser=parser,
            scanned_reader=ScannedPdfReader(rasterizer, aggregator),
            aggregator=aggregator,
            detector=detector,
        ),
        ClassifyStep(DocumentClassifier()),
        ExtractFieldsStep(FieldExtractor()),
    ]
    return DocumentProcessor(steps), engine


class TestTextBasedPdf:
    def test_extracts_invoice_fields(self, tmp_path: Path, invoice_pdf_bytes: bytes) -> None:
        processor, engine = _build(tmp_path)

        result = processor.process(invoice_pdf_bytes, "invoice.pdf", "application/pdf")

        assert "Bill To: Jane Doe" in result.text
        assert result.document_type == "invoice"
        assert result.language == "deu"
        assert result.fields == {
            "invoiceNumber": "INV-1023",
            "date": "2024-03-15",
            "totalAmount": "452.10",
        }
        assert result.pages == 1
        assert result.warnings == []
        assert engine.seen == []


class TestScannedPdf:
    def test_ocrs_every_page_in_order(self, tmp_path: Path, multi_page_pdf_bytes: bytes) -> None:
        processor, engine = _build(tmp_path)

        result = processor.process(
            multi_page_pdf_bytes, "scan.pdf", "application/pdf", language_hint="fra"
        )

        assert result.text.split("\n\n") == [
            "Receipt No: page-0001 scanned with the fra model. Total: 12.50",
            "Receipt No: page-0002 scanned with the fra model. Total: 12.50",
        ]
        assert result.pages == 2
        assert result.document_type == "receipt"
        assert result.fields == {"receiptNumber": "page-0001", "totalAmount": "12.50"}
        pages_dir = tmp_path / result.metadata.document_id / "pages"
        assert sorted(p.name for p in pages_dir.iterdir()) == ["page-0001.png", "page-0002.png"]

    def test_render_failure_degrades_to_text_layer(
        self, tmp_path: Path, multi_page_pdf_bytes: bytes
    ) -> None:
        processor, _ = _build(tmp_path, renderer=FailingRenderer())

        result = processor.process(multi_page_pdf_bytes, "scan.pdf", "application/pdf")

        assert "Page one content" in result.text
        assert result.warnings == [SCANNED_PDF_WARNING]
        assert result.to_dict()["warnings"] == [SCANNED_PDF_WARNING]


class TestImage:
    def test_single_image(self, tmp_path: Path, png_image_bytes: bytes) -> None:
        processor, engine = _build(tmp_path)

        result = processor.process(png_image_bytes, "photo.PNG", "image/png")

        assert result.text == "Receipt No: original scanned with the eng model. Total: 12.50"
        assert result.language == "deu"
        assert result.pages == 1
        assert engine.seen == [tmp_path / result.metadata.document_id / "original.png"]


@pytest.mark.parametrize("filename", ["notes.docx", "archive.zip"])
def test_unsupported_files_leave_no_trace(tmp_path: Path, filename: str) -> None:
    from docparse.processor.exceptions import UnsupportedTypeError

    root = tmp_path / "uploads"
    processor, _ = _build(root)

    with pytest.raises(UnsupportedTypeError):
        processor.process(b"PK\x03\x04", filename, "application/zip")

    assert not root.exists()
