from pathlib import Path

from docparse.classification.classifier import DocumentClassifier
from docparse.classification.field_extractor import FieldExtractor
from docparse.config.settings import Settings
from docparse.language.detector import LanguageDetector
from docparse.language.lingua_adapter import LinguaLanguageIdentifier
from docparse.logging.logger import Log
from docparse.ocr.aggregator import OcrAggregator
from docparse.ocr.tesseract_adapter import TesseractOcrEngine
from docparse.pdf.analyzer import PdfAnalyzer
from docparse.pdf.factory import PdfParserFactory
from docparse.pdf.pymupdf_renderer import PyMuPdfPageRenderer
from docparse.pdf.rasterizer import PageRasterizer
from docparse.processor.exceptions import ProcessingError, UnsupportedTypeError
from docparse.processor.models import DocumentMetadata, ExtractionResult, SourceDocument
from docparse.processor.pipeline import PipelineContext, PipelineStep
from docparse.processor.scanned_reader import ScannedPdfReader
from docparse.processor.steps import (
    ClassifyStep,
    ExtractContentStep,
    ExtractFieldsStep,
    PrepareWorkingAreaStep,
    RouteStep,
)


class DocumentProcessor:
    """Runs the document pipeline steps and assembles the extraction result.

    Pipeline: route -> prepare working area -> extract content -> classify
    -> extract fields. ``UnsupportedTypeError`` reaches the caller as is;
    every other failure is wrapped in ``ProcessingError``.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        keep_working_files: bool = True,
    ) -> None:
        self._steps = steps
        self._keep_working_files = keep_working_files

    def process(
        self,
        file_bytes: bytes,
        filename: str,
        mime_type: str,
        language_hint: str | None = None,
        document_type_hint: str | None = None,
    ) -> ExtractionResult:
        context = PipelineContext(
            source=SourceDocument(content=file_bytes, filename=filename, mime_type=mime_type),
            language_hint=language_hint,
            document_type_hint=document_type_hint,
        )
        Log.info(f"Processing {filename} ({len(file_bytes)} bytes, {mime_type})")
        try:
            for step in self._steps:
                context = step.run(context)
        except UnsupportedTypeError as exc:
            Log.warning(f"Rejected {filename}: {exc}")
            raise
        except Exception as exc:
            Log.error(f"Error processing document: {exc}")
            raise ProcessingError(f"Failed to process document: {exc}") from exc
        finally:
            if not self._keep_working_files and context.working_area is not None:
                context.working_area.discard()
        return self._assemble(context)

    def _assemble(self, context: PipelineContext) -> ExtractionResult:
        if context.working_area is None:
            raise ProcessingError("Failed to process document: no working area was prepared")
        return ExtractionResult(
            document_type=context.document_type,
            language=context.language,
            text=context.text,
            fields=context.fields,
            pages=context.page_count,
            warnings=list(context.warnings),
            metadata=DocumentMetadata(
                original_filename=context.source.filename,
                file_size=context.source.size_bytes,
                file_type=context.source.mime_type,
                document_id=context.working_area.id,
            ),
        )


def build_processor(settings: Settings) -> DocumentProcessor:
    """Build a DocumentProcessor with all required adapters."""
    parser = PdfParserFactory.create(settings)
    detector = LanguageDetector(
        LinguaLanguageIdentifier(), default_language=settings.default_language
    )
    engine = TesseractOcrEngine(
        tesseract_cmd=settings.tesseract_cmd,
        config=settings.tesseract_config,
        timeout_seconds=settings.ocr_timeout_seconds,
    )
    aggregator = OcrAggregator(engine, detector, max_workers=settings.ocr_max_workers)
    rasterizer = PageRasterizer(PyMuPdfPageRenderer(scale=settings.render_scale))
    steps: list[PipelineStep] = [
        RouteStep(),
        PrepareWorkingAreaStep(Path(settings.working_directory)),
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
    return DocumentProcessor(steps, keep_working_files=settings.keep_working_files)
