from pathlib import Path

from docparse.classification.classifier import DocumentClassifier
from docparse.classification.field_extractor import FieldExtractor
from docparse.language.detector import LanguageDetector
from docparse.logging.logger import Log
from docparse.ocr.aggregator import OcrAggregator
from docparse.pdf.analyzer import PdfAnalyzer
from docparse.pdf.base import BaseTextLayerParser
from docparse.processor.exceptions import UnsupportedTypeError
from docparse.processor.models import IMAGE_EXTENSIONS, ExtractionPath, FileKind
from docparse.processor.pipeline import PipelineContext, PipelineStep
from docparse.processor.scanned_reader import ScannedPdfReader
from docparse.processor.working_area import WorkingArea

SCANNED_PDF_WARNING = (
    "Could not process scanned PDF completely. "
    "Using best-effort text extraction instead."
)
PAGES_DIRECTORY = "pages"


class RouteStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        extension = context.source.extension
        if extension == ".pdf":
            context.file_kind = FileKind.PDF
        elif extension in IMAGE_EXTENSIONS:
            context.file_kind = FileKind.IMAGE
        else:
            raise UnsupportedTypeError(f"Unsupported file type: {extension or '(none)'}")
        Log.info(f"Routing {context.source.filename} as {context.file_kind.value}")
        return context


class PrepareWorkingAreaStep(PipelineStep):
    def __init__(self, root: Path) -> None:
        self._root = root

    def run(self, context: PipelineContext) -> PipelineContext:
        area = WorkingArea.create(self._root)
        context.working_area = area
        context.original_path = area.save(
            f"original{context.source.extension}", context.source.content
        )
        Log.info(f"Saved {context.source.size_bytes} bytes", document_id=area.id)
        return context


class ExtractContentStep(PipelineStep):
    """Settles text, language and page count for the routed document.

    PDFs judged text-based are read from their text layer. Scanned PDFs go
    through rasterization and OCR; if that attempt fails the text layer is
    read anyway and a warning is recorded. Images are OCRed directly.
    """

    def __init__(
        self,
        analyzer: PdfAnalyzer,
        parser: BaseTextLayerParser,
        scanned_reader: ScannedPdfReader,
        aggregator: OcrAggregator,
        detector: LanguageDetector,
    ) -> None:
        self._analyzer = analyzer
        self._parser = parser
        self._scanned_reader = scanned_reader
        self._aggregator = aggregator
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.original_path is None or context.working_area is None:
            raise ValueError("PipelineContext.working_area must be prepared before extraction")
        if context.file_kind is FileKind.PDF:
            self._extract_pdf(context)
        elif context.file_kind is FileKind.IMAGE:
            self._extract_image(context)
        else:
            raise ValueError("PipelineContext.file_kind must be set before extraction")
        Log.info(
            f"Extracted {len(context.text)} chars via {context.extraction_path.value}, "
            f"language '{context.language}'",
            document_id=context.working_area.id,
        )
        return context

    def _extract_pdf(self, context: PipelineContext) -> None:
        if self._analyzer.is_text_based(context.source.content):
            self._read_text_layer(context, ExtractionPath.TEXT_LAYER)
            return

        attempt = self._scanned_reader.read(
            context.original_path,
            context.working_area.path(PAGES_DIRECTORY),
            context.language_hint,
        )
        if attempt.succeeded:
            context.extraction_path = ExtractionPath.OCR
            context.text = attempt.outcome.text
            context.language = attempt.outcome.language
            context.page_count = attempt.outcome.page_count
        else:
            context.warnings.append(SCANNED_PDF_WARNING)
            self._read_text_layer(context, ExtractionPath.TEXT_LAYER_FALLBACK)

    def _read_text_layer(self, context: PipelineContext, path: ExtractionPath) -> None:
        layer = self._parser.parse(context.source.content)
        context.extraction_path = path
        context.text = layer.text
        context.page_count = layer.page_count
        context.language = self._detector.detect(layer.text)

    def _extract_image(self, context: PipelineContext) -> None:
        outcome = self._aggregator.recognize_all(
            [context.original_path], context.language_hint
        )
        context.extraction_path = ExtractionPath.OCR
        context.text = outcome.text
        context.language = outcome.language
        context.page_count = outcome.page_count


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: DocumentClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document_type_hint:
            context.document_type = context.document_type_hint
        else:
            context.document_type = self._classifier.classify(context.text)
        Log.info(f"Document type: {context.document_type}")
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, extractor: FieldExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.fields = self._extractor.extract(context.text, context.document_type)
        Log.info(f"Extracted {len(context.fields)} fields")
        return context
