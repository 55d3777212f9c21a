from dataclasses import dataclass
from pathlib import Path

from docparse.logging.logger import Log
from docparse.ocr.aggregator import OcrAggregator
from docparse.ocr.models import OcrOutcome
from docparse.pdf.rasterizer import PageRasterizer


@dataclass(frozen=True)
class ScanAttempt:
    """Result of trying the rasterize-then-OCR path on a scanned PDF."""

    outcome: OcrOutcome | None = None
    failure: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is not None


class ScannedPdfReader:
    """Rasterizes a saved PDF and OCRs its pages.

    Failures are reported through ``ScanAttempt.failure`` so the caller can
    take the text-layer branch instead.
    """

    def __init__(self, rasterizer: PageRasterizer, aggregator: OcrAggregator) -> None:
        self._rasterizer = rasterizer
        self._aggregator = aggregator

    def read(self, pdf_path: Path, pages_dir: Path, language_hint: str | None) -> ScanAttempt:
        try:
            images = self._rasterizer.rasterize(pdf_path, pages_dir)
            outcome = self._aggregator.recognize_all(images, language_hint)
        except Exception as exc:
            Log.warning(f"Failed to convert PDF to images: {exc}")
            return ScanAttempt(failure=str(exc))
        return ScanAttempt(outcome=outcome)
