from docparse.ocr.aggregator import OcrAggregator
from docparse.ocr.base import BaseOcrEngine
from docparse.ocr.models import OcrOutcome, PageOcrResult
from docparse.ocr.tesseract_adapter import TesseractOcrEngine

__all__ = [
    "BaseOcrEngine",
    "OcrAggregator",
    "OcrOutcome",
    "PageOcrResult",
    "TesseractOcrEngine",
]
