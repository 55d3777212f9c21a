from dataclasses import dataclass


@dataclass(frozen=True)
class PageOcrResult:
    """OCR output of a single page."""

    page_index: int
    text: str
    language: str


@dataclass(frozen=True)
class OcrOutcome:
    """Aggregated OCR output of a whole document."""

    text: str
    language: str
    page_count: int
