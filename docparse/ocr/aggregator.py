"""Runs OCR over a sequence of page images and merges the results.

Pages are recognized concurrently, one task per page index. Results are
put back in page order before the text is joined, so completion order never
shows in the output. The document language is the most frequent per-page
language; ties go to the language seen first in page order.
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from docparse.language.detector import LanguageDetector
from docparse.logging.logger import Log
from docparse.ocr.base import BaseOcrEngine
from docparse.ocr.models import OcrOutcome, PageOcrResult

PAGE_SEPARATOR = "\n\n"


def majority_language(languages: list[str], default: str) -> str:
    """Most common code in *languages*; earliest seen wins a tie."""
    if not languages:
        return default
    # Counter.most_common keeps insertion order among equal counts.
    return Counter(languages).most_common(1)[0][0]


class OcrAggregator:
    def __init__(
        self,
        engine: BaseOcrEngine,
        detector: LanguageDetector,
        max_workers: int = 4,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._engine = engine
        self._detector = detector
        self._max_workers = max_workers

    def recognize_all(
        self,
        pages: list[Path],
        language_hint: str | None = None,
    ) -> OcrOutcome:
        """OCR every page and return the joined text and majority language.

        Raises:
            OcrEngineError: if any page fails; the remaining pages are not
                awaited for a result.
        """
        language = language_hint or self._detector.default_language
        results = self._recognize_pages(pages, language)
        results.sort(key=lambda result: result.page_index)

        text = PAGE_SEPARATOR.join(result.text for result in results)
        detected = majority_language(
            [result.language for result in results],
            default=self._detector.default_language,
        )
        Log.info(f"OCR finished for {len(results)} pages, language '{detected}'")
        return OcrOutcome(text=text, language=detected, page_count=len(results))

    def _recognize_pages(self, pages: list[Path], language: str) -> list[PageOcrResult]:
        if not pages:
            return []
        results: list[PageOcrResult] = []
        workers = min(self._max_workers, len(pages))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_to_index = {
                executor.submit(self._recognize_page, index, path, language): index
                for index, path in enumerate(pages)
            }
            try:
                for future in as_completed(future_to_index):
                    results.append(future.result())
            except Exception:
                for future in future_to_index:
                    future.cancel()
                raise
        return results

    def _recognize_page(self, page_index: int, image_path: Path, language: str) -> PageOcrResult:
        text = self._engine.recognize(image_path, language)
        Log.debug(f"Page {page_index} recognized: {len(text)} chars")
        return PageOcrResult(
            page_index=page_index,
            text=text,
            language=self._detector.detect(text),
        )
