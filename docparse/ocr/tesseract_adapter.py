from pathlib import Path

import pytesseract
from PIL import Image

from docparse.ocr.base import BaseOcrEngine
from docparse.ocr.exceptions import OcrEngineError


class TesseractOcrEngine(BaseOcrEngine):
    """Recognizes text with the Tesseract binary through pytesseract."""

    def __init__(
        self,
        *,
        tesseract_cmd: str = "",
        config: str = "",
        timeout_seconds: int = 0,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self._config = config
        self._timeout_seconds = timeout_seconds

    def recognize(self, image_path: Path, language: str) -> str:
        try:
            with Image.open(image_path) as image:
                return pytesseract.image_to_string(
                    image,
                    lang=language,
                    config=self._config,
                    timeout=self._timeout_seconds,
                )
        except Exception as exc:
            raise OcrEngineError(
                f"Failed to perform OCR on {image_path.name}: {exc}"
            ) from exc
