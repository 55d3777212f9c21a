from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize(self, image_path: Path, language: str) -> str:
        """Recognize text on the image at *image_path*.

        Args:
            image_path: Path to a raster image.
            language: OCR language model name, e.g. ``"eng"`` or ``"chi_sim"``.

        Returns:
            Recognized text, possibly empty.

        Raises:
            OcrEngineError: if the image is unreadable or the language model
                is unavailable.
        """
