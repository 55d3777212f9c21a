from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TextLayer:
    """Text extracted from a PDF text layer together with its page count."""

    text: str
    page_count: int


class BaseTextLayerParser(ABC):
    """Contract for all PDF text-layer adapters."""

    @abstractmethod
    def parse(self, pdf_bytes: bytes) -> TextLayer:
        """Extract the text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            TextLayer with all page texts joined by newlines and the page count.

        Raises:
            PdfParseError: if the PDF cannot be opened or read.
        """


class BasePageRenderer(ABC):
    """Contract for adapters that turn a single PDF page into raster bytes."""

    @abstractmethod
    def page_count(self, pdf_path: Path) -> int:
        """Return the number of pages of the PDF at *pdf_path*.

        Raises:
            PdfRenderError: if the file cannot be opened as a PDF.
        """

    @abstractmethod
    def render(self, pdf_path: Path, page_index: int) -> bytes:
        """Render page *page_index* (0-based) of *pdf_path* as PNG bytes.

        Raises:
            PdfRenderError: on an out-of-range index or a corrupt page.
        """
