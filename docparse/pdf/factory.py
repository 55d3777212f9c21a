from docparse.config.settings import Settings
from docparse.pdf.base import BaseTextLayerParser
from docparse.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docparse.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfParserFactory:
    """Creates the text-layer parser selected in settings."""

    ADAPTERS: dict[str, type[BaseTextLayerParser]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextLayerParser:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
