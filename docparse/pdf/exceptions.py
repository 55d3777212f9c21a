class PdfError(Exception):
    """Base exception for PDF text-layer and rendering failures."""


class PdfParseError(PdfError):
    """Raised when the PDF text layer cannot be parsed."""


class PdfRenderError(PdfError):
    """Raised when a PDF page cannot be rendered to an image."""
