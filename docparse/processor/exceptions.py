class DocumentProcessingError(Exception):
    """Base exception for all document processing failures."""


class UnsupportedTypeError(DocumentProcessingError):
    """Raised when the file extension is neither a PDF nor a supported image."""


class ProcessingError(DocumentProcessingError):
    """Raised when processing fails for any reason not recovered by a fallback."""
