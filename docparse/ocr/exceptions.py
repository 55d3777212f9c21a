class OcrEngineError(Exception):
    """Raised when the OCR engine cannot read an image or load a language model."""
