from docparse.language.base import UNDETERMINED, BaseLanguageIdentifier
from docparse.language.detector import LanguageDetector
from docparse.language.lingua_adapter import LinguaLanguageIdentifier
from docparse.language.mapper import to_ocr_language

__all__ = [
    "UNDETERMINED",
    "BaseLanguageIdentifier",
    "LanguageDetector",
    "LinguaLanguageIdentifier",
    "to_ocr_language",
]
