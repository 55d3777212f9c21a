from docparse.language.base import UNDETERMINED, BaseLanguageIdentifier
from docparse.language.mapper import to_ocr_language
from docparse.logging.logger import Log

DEFAULT_LANGUAGE = "eng"
MIN_DETECTION_LENGTH = 20


class LanguageDetector:
    """Detects the language of extracted text, never failing.

    Short texts are not sent to the identifier at all. Any identifier failure
    or an inconclusive answer yields the default language.
    """

    def __init__(
        self,
        identifier: BaseLanguageIdentifier,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._identifier = identifier
        self._default_language = default_language

    @property
    def default_language(self) -> str:
        return self._default_language

    def detect(self, text: str | None) -> str:
        if not text or len(text.strip()) < MIN_DETECTION_LENGTH:
            return self._default_language
        try:
            code = self._identifier.identify(text, MIN_DETECTION_LENGTH)
        except Exception as exc:
            Log.error(f"Error detecting language: {exc}")
            return self._default_language
        if not code or code == UNDETERMINED:
            return self._default_language
        return to_ocr_language(code)
