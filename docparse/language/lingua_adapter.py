from functools import lru_cache

from docparse.language.base import UNDETERMINED, BaseLanguageIdentifier


@lru_cache(maxsize=1)
def _get_detector():  # type: ignore[no-untyped-def]
    from lingua import LanguageDetectorBuilder

    return LanguageDetectorBuilder.from_all_languages().build()


class LinguaLanguageIdentifier(BaseLanguageIdentifier):
    """Identifies the language of a text using lingua."""

    def identify(self, text: str, min_length: int) -> str:
        sample = text.strip()
        if len(sample) < min_length:
            return UNDETERMINED
        language = _get_detector().detect_language_of(sample)
        if language is None:
            return UNDETERMINED
        return language.iso_code_639_3.name.lower()
