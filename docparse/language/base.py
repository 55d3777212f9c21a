from abc import ABC, abstractmethod

UNDETERMINED = "und"


class BaseLanguageIdentifier(ABC):
    """Contract for language identification adapters."""

    @abstractmethod
    def identify(self, text: str, min_length: int) -> str:
        """Return the ISO 639-3 code of *text*.

        Returns ``UNDETERMINED`` when *text* is shorter than *min_length*
        characters or the language cannot be told.
        """
