"""Keyword-based document categories.

Groups are checked in order and the first group with any keyword present in
the text wins, so an invoice that mentions its terms and conditions is still
an invoice.
"""

UNKNOWN = "unknown"

_KEYWORD_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("invoice", ("invoice", "bill to", "invoice number")),
    ("receipt", ("receipt", "payment received", "amount paid")),
    ("contract", ("contract", "agreement", "terms and conditions")),
    ("identification", ("id", "identification", "passport", "driver")),
)


class DocumentClassifier:
    def classify(self, text: str) -> str:
        lowered = text.lower()
        for category, keywords in _KEYWORD_GROUPS:
            if any(keyword in lowered for keyword in keywords):
                return category
        return UNKNOWN
