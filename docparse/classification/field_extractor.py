import re

_SEPARATOR = r"[:.\s]*"
_DATE = re.compile(rf"date{_SEPARATOR}([\d/\-.]+)", re.IGNORECASE)
_TOTAL = re.compile(rf"total{_SEPARATOR}[$€£]?\s*([\d,.]+)", re.IGNORECASE)


def _number_pattern(word: str) -> re.Pattern[str]:
    return re.compile(
        rf"{word}\s*(?:no|number|#)?{_SEPARATOR}([A-Za-z0-9-]+)",
        re.IGNORECASE,
    )


_FIELD_PATTERNS: dict[str, dict[str, re.Pattern[str]]] = {
    "invoice": {
        "invoiceNumber": _number_pattern("invoice"),
        "date": _DATE,
        "totalAmount": _TOTAL,
    },
    "receipt": {
        "receiptNumber": _number_pattern("receipt"),
        "date": _DATE,
        "totalAmount": _TOTAL,
    },
}


class FieldExtractor:
    """Pulls category-specific fields out of free text.

    Only invoices and receipts have field rules; any other category yields an
    empty mapping. Values are returned exactly as matched (trimmed), without
    date or number parsing.
    """

    def extract(self, text: str, category: str) -> dict[str, str]:
        fields: dict[str, str] = {}
        for name, pattern in _FIELD_PATTERNS.get(category, {}).items():
            match = pattern.search(text)
            if match and match.group(1).strip():
                fields[name] = match.group(1).strip()
        return fields
