"""Maps ISO 639-3 codes to Tesseract language model names."""

_TESSERACT_LANGUAGES: dict[str, str] = {
    "cmn": "chi_sim",
    "zho": "chi_sim",
    "jpn": "jpn",
    "kor": "kor",
    "eng": "eng",
    "deu": "deu",
    "fra": "fra",
    "spa": "spa",
    "ita": "ita",
    "rus": "rus",
    "ara": "ara",
    "hin": "hin",
    "ben": "ben",
    "por": "por",
    "urd": "urd",
}


def to_ocr_language(code: str) -> str:
    """Return the OCR model name for *code*; unknown codes pass through."""
    return _TESSERACT_LANGUAGES.get(code, code)
