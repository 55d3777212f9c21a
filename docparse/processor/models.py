from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".tiff", ".bmp", ".gif"})


class FileKind(Enum):
    PDF = "pdf"
    IMAGE = "image"


class ExtractionPath(Enum):
    """How the document text was obtained."""

    TEXT_LAYER = "text_layer"
    OCR = "ocr"
    TEXT_LAYER_FALLBACK = "text_layer_fallback"


@dataclass(frozen=True)
class SourceDocument:
    """Uploaded file as handed over by the caller."""

    content: bytes
    filename: str
    mime_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()


@dataclass(frozen=True)
class DocumentMetadata:
    original_filename: str
    file_size: int
    file_type: str
    document_id: str


@dataclass
class ExtractionResult:
    """Final output of the document pipeline."""

    document_type: str
    language: str
    text: str
    metadata: DocumentMetadata
    fields: dict[str, str] = field(default_factory=dict)
    pages: int | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload; ``pages`` and ``warnings`` appear only when set."""
        payload: dict[str, Any] = {
            "documentType": self.document_type,
            "language": self.language,
            "text": self.text,
            "fields": dict(self.fields),
        }
        if self.pages is not None:
            payload["pages"] = self.pages
        if self.warnings:
            payload["warnings"] = list(self.warnings)
        payload["metadata"] = {
            "originalFilename": self.metadata.original_filename,
            "fileSize": self.metadata.file_size,
            "fileType": self.metadata.file_type,
            "documentId": self.metadata.document_id,
        }
        return payload
