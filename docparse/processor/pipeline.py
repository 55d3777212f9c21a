from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from docparse.processor.models import ExtractionPath, FileKind, SourceDocument
from docparse.processor.working_area import WorkingArea


@dataclass(slots=True)
class PipelineContext:
    source: SourceDocument
    language_hint: str | None = None
    document_type_hint: str | None = None
    file_kind: FileKind | None = None
    working_area: WorkingArea | None = None
    original_path: Path | None = None
    extraction_path: ExtractionPath | None = None
    text: str = ""
    language: str = ""
    page_count: int | None = None
    document_type: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
