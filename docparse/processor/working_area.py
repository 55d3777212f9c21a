import secrets
import shutil
from pathlib import Path

from docparse.logging.logger import Log


def generate_document_id() -> str:
    """32 hex chars from 16 random bytes."""
    return secrets.token_hex(16)


class WorkingArea:
    """Per-invocation scratch directory ``{root}/{id}`` for intermediate files.

    Every pipeline run gets a fresh id, so concurrent runs never share a
    directory. Nothing is deleted unless ``discard`` is called.
    """

    def __init__(self, root: Path, area_id: str) -> None:
        self._id = area_id
        self._directory = root / area_id

    @classmethod
    def create(cls, root: Path) -> "WorkingArea":
        area = cls(root, generate_document_id())
        area.directory.mkdir(parents=True, exist_ok=True)
        return area

    @property
    def id(self) -> str:
        return self._id

    @property
    def directory(self) -> Path:
        return self._directory

    def path(self, name: str) -> Path:
        return self._directory / name

    def save(self, name: str, data: bytes) -> Path:
        target = self.path(name)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        return target

    def discard(self) -> None:
        try:
            shutil.rmtree(self._directory)
        except FileNotFoundError:
            return
        except OSError as exc:
            Log.warning(f"Could not remove working area {self._directory}: {exc}")
