import argparse
import json
import mimetypes
import sys
from pathlib import Path

from docparse.config.settings import Settings
from docparse.logging.logger import Log
from docparse.processor.exceptions import DocumentProcessingError
from docparse.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docparse",
        description="Extract text, language, category and fields from a PDF or image",
    )
    parser.add_argument("file", type=Path, help="PDF or image file to process")
    parser.add_argument("--language", default=None, help="OCR language hint, e.g. eng")
    parser.add_argument(
        "--document-type", default=None, help="Skip classification and use this type"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> print JSON result."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    file_path: Path = args.file
    if not file_path.is_file():
        Log.error(f"File not found: {file_path}")
        return 1

    mime_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
    processor = build_processor(settings)
    try:
        result = processor.process(
            file_path.read_bytes(),
            file_path.name,
            mime_type,
            language_hint=args.language,
            document_type_hint=args.document_type,
        )
    except DocumentProcessingError as exc:
        Log.error(str(exc))
        return 1

    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
