from pathlib import Path

import pymupdf

from docparse.pdf.base import BasePageRenderer
from docparse.pdf.exceptions import PdfRenderError


class PyMuPdfPageRenderer(BasePageRenderer):
    """Renders PDF pages to PNG using PyMuPDF.

    Each page is first copied into a standalone one-page document and that
    document is rendered, so the image is sized to the page's own width and
    height (times *scale*).
    """

    def __init__(self, scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError(f"Render scale must be positive, got {scale}")
        self._scale = scale

    def page_count(self, pdf_path: Path) -> int:
        try:
            with pymupdf.open(str(pdf_path)) as doc:  # type: ignore[no-untyped-call]
                return doc.page_count
        except Exception as exc:
            raise PdfRenderError(f"Cannot open PDF {pdf_path}: {exc}") from exc

    def render(self, pdf_path: Path, page_index: int) -> bytes:
        try:
            with pymupdf.open(str(pdf_path)) as source:  # type: ignore[no-untyped-call]
                if not 0 <= page_index < source.page_count:
                    raise PdfRenderError(
                        f"Page {page_index} does not exist in the PDF "
                        f"({source.page_count} pages)"
                    )
                with pymupdf.open() as single_page:  # type: ignore[no-untyped-call]
                    single_page.insert_pdf(source, from_page=page_index, to_page=page_index)
                    matrix = pymupdf.Matrix(self._scale, self._scale)
                    pixmap = single_page[0].get_pixmap(matrix=matrix, alpha=False)
                    return pixmap.tobytes("png")
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(
                f"Failed to render page {page_index} of {pdf_path}: {exc}"
            ) from exc
