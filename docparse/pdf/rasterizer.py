from pathlib import Path

from docparse.logging.logger import Log
from docparse.pdf.base import BasePageRenderer


def page_image_name(page_index: int) -> str:
    """File name for a rasterized page; sorting names keeps page order."""
    return f"page-{page_index + 1:04d}.png"


class PageRasterizer:
    """Writes one PNG per PDF page into an output directory."""

    def __init__(self, renderer: BasePageRenderer) -> None:
        self._renderer = renderer

    def rasterize(self, pdf_path: Path, output_dir: Path) -> list[Path]:
        """Render every page of *pdf_path* into *output_dir*.

        Returns:
            Image paths ordered by page index.

        Raises:
            PdfRenderError: if any page fails to render. No partial result is
                returned.
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        page_count = self._renderer.page_count(pdf_path)
        images: list[Path] = []
        for page_index in range(page_count):
            image_path = output_dir / page_image_name(page_index)
            image_path.write_bytes(self._renderer.render(pdf_path, page_index))
            images.append(image_path)
        Log.info(f"Rasterized {len(images)} pages of {pdf_path.name}")
        return images
