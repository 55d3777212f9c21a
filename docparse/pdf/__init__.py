from docparse.pdf.analyzer import PdfAnalyzer
from docparse.pdf.base import BasePageRenderer, BaseTextLayerParser, TextLayer
from docparse.pdf.factory import PdfParserFactory
from docparse.pdf.rasterizer import PageRasterizer

__all__ = [
    "BasePageRenderer",
    "BaseTextLayerParser",
    "PageRasterizer",
    "PdfAnalyzer",
    "PdfParserFactory",
    "TextLayer",
]
