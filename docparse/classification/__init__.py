from docparse.classification.classifier import UNKNOWN, DocumentClassifier
from docparse.classification.field_extractor import FieldExtractor

__all__ = ["UNKNOWN", "DocumentClassifier", "FieldExtractor"]
