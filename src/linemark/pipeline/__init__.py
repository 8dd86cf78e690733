"""Pipeline components for line classification."""

from linemark.pipeline.classifier import ClassifiedLine, LineClassifier
from linemark.pipeline.front_matter import ExtractedFrontMatter, FrontMatterExtractor
from linemark.pipeline.normalizer import ListMarkerNormalizer, extract_original_number
from linemark.pipeline.splitter import split_lines

__all__ = [
    "ClassifiedLine",
    "ExtractedFrontMatter",
    "FrontMatterExtractor",
    "LineClassifier",
    "ListMarkerNormalizer",
    "extract_original_number",
    "split_lines",
]
