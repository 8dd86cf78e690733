"""linemark - Classify lines of text with token-based rules."""

from linemark.config import RuleSet, load_rule_set, parse_rule_set
from linemark.exceptions import (
    InvalidRuleError,
    LinemarkError,
    UnterminatedFrontMatterError,
)
from linemark.pipeline import (
    ClassifiedLine,
    ExtractedFrontMatter,
    FrontMatterExtractor,
    LineClassifier,
    ListMarkerNormalizer,
    split_lines,
)
from linemark.presets import (
    MARKDOWN_FRONT_MATTER_RULES,
    MARKDOWN_LINE_RULES,
    MarkdownLineStyle,
    markdown_processor,
)
from linemark.processor import LineProcessor, ProcessingResult
from linemark.rules import AppliesTo, FrontMatterRule, LineRule, RemovalScope
from linemark.styles import LineStyle

__version__ = "0.1.0"

__all__ = [
    "AppliesTo",
    "ClassifiedLine",
    "ExtractedFrontMatter",
    "FrontMatterExtractor",
    "FrontMatterRule",
    "InvalidRuleError",
    "LineClassifier",
    "LineProcessor",
    "LineRule",
    "LineStyle",
    "LinemarkError",
    "ListMarkerNormalizer",
    "MARKDOWN_FRONT_MATTER_RULES",
    "MARKDOWN_LINE_RULES",
    "MarkdownLineStyle",
    "ProcessingResult",
    "RemovalScope",
    "RuleSet",
    "UnterminatedFrontMatterError",
    "load_rule_set",
    "markdown_processor",
    "parse_rule_set",
    "split_lines",
]
