"""Ready-made rule sets."""

from linemark.presets.markdown import (
    MARKDOWN_FRONT_MATTER_RULES,
    MARKDOWN_LINE_RULES,
    MarkdownLineStyle,
    markdown_processor,
)

__all__ = [
    "MARKDOWN_FRONT_MATTER_RULES",
    "MARKDOWN_LINE_RULES",
    "MarkdownLineStyle",
    "markdown_processor",
]
