"""Markdown block-level rule set.

Classifies lines of Markdown-like text into headings, lists, quotes and code:
- ATX headings ("# Title" to "###### Title")
- Setext underlines ("===" and "---" restyle the line above)
- Ordered and unordered lists with up to two levels of indentation
- Indented code and hidden ``` fenced blocks
- YAML-style front matter between "---" lines
"""

from enum import Enum

from linemark.processor import LineProcessor
from linemark.rules import FrontMatterRule, LineRule


class MarkdownLineStyle(Enum):
    """Block-level styles for Markdown lines."""

    yaml = "yaml"
    h1 = "h1"
    h2 = "h2"
    h3 = "h3"
    h4 = "h4"
    h5 = "h5"
    h6 = "h6"
    previous_h1 = "previous_h1"
    previous_h2 = "previous_h2"
    body = "body"
    blockquote = "blockquote"
    codeblock = "codeblock"
    fenced_codeblock = "fenced_codeblock"
    ordered_list = "ordered_list"
    ordered_list_indent_first_order = "ordered_list_indent_first_order"
    ordered_list_indent_second_order = "ordered_list_indent_second_order"
    unordered_list = "unordered_list"
    unordered_list_indent_first_order = "unordered_list_indent_first_order"
    unordered_list_indent_second_order = "unordered_list_indent_second_order"
    referenced_link = "referenced_link"

    @property
    def requires_tokenization(self) -> bool:
        """Code is rendered verbatim; everything else may hold inline markup."""
        return self not in (MarkdownLineStyle.codeblock, MarkdownLineStyle.fenced_codeblock)

    def previous_line_style(self) -> "MarkdownLineStyle | None":
        """Setext underlines turn the line above into a heading."""
        return _PREVIOUS_LINE_STYLES.get(self)


_PREVIOUS_LINE_STYLES: dict[MarkdownLineStyle, MarkdownLineStyle] = {
    MarkdownLineStyle.previous_h1: MarkdownLineStyle.h1,
    MarkdownLineStyle.previous_h2: MarkdownLineStyle.h2,
}

MARKDOWN_LINE_RULES: tuple[LineRule, ...] = (
    # Setext underlines
    LineRule("=", MarkdownLineStyle.previous_h1, remove="entire_line", applies_to="previous"),
    LineRule("-", MarkdownLineStyle.previous_h2, remove="entire_line", applies_to="previous"),
    # Fenced code is hidden until the closing fence
    LineRule("```", MarkdownLineStyle.fenced_codeblock, remove="both", applies_to="until_close"),
    # Unordered lists, deepest indentation first
    LineRule("\t\t- ", MarkdownLineStyle.unordered_list_indent_second_order, trim=False),
    LineRule("\t- ", MarkdownLineStyle.unordered_list_indent_first_order, trim=False),
    LineRule("- ", MarkdownLineStyle.unordered_list),
    LineRule("\t\t* ", MarkdownLineStyle.unordered_list_indent_second_order, trim=False),
    LineRule("\t* ", MarkdownLineStyle.unordered_list_indent_first_order, trim=False),
    LineRule("* ", MarkdownLineStyle.unordered_list),
    # Ordered lists; markers are normalized to "1." before matching
    LineRule("\t\t1. ", MarkdownLineStyle.ordered_list_indent_second_order, trim=False),
    LineRule("\t1. ", MarkdownLineStyle.ordered_list_indent_first_order, trim=False),
    LineRule("      1. ", MarkdownLineStyle.ordered_list_indent_second_order, trim=False),
    LineRule("   1. ", MarkdownLineStyle.ordered_list_indent_first_order, trim=False),
    LineRule("1. ", MarkdownLineStyle.ordered_list),
    # Indented code
    LineRule("    ", MarkdownLineStyle.codeblock, trim=False),
    LineRule("\t", MarkdownLineStyle.codeblock, trim=False),
    LineRule(">", MarkdownLineStyle.blockquote),
    # ATX headings, longest marker first
    LineRule("###### ", MarkdownLineStyle.h6, remove="both"),
    LineRule("##### ", MarkdownLineStyle.h5, remove="both"),
    LineRule("#### ", MarkdownLineStyle.h4, remove="both"),
    LineRule("### ", MarkdownLineStyle.h3, remove="both"),
    LineRule("## ", MarkdownLineStyle.h2, remove="both"),
    LineRule("# ", MarkdownLineStyle.h1, remove="both"),
)

MARKDOWN_FRONT_MATTER_RULES: tuple[FrontMatterRule, ...] = (
    FrontMatterRule(open_tag="---", close_tag="---", separator=":"),
)


def markdown_processor(*, keep_empty_lines: bool = False) -> LineProcessor:
    """Create a processor with the Markdown rule set.

    Args:
        keep_empty_lines: If True, empty lines are kept with the body style.

    Returns:
        A new LineProcessor.
    """
    return LineProcessor(
        MARKDOWN_LINE_RULES,
        MarkdownLineStyle.body,
        MARKDOWN_FRONT_MATTER_RULES,
        empty_line_style=MarkdownLineStyle.body if keep_empty_lines else None,
    )
