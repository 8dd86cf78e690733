"""Tests for the Markdown rule set."""

import pytest

from linemark import MARKDOWN_LINE_RULES, MarkdownLineStyle, markdown_processor
from linemark.pipeline.classifier import ClassifiedLine


def _process(text: str) -> list[ClassifiedLine]:
    """Helper to run the Markdown processor."""
    return markdown_processor().process(text)


class TestHeadings:
    """ATX and setext headings."""

    @pytest.mark.parametrize(
        ("text", "style"),
        [
            ("# Heading", MarkdownLineStyle.h1),
            ("## Heading", MarkdownLineStyle.h2),
            ("### Heading", MarkdownLineStyle.h3),
            ("#### Heading", MarkdownLineStyle.h4),
            ("##### Heading", MarkdownLineStyle.h5),
            ("###### Heading", MarkdownLineStyle.h6),
        ],
    )
    def test_atx_headings(self, text: str, style: MarkdownLineStyle) -> None:
        """Hash markers select the heading level."""
        lines = _process(text)

        assert lines == [ClassifiedLine("Heading", style)]
        assert lines[0].style is style

    def test_closing_hashes_removed(self) -> None:
        """Trailing hashes are stripped from the heading text."""
        lines = _process("## Sub ##")

        assert lines[0].content == "Sub"
        assert lines[0].style is MarkdownLineStyle.h2

    def test_setext_h1(self) -> None:
        """An equals underline makes the line above a level one heading."""
        lines = _process("Title\n=====")

        assert lines == [ClassifiedLine("Title", MarkdownLineStyle.h1)]
        assert lines[0].style is MarkdownLineStyle.h1

    def test_setext_h2(self) -> None:
        """A dash underline makes the line above a level two heading."""
        lines = _process("Sub\n---\nText")

        assert [line.style for line in lines] == [MarkdownLineStyle.h2, MarkdownLineStyle.body]

    def test_whitespace_only_line_makes_h1(self) -> None:
        """A whitespace-only line after text underlines it as a level one heading."""
        lines = _process("Title\n   ")

        assert lines == [ClassifiedLine("Title", MarkdownLineStyle.h1)]
        assert lines[0].style is MarkdownLineStyle.h1

    def test_no_break_space_before_heading(self) -> None:
        """A leading no-break space is trimmed before the heading marker."""
        lines = _process("\u00a0# Title")

        assert lines == [ClassifiedLine("Title", MarkdownLineStyle.h1)]
        assert lines[0].style is MarkdownLineStyle.h1


class TestLists:
    """Ordered and unordered lists."""

    def test_unordered_nesting(self) -> None:
        """Tab indentation selects the nesting level."""
        lines = _process("- a\n\t- b\n\t\t- c\n* d")

        assert [line.content for line in lines] == ["a", "b", "c", "d"]
        assert [line.style for line in lines] == [
            MarkdownLineStyle.unordered_list,
            MarkdownLineStyle.unordered_list_indent_first_order,
            MarkdownLineStyle.unordered_list_indent_second_order,
            MarkdownLineStyle.unordered_list,
        ]

    def test_ordered_numbers(self) -> None:
        """Ordered items are matched whatever their number and keep it."""
        lines = _process("1. a\n2. b\n\t3. c\n   4. d\n      5. e")

        assert [line.content for line in lines] == ["a", "b", "c", "d", "e"]
        assert [line.original_number for line in lines] == [1, 2, 3, 4, 5]
        assert [line.style for line in lines] == [
            MarkdownLineStyle.ordered_list,
            MarkdownLineStyle.ordered_list,
            MarkdownLineStyle.ordered_list_indent_first_order,
            MarkdownLineStyle.ordered_list_indent_first_order,
            MarkdownLineStyle.ordered_list_indent_second_order,
        ]


class TestBlocks:
    """Quotes and code."""

    def test_blockquote(self) -> None:
        """A leading > marks a quote."""
        lines = _process("> quoted")

        assert lines == [ClassifiedLine("quoted", MarkdownLineStyle.blockquote)]
        assert lines[0].style is MarkdownLineStyle.blockquote

    def test_indented_code(self) -> None:
        """Four spaces of indentation mark code."""
        lines = _process("    code()")

        assert lines[0].content == "code()"
        assert lines[0].style is MarkdownLineStyle.codeblock

    def test_fenced_code_hidden(self) -> None:
        """Fenced blocks are removed from the output."""
        lines = _process("before\n```python\nprint()\n```\nafter")

        assert [line.content for line in lines] == ["before", "after"]

    def test_body(self) -> None:
        """Plain text is body."""
        lines = _process("Just some text.")

        assert lines[0].style is MarkdownLineStyle.body


class TestMarkdownFrontMatter:
    """Front matter with the Markdown preset."""

    def test_front_matter(self) -> None:
        """A leading --- block becomes attributes."""
        processor = markdown_processor()
        lines = processor.process("---\ntitle: Hello\nauthor: Me\n---\n\n# Heading")

        assert dict(processor.front_matter_attributes) == {"title": "Hello", "author": "Me"}
        assert lines == [ClassifiedLine("Heading", MarkdownLineStyle.h1)]


class TestMarkdownStyles:
    """Style capabilities."""

    def test_previous_line_styles(self) -> None:
        """Only the setext markers restyle the previous line."""
        assert MarkdownLineStyle.previous_h1.previous_line_style() is MarkdownLineStyle.h1
        assert MarkdownLineStyle.previous_h2.previous_line_style() is MarkdownLineStyle.h2
        assert MarkdownLineStyle.h1.previous_line_style() is None
        assert MarkdownLineStyle.body.previous_line_style() is None

    def test_requires_tokenization(self) -> None:
        """Code is never tokenized."""
        assert MarkdownLineStyle.body.requires_tokenization is True
        assert MarkdownLineStyle.h3.requires_tokenization is True
        assert MarkdownLineStyle.codeblock.requires_tokenization is False
        assert MarkdownLineStyle.fenced_codeblock.requires_tokenization is False

    def test_keep_empty_lines(self) -> None:
        """markdown_processor can keep blank lines as body."""
        lines = markdown_processor(keep_empty_lines=True).process("a\n\nb")

        assert len(lines) == 3
        assert lines[1].style is MarkdownLineStyle.body

    def test_rules_have_tokens(self) -> None:
        """Every preset rule is active."""
        assert all(rule.token for rule in MARKDOWN_LINE_RULES)
