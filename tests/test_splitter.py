"""Tests for line splitting."""

import pytest

from linemark import split_lines


class TestSplitLines:
    """Line break handling tests."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a\nb", ("a", "b")),
            ("a\r\nb", ("a", "b")),
            ("a\rb", ("a", "b")),
            ("a\u2028b", ("a", "b")),
            ("a\x0bb\x0cc", ("a", "b", "c")),
            ("a\x85b", ("a", "b")),
        ],
    )
    def test_line_breaks(self, text: str, expected: tuple[str, ...]) -> None:
        """Every line break character splits the text."""
        assert split_lines(text) == expected

    def test_paragraph_separator_kept(self) -> None:
        """The paragraph separator is not a line break."""
        assert split_lines("a\u2029b") == ("a\u2029b",)

    def test_blank_lines_preserved(self) -> None:
        """Empty lines between content are kept."""
        assert split_lines("a\n\nb") == ("a", "", "b")

    def test_trailing_newline(self) -> None:
        """A final line break leaves an empty last line."""
        assert split_lines("a\n") == ("a", "")

    def test_empty_text(self) -> None:
        """Empty text is a single empty line."""
        assert split_lines("") == ("",)

    def test_crlf_counts_once(self) -> None:
        """CRLF does not produce an extra empty line."""
        assert split_lines("a\r\n\r\nb") == ("a", "", "b")
