"""Rule-driven classification of single lines.

Applies an ordered list of line rules to one line at a time:
- Token stripping by removal scope (leading, trailing, both, entire line)
- Hidden blocks delimited by "until_close" tokens
- Signal lines that restyle the previous line
"""

import unicodedata
from dataclasses import dataclass, field

from linemark.pipeline.normalizer import ListMarkerNormalizer, extract_original_number
from linemark.rules import LineRule
from linemark.styles import LineStyle

_TAB = "\t"


def _is_trim_character(char: str) -> bool:
    """Check if a character is horizontal whitespace (tab or Unicode Zs)."""
    return char == _TAB or unicodedata.category(char) == "Zs"


def _trim(text: str) -> str:
    """Strip horizontal whitespace from both ends of a line.

    Covers tabs and every space separator (U+0020, U+00A0, U+3000, ...),
    but not line breaks.
    """
    start = 0
    end = len(text)
    while start < end and _is_trim_character(text[start]):
        start += 1
    while end > start and _is_trim_character(text[end - 1]):
        end -= 1
    return text[start:end]


@dataclass(slots=True)
class ClassifiedLine:
    """A line with the style chosen for it.

    Equality ignores the style, so lines compare by content and number.

    Attributes:
        content: Line text after token removal and trimming.
        style: Style of the rule that matched, or the default style.
        original_number: Item number of an ordered-list line before marker
            normalization, None for other lines.
    """

    content: str
    style: LineStyle = field(compare=False)
    original_number: int | None = None

    def __str__(self) -> str:
        return self.content


def _strip_leading(line: str, token: str) -> str:
    """Remove the token if it is an exact prefix of the line."""
    if token and line.startswith(token):
        return line[len(token):]
    return line


def _strip_trailing(line: str, token: str) -> str:
    """Remove the whitespace-trimmed token if it is an exact suffix of the line."""
    token = _trim(token)
    if token and line.endswith(token):
        return line[: -len(token)]
    return line


def _remove_token(line: str, rule: LineRule) -> str:
    """Strip a rule's token from a line according to its removal scope."""
    if rule.remove == "leading":
        return _strip_leading(line, rule.token)
    if rule.remove == "trailing":
        return _strip_trailing(line, rule.token)
    if rule.remove == "both":
        return _strip_trailing(_strip_leading(line, rule.token), rule.token)
    if rule.remove == "entire_line":
        # Only a line made of nothing but the token is affected
        stripped = line.replace(rule.token, "")
        return stripped if not stripped else line
    return line


class LineClassifier:
    """Classifies lines with an ordered rule set.

    Holds the open block token between calls. A processor resets it at the
    start of every document; it is not safe to share across threads.
    """

    def __init__(
        self,
        rules: tuple[LineRule, ...] | list[LineRule],
        default_style: LineStyle,
        *,
        empty_line_style: LineStyle | None = None,
        normalizer: ListMarkerNormalizer | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            rules: Line rules in precedence order.
            default_style: Style for lines no rule matches.
            empty_line_style: Style for empty lines; None leaves them to the
                rules.
            normalizer: List-marker normalizer; a default one if None.
        """
        self._rules = tuple(rules)
        self._line_rules = tuple(
            rule for rule in self._rules if rule.applies_to in ("current", "until_close")
        )
        self._previous_rules = tuple(rule for rule in self._rules if rule.applies_to == "previous")
        self._default_style = default_style
        self._normalizer = normalizer or ListMarkerNormalizer()
        self.empty_line_style = empty_line_style
        self._close_token: str | None = None

    @property
    def rules(self) -> tuple[LineRule, ...]:
        """All configured rules, in precedence order."""
        return self._rules

    @property
    def default_style(self) -> LineStyle:
        """Style given to lines no rule matches."""
        return self._default_style

    @property
    def close_token(self) -> str | None:
        """Token of the currently open block, or None."""
        return self._close_token

    def reset(self) -> None:
        """Close any open block."""
        self._close_token = None

    def classify(self, raw_line: str) -> ClassifiedLine | None:
        """Classify a single line.

        Args:
            raw_line: One line of input, without its line break.

        Returns:
            The classified line, or None when the line is a block delimiter
            or falls inside an open block.
        """
        if not raw_line and self.empty_line_style is not None:
            return ClassifiedLine(content="", style=self.empty_line_style)

        text = self._normalizer.normalize(raw_line)

        for rule in self._line_rules:
            if not rule.token:
                continue

            candidate = _trim(text) if rule.trim else text

            # Inside a block only the closing token gets through
            if self._close_token is not None and candidate != self._close_token:
                return None

            if rule.token not in text:
                continue

            original_number = extract_original_number(raw_line, rule.token)

            output = _remove_token(candidate, rule)
            if output == candidate:
                continue

            if rule.applies_to == "until_close":
                self._close_token = rule.token if self._close_token is None else None
                return None

            if rule.trim:
                output = _trim(output)
            return ClassifiedLine(content=output, style=rule.style, original_number=original_number)

        for rule in self._previous_rules:
            candidate = _trim(raw_line) if rule.trim else raw_line
            # A whitespace-only line trims to "" and counts as a signal line
            if set(candidate) <= set(rule.token):
                return ClassifiedLine(content="", style=rule.style)

        return ClassifiedLine(content=_trim(raw_line), style=self._default_style)
