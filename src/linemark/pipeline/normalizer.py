"""Ordered-list marker normalization.

Rewrites numbered list markers at the start of a line to ``1.`` so that a
single token rule matches every item of an ordered list:
- Unindented markers ("3. item")
- Three or six space indentation ("   3. item")
- One or two tab indentation ("\\t3. item")
"""

import logging
import re

logger = logging.getLogger(__name__)

# (pattern, replacement) pairs, applied in order to the output of the previous one
DEFAULT_MARKER_PATTERNS: tuple[tuple[str, str], ...] = (
    # Plain: "3. " -> "1. "
    (r"^(\d+)(\.\s+)", r"1\g<2>"),
    # Three spaces: "   3. " -> "   1. "
    (r"^(\s{3})(\d+)(\.\s+)", r"\g<1>1\g<3>"),
    # Six spaces: "      3. " -> "      1. "
    (r"^(\s{6})(\d+)(\.\s+)", r"\g<1>1\g<3>"),
    # One tab: "\t3. " -> "\t1. "
    (r"^(\t)(\d+)(\.\s+)", r"\g<1>1\g<3>"),
    # Two tabs: "\t\t3. " -> "\t\t1. "
    (r"^(\t\t)(\d+)(\.\s+)", r"\g<1>1\g<3>"),
)

# Leading marker in the raw line, with any of the indentations above
_ORDERED_MARKER_PATTERN = re.compile(r"^(?:\s{6}|\s{3}|\t\t|\t)?(\d+)\.\s")


class ListMarkerNormalizer:
    """Normalizes ordered-list markers to a canonical ``1.``.

    Each pattern is applied independently and in order, so a line may be
    rewritten more than once. Lines that match no pattern pass through
    unchanged. Normalizing already-normalized text is a no-op.
    """

    def __init__(self, patterns: tuple[tuple[str, str], ...] = DEFAULT_MARKER_PATTERNS) -> None:
        """Initialize the normalizer.

        Args:
            patterns: (regex, replacement) pairs. Patterns that fail to
                compile are logged and skipped.
        """
        compiled: list[tuple[re.Pattern[str], str]] = []
        for pattern, replacement in patterns:
            try:
                compiled.append((re.compile(pattern), replacement))
            except re.error as exc:
                logger.error("Skipping list marker pattern %r: %s", pattern, exc)
        self._patterns = tuple(compiled)

    @property
    def pattern_count(self) -> int:
        """Number of patterns that compiled and will be applied."""
        return len(self._patterns)

    def normalize(self, line: str) -> str:
        """Rewrite a leading ordered-list marker to ``1.``.

        Args:
            line: A single line of text.

        Returns:
            The line with its marker digits replaced, or the line unchanged.
        """
        result = line
        for pattern, replacement in self._patterns:
            try:
                result = pattern.sub(replacement, result, count=1)
            except re.error as exc:
                # Bad group reference in a caller-supplied replacement
                logger.error("Skipping list marker rewrite %r: %s", pattern.pattern, exc)
        return result


def extract_original_number(raw_line: str, token: str) -> int | None:
    """Recover the list item number a rule's token stands for.

    Only tokens that look like an ordered-list marker (contain ". ") carry a
    number. The number is read from the marker of the unnormalized line; if
    the line has no marker, the token's own digits are used.

    Args:
        raw_line: The line before list-marker normalization.
        token: The token of the rule being evaluated.

    Returns:
        The original item number, or None if the token is not numeric.
    """
    if ". " not in token:
        return None

    token_digits = token.replace(". ", "").strip().replace("\t", "").replace(" ", "")
    try:
        token_number = int(token_digits)
    except ValueError:
        return None

    match = _ORDERED_MARKER_PATTERN.match(raw_line)
    if match:
        return int(match.group(1))
    return token_number
