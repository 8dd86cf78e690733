"""Line splitting for raw text input."""

import re

# Line breaks only; the paragraph separator (U+2029) is left in place
_LINE_BREAK_PATTERN = re.compile("\r\n|[\n\r\v\f\x85\u2028]")


def split_lines(text: str) -> tuple[str, ...]:
    """Split text into lines on any line break.

    CRLF counts as a single break. Empty lines, including a trailing one
    after a final line break, are kept.

    Args:
        text: Raw text.

    Returns:
        Tuple of lines without their line breaks.
    """
    return tuple(_LINE_BREAK_PATTERN.split(text))
