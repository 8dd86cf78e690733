"""Rule definitions for line classification and front-matter extraction."""

from dataclasses import dataclass
from typing import Literal

from linemark.styles import LineStyle

# Where a rule's token is removed from the line
RemovalScope = Literal["leading", "trailing", "both", "entire_line", "none"]

REMOVAL_SCOPES: tuple[RemovalScope, ...] = ("leading", "trailing", "both", "entire_line", "none")

# Which line a matching rule restyles
AppliesTo = Literal["current", "previous", "until_close"]

APPLIES_TO: tuple[AppliesTo, ...] = ("current", "previous", "until_close")


@dataclass(frozen=True, slots=True)
class LineRule:
    """A token-based rule that assigns a style to a line.

    Rules are evaluated in the order they are configured; the first rule whose
    token is present and whose removal changes the line wins.

    Attributes:
        token: Text to look for. An empty token disables the rule.
        style: Style assigned to matching lines.
        remove: How the token is stripped from the line.
        trim: Strip horizontal whitespace (tabs and Unicode spaces) around the
            line before and after removal.
        applies_to: "current" styles the line itself, "previous" restyles the
            line before it, "until_close" opens or closes a hidden block.
    """

    token: str
    style: LineStyle
    remove: RemovalScope = "leading"
    trim: bool = True
    applies_to: AppliesTo = "current"


@dataclass(frozen=True, slots=True)
class FrontMatterRule:
    """Delimiters and separator for a leading metadata block.

    Attributes:
        open_tag: First line that opens the block.
        close_tag: Line that closes the block.
        separator: Single character splitting keys from values.
    """

    open_tag: str
    close_tag: str
    separator: str
