"""Exceptions for linemark line classification."""

from dataclasses import dataclass
from pathlib import Path


class LinemarkError(Exception):
    """Base exception for all linemark errors."""

    pass


@dataclass
class UnterminatedFrontMatterError(LinemarkError):
    """A front-matter block was opened but never closed.

    Raised when the first line of the input matches a front-matter open tag
    and the input runs out before a line equal to the close tag is found.

    Attributes:
        message: Description of the error.
        open_tag: The open tag that started the block.
        close_tag: The close tag that was expected.
    """

    message: str
    open_tag: str
    close_tag: str

    def __str__(self) -> str:
        return f"{self.message} (opened by {self.open_tag!r}, expected {self.close_tag!r})"


@dataclass
class InvalidRuleError(LinemarkError):
    """A rule set configuration is malformed.

    Raised when:
    - The document is not a mapping
    - A rule is missing a required key
    - A style, removal scope or target name is unknown
    - A trim flag is not a boolean
    """

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"
