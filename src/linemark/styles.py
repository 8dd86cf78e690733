"""Style capability shared by every line style.

A style is the tag attached to each classified line. Rule sets use a closed
set of styles, usually an ``enum.Enum``, whose members implement this protocol.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineStyle(Protocol):
    """Capability interface for line styles.

    Attributes:
        requires_tokenization: Whether a renderer should run inline
            tokenization on lines carrying this style.
    """

    @property
    def requires_tokenization(self) -> bool: ...

    def previous_line_style(self) -> "LineStyle | None":
        """Return the style the previous output line should take, if any.

        A style that returns a value here marks a signal line: the processor
        restyles the line before it instead of emitting a new one.
        """
        ...
