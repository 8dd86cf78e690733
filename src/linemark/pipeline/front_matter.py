"""Front-matter extraction.

Detects a metadata block at the very start of a document, for example:

    ---
    title: Hello
    author: Someone
    ---

and turns its lines into key/value attributes.
"""

import logging
from dataclasses import dataclass

from linemark.exceptions import UnterminatedFrontMatterError
from linemark.rules import FrontMatterRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractedFrontMatter:
    """Result of front-matter extraction.

    Attributes:
        lines: Lines left for classification.
        attributes: Key/value pairs found in the block (empty if none).
        rule: The rule whose open tag matched, or None if there was no block.
    """

    lines: tuple[str, ...]
    attributes: dict[str, str]
    rule: FrontMatterRule | None

    @property
    def found(self) -> bool:
        """Whether a front-matter block was consumed."""
        return self.rule is not None


class FrontMatterExtractor:
    """Consumes a leading front-matter block.

    Only the first line is checked against the configured open tags; the
    first rule that matches is used.
    """

    def __init__(self, rules: tuple[FrontMatterRule, ...] | list[FrontMatterRule] = ()) -> None:
        """Initialize the extractor.

        Args:
            rules: Front-matter rules, checked in order.
        """
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[FrontMatterRule, ...]:
        """Configured front-matter rules."""
        return self._rules

    def extract(self, lines: tuple[str, ...] | list[str]) -> ExtractedFrontMatter:
        """Remove a leading front-matter block and collect its attributes.

        Args:
            lines: Document lines, without line breaks.

        Returns:
            ExtractedFrontMatter with the remaining lines and attributes.

        Raises:
            UnterminatedFrontMatterError: If the block is never closed.
        """
        lines = tuple(lines)
        if not lines:
            return ExtractedFrontMatter(lines=lines, attributes={}, rule=None)

        rule = self._match_open_tag(lines[0])
        if rule is None:
            return ExtractedFrontMatter(lines=lines, attributes={}, rule=None)

        attributes: dict[str, str] = {}
        index = 1
        while True:
            if index >= len(lines):
                raise UnterminatedFrontMatterError(
                    message="Front matter block is never closed",
                    open_tag=rule.open_tag,
                    close_tag=rule.close_tag,
                )

            line = lines[index]
            index += 1

            if line == rule.close_tag:
                break

            segments = line.split(rule.separator)
            if len(segments) < 2:
                # Lines without a separator carry no attribute
                continue
            # Later separators are dropped: "time: 10:30" -> "1030"
            attributes[segments[0]] = "".join(segments[1:]).strip()

        # Skip blank lines between the block and the body
        while index < len(lines) and not lines[index]:
            index += 1

        logger.debug("Extracted %d front matter attributes", len(attributes))

        return ExtractedFrontMatter(lines=lines[index:], attributes=attributes, rule=rule)

    def _match_open_tag(self, first_line: str) -> FrontMatterRule | None:
        """Find the rule whose open tag equals the first line."""
        stripped = first_line.strip()
        for rule in self._rules:
            if stripped == rule.open_tag:
                return rule
        return None
