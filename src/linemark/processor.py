"""LineProcessor - Main public interface for line classification.

Provides two processing methods:
- process(): Strict processing, raises on malformed front matter
- process_with_metadata(): Full result with front matter and diagnostics
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from linemark.exceptions import LinemarkError
from linemark.pipeline.classifier import ClassifiedLine, LineClassifier
from linemark.pipeline.front_matter import FrontMatterExtractor
from linemark.pipeline.normalizer import ListMarkerNormalizer
from linemark.pipeline.splitter import split_lines
from linemark.rules import FrontMatterRule, LineRule
from linemark.styles import LineStyle

if TYPE_CHECKING:
    from linemark.config import RuleSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessingResult:
    """Full processing result with metadata.

    Attributes:
        lines: Classified lines in document order.
        front_matter: Snapshot of the accumulated front-matter attributes.
        success: Whether processing completed.
        error: Error if processing failed, None otherwise.
        unclosed_block: Token of a block still open at the end of the
            input, None if every block was closed.
    """

    lines: tuple[ClassifiedLine, ...]
    front_matter: dict[str, str]
    success: bool
    error: LinemarkError | None
    unclosed_block: str | None


class LineProcessor:
    """Turns raw text into a sequence of classified lines.

    The processing pipeline:
    1. Split text into lines
    2. Extract a leading front-matter block
    3. Classify each remaining line with the rule set
    4. Fold signal lines into the style of the line before them

    Front-matter attributes accumulate across calls until
    reset_front_matter() is called. Block state is reset on every call.
    An instance must not be used from several threads at once.

    Example:
        processor = LineProcessor(rules, default_style=Style.body)

        # Strict processing (raises on unterminated front matter)
        lines = processor.process(text)

        # Full metadata
        result = processor.process_with_metadata(text)
    """

    def __init__(
        self,
        rules: tuple[LineRule, ...] | list[LineRule],
        default_style: LineStyle,
        front_matter_rules: tuple[FrontMatterRule, ...] | list[FrontMatterRule] = (),
        *,
        empty_line_style: LineStyle | None = None,
        normalizer: ListMarkerNormalizer | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            rules: Line rules in precedence order.
            default_style: Style for lines no rule matches.
            front_matter_rules: Rules for a leading metadata block.
            empty_line_style: Style for empty lines. If None, empty lines
                are dropped.
            normalizer: List-marker normalizer; a default one if None.
        """
        # Pipeline components
        self._classifier = LineClassifier(
            rules,
            default_style,
            empty_line_style=empty_line_style,
            normalizer=normalizer,
        )
        self._front_matter_extractor = FrontMatterExtractor(front_matter_rules)

        self._front_matter_attributes: dict[str, str] = {}
        self._unclosed_block_count = 0

    @classmethod
    def from_rule_set(cls, rule_set: "RuleSet") -> "LineProcessor":
        """Build a processor from a loaded rule set.

        Args:
            rule_set: Rules and styles, usually from linemark.config.
        """
        return cls(
            rule_set.line_rules,
            rule_set.default_style,
            rule_set.front_matter_rules,
            empty_line_style=rule_set.empty_line_style,
        )

    @property
    def empty_line_style(self) -> LineStyle | None:
        """Style for empty lines, or None to drop them."""
        return self._classifier.empty_line_style

    @empty_line_style.setter
    def empty_line_style(self, style: LineStyle | None) -> None:
        self._classifier.empty_line_style = style

    @property
    def front_matter_attributes(self) -> Mapping[str, str]:
        """Front-matter attributes collected so far (read-only view)."""
        return MappingProxyType(self._front_matter_attributes)

    @property
    def unclosed_block_count(self) -> int:
        """Number of documents that ended inside an open block."""
        return self._unclosed_block_count

    def reset_front_matter(self) -> None:
        """Forget all accumulated front-matter attributes."""
        self._front_matter_attributes.clear()

    def process(self, text: str) -> list[ClassifiedLine]:
        """Classify every line of a document.

        Args:
            text: Raw text, newline-delimited.

        Returns:
            Classified lines in document order.

        Raises:
            UnterminatedFrontMatterError: If a front-matter block is opened
                but never closed.
        """
        self._classifier.reset()
        start = time.perf_counter()

        extracted = self._front_matter_extractor.extract(split_lines(text))
        self._front_matter_attributes.update(extracted.attributes)

        logger.debug("Front matter completed in %.3f ms", (time.perf_counter() - start) * 1000)

        output: list[ClassifiedLine] = []
        for raw_line in extracted.lines:
            if not raw_line and self.empty_line_style is None:
                continue

            classified = self._classifier.classify(raw_line)
            if classified is None:
                continue

            previous_style = classified.style.previous_line_style()
            if previous_style is not None and output:
                output[-1].style = previous_style
                continue

            output.append(classified)

        open_token = self._classifier.close_token
        if open_token is not None:
            self._unclosed_block_count += 1
            logger.warning("Block opened by %r was never closed; trailing lines were dropped", open_token)

        logger.debug(
            "Classified %d lines into %d in %.3f ms",
            len(extracted.lines),
            len(output),
            (time.perf_counter() - start) * 1000,
        )

        return output

    def process_with_metadata(self, text: str) -> ProcessingResult:
        """Classify a document and report front matter and diagnostics.

        Args:
            text: Raw text, newline-delimited.

        Returns:
            ProcessingResult with lines, front matter and block state.
        """
        try:
            lines = self.process(text)
        except LinemarkError as exc:
            logger.error("Processing failed: %s", exc)
            return ProcessingResult(
                lines=(),
                front_matter=dict(self._front_matter_attributes),
                success=False,
                error=exc,
                unclosed_block=None,
            )

        return ProcessingResult(
            lines=tuple(lines),
            front_matter=dict(self._front_matter_attributes),
            success=True,
            error=None,
            unclosed_block=self._classifier.close_token,
        )
