#!/usr/bin/env python
"""Show how a text file is classified, line by line.

Usage:
    python scripts/inspect_text.py README.md                    # Markdown preset
    python scripts/inspect_text.py notes.txt --rules rules.yaml # Custom rule set
    python scripts/inspect_text.py README.md --keep-empty       # Keep blank lines
    python scripts/inspect_text.py README.md --search "Install" # Highlight a line
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from linemark.config import load_rule_set
from linemark.exceptions import LinemarkError
from linemark.pipeline.classifier import ClassifiedLine
from linemark.presets.markdown import MarkdownLineStyle, markdown_processor
from linemark.processor import LineProcessor


def build_processor(rules_path: Path | None, keep_empty: bool) -> LineProcessor:
    """Create a processor from a rule file, or the Markdown preset."""
    if rules_path is None:
        return markdown_processor(keep_empty_lines=keep_empty)

    processor = LineProcessor.from_rule_set(load_rule_set(rules_path))
    if keep_empty and processor.empty_line_style is None:
        processor.empty_line_style = MarkdownLineStyle.body
    return processor


def print_line_table(lines: tuple[ClassifiedLine, ...], search: str | None = None) -> None:
    """Print the style, original number and content of every line."""
    print(f"  {'Style':<36} {'No.':>4}  Text")
    print(f"  {'-'*36} {'-'*4}  {'-'*55}")

    for line in lines:
        style = getattr(line.style, "name", str(line.style))
        number = "" if line.original_number is None else str(line.original_number)
        text_preview = line.content[:55] + "..." if len(line.content) > 55 else line.content
        highlight = ">>" if search and search in line.content else "  "
        print(f"{highlight}{style:<36} {number:>4}  {text_preview}")


def print_front_matter(front_matter: dict[str, str]) -> None:
    """Print extracted front-matter attributes."""
    print("FRONT MATTER:")
    if not front_matter:
        print("  (none)")
        return
    for key, value in front_matter.items():
        print(f"  {key!r}: {value!r}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("path", type=Path, help="Text file to classify")
    parser.add_argument("--rules", type=Path, help="YAML rule set (default: Markdown preset)")
    parser.add_argument("--keep-empty", action="store_true", help="Keep blank lines in the output")
    parser.add_argument("--search", type=str, help="Highlight lines containing this text")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        processor = build_processor(args.rules, args.keep_empty)
    except LinemarkError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    text = args.path.read_text(encoding="utf-8")
    result = processor.process_with_metadata(text)

    print(f"File: {args.path}")
    print("=" * 80)
    print()

    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print_front_matter(result.front_matter)
    print()
    print(f"LINES ({len(result.lines)}):")
    print_line_table(result.lines, args.search)

    if result.unclosed_block is not None:
        print()
        print(f"Warning: block opened by {result.unclosed_block!r} was never closed")

    return 0


if __name__ == "__main__":
    sys.exit(main())
