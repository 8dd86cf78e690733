"""Rule-set configuration loaded from YAML.

A rule set file looks like:

    default_style: body
    empty_line_style: null
    line_rules:
      - token: "# "
        style: h1
        remove: both
        trim: true
        applies_to: current
    front_matter:
      - open: "---"
        close: "---"
        separator: ":"

Style names are looked up by member name in an enum of styles.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from linemark.exceptions import InvalidRuleError
from linemark.presets.markdown import MarkdownLineStyle
from linemark.rules import APPLIES_TO, REMOVAL_SCOPES, FrontMatterRule, LineRule
from linemark.styles import LineStyle


@dataclass(frozen=True, slots=True)
class RuleSet:
    """A complete processor configuration.

    Attributes:
        line_rules: Line rules in precedence order.
        default_style: Style for lines no rule matches.
        front_matter_rules: Front-matter block rules.
        empty_line_style: Style for empty lines, or None to drop them.
    """

    line_rules: tuple[LineRule, ...]
    default_style: LineStyle
    front_matter_rules: tuple[FrontMatterRule, ...] = ()
    empty_line_style: LineStyle | None = None


def load_rule_set(path: Path | str, styles: type[Enum] = MarkdownLineStyle) -> RuleSet:
    """Load a rule set from a YAML file.

    Args:
        path: Path to the YAML file.
        styles: Enum whose members are the available styles.

    Returns:
        The parsed RuleSet.

    Raises:
        InvalidRuleError: If the file is not valid YAML or not a valid rule set.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidRuleError(message=f"Invalid YAML: {exc}", path=path) from exc

    try:
        return parse_rule_set(data, styles)
    except InvalidRuleError as exc:
        raise InvalidRuleError(message=exc.message, path=path) from exc


def parse_rule_set(data: Any, styles: type[Enum] = MarkdownLineStyle) -> RuleSet:
    """Build a rule set from already-loaded configuration data.

    Args:
        data: Mapping as produced by yaml.safe_load.
        styles: Enum whose members are the available styles.

    Returns:
        The parsed RuleSet.

    Raises:
        InvalidRuleError: If the data is not a valid rule set.
    """
    if not isinstance(data, dict):
        raise InvalidRuleError(message="Rule set must be a mapping")

    if "default_style" not in data:
        raise InvalidRuleError(message="Missing 'default_style'")
    default_style = _resolve_style(data["default_style"], styles)

    empty_line_style = data.get("empty_line_style")
    if empty_line_style is not None:
        empty_line_style = _resolve_style(empty_line_style, styles)

    line_rules = tuple(
        _parse_line_rule(entry, index, styles)
        for index, entry in enumerate(_as_list(data.get("line_rules"), "line_rules"))
    )
    front_matter_rules = tuple(
        _parse_front_matter_rule(entry, index)
        for index, entry in enumerate(_as_list(data.get("front_matter"), "front_matter"))
    )

    return RuleSet(
        line_rules=line_rules,
        default_style=default_style,
        front_matter_rules=front_matter_rules,
        empty_line_style=empty_line_style,
    )


def _as_list(value: Any, key: str) -> list[Any]:
    """Treat a missing section as empty and reject non-list sections."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidRuleError(message=f"'{key}' must be a list")
    return value


def _resolve_style(name: Any, styles: type[Enum]) -> LineStyle:
    """Look up a style by enum member name."""
    try:
        return styles[str(name)]  # type: ignore[return-value]
    except KeyError:
        raise InvalidRuleError(message=f"Unknown style '{name}'") from None


def _parse_line_rule(entry: Any, index: int, styles: type[Enum]) -> LineRule:
    """Parse one entry of the line_rules section."""
    if not isinstance(entry, dict):
        raise InvalidRuleError(message=f"line_rules[{index}] must be a mapping")

    for key in ("token", "style"):
        if key not in entry:
            raise InvalidRuleError(message=f"line_rules[{index}] is missing '{key}'")

    remove = entry.get("remove", "leading")
    if remove not in REMOVAL_SCOPES:
        raise InvalidRuleError(message=f"line_rules[{index}] has unknown remove '{remove}'")

    applies_to = entry.get("applies_to", "current")
    if applies_to not in APPLIES_TO:
        raise InvalidRuleError(message=f"line_rules[{index}] has unknown applies_to '{applies_to}'")

    trim = entry.get("trim", True)
    if not isinstance(trim, bool):
        raise InvalidRuleError(message=f"line_rules[{index}] trim must be true or false, not {trim!r}")

    return LineRule(
        token=str(entry["token"]),
        style=_resolve_style(entry["style"], styles),
        remove=remove,
        trim=trim,
        applies_to=applies_to,
    )


def _parse_front_matter_rule(entry: Any, index: int) -> FrontMatterRule:
    """Parse one entry of the front_matter section."""
    if not isinstance(entry, dict):
        raise InvalidRuleError(message=f"front_matter[{index}] must be a mapping")

    for key in ("open", "close", "separator"):
        if key not in entry:
            raise InvalidRuleError(message=f"front_matter[{index}] is missing '{key}'")

    separator = str(entry["separator"])
    if len(separator) != 1:
        raise InvalidRuleError(message=f"front_matter[{index}] separator must be one character")

    return FrontMatterRule(
        open_tag=str(entry["open"]),
        close_tag=str(entry["close"]),
        separator=separator,
    )
