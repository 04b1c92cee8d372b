from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .css_utils import iter_rule_blocks
from .logger import get_logger
from .plugin import Plugin, PluginContext

log = get_logger(__name__)

__all__ = ["StylesheetReport", "rewrite_stylesheet"]


@dataclass
class StylesheetReport:
    """Aggregates change information for a rewritten stylesheet."""

    source: Optional[Path] = None
    rules_seen: int = 0
    rules_transformed: int = 0
    transformed_selectors: List[str] = field(default_factory=list)
    dry_run: bool = False
    saved_path: Optional[Path] = None
    summary_lines: List[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.rules_transformed)

    def mark_saved(self, path: Path) -> None:
        self.saved_path = path

    def extend_summary(self, lines: Iterable[str]) -> None:
        self.summary_lines.extend(lines)


def _line_column(text: str, offset: int) -> Tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def rewrite_stylesheet(
    text: str, plugin: Plugin, *, report: Optional[StylesheetReport] = None
) -> Tuple[str, StylesheetReport]:
    """
    Run ``plugin`` over the body of every rule in a stylesheet.

    Rule bodies the plugin returns None for are left byte-for-byte as they
    were; the others are replaced by the plugin output.
    """
    report = report or StylesheetReport()
    replacements: List[Tuple[int, int, str]] = []

    for block in iter_rule_blocks(text):
        report.rules_seen += 1
        line, column = _line_column(text, block.body_start)
        output = plugin(
            PluginContext.SELECTOR_BLOCK,
            block.body,
            block.selectors,
            [],
            line,
            column,
            len(block.body),
        )
        if output is None:
            continue
        report.rules_transformed += 1
        report.transformed_selectors.append(block.selector_text)
        replacements.append((block.body_start, block.body_end, output))

    for start, end, output in reversed(replacements):
        text = text[:start] + output + text[end:]

    report.extend_summary(
        [f"Rules seen: {report.rules_seen}", f"Rules with fallbacks: {report.rules_transformed}"]
    )
    log.debug("Rewrote %d of %d rules", report.rules_transformed, report.rules_seen)
    return text, report
