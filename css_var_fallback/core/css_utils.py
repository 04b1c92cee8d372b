from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List

from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "ROOT_SELECTOR",
    "RuleBlock",
    "strip_comments",
    "split_selectors",
    "iter_rule_blocks",
    "parse_root_properties",
    "load_root_properties",
]

ROOT_SELECTOR = ":root"

_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
_RULE_PATTERN = re.compile(r"([^{};]+)\{([^{}]*)\}")
_CUSTOM_PROPERTY_PATTERN = re.compile(r"(--[\w-]+)\s*:\s*([^;]*)(?:;|$)")


@dataclass(frozen=True)
class RuleBlock:
    """A flat ``selector { body }`` rule located inside a stylesheet."""

    selector_text: str
    body: str
    body_start: int
    body_end: int

    @property
    def selectors(self) -> List[str]:
        return split_selectors(self.selector_text)


def strip_comments(text: str) -> str:
    """Blank out ``/* ... */`` comments, keeping every other offset intact."""

    return _COMMENT_PATTERN.sub(lambda m: " " * len(m.group(0)), text)


def split_selectors(selector_text: str) -> List[str]:
    return [part.strip() for part in selector_text.split(",") if part.strip()]


def iter_rule_blocks(text: str) -> Iterator[RuleBlock]:
    """
    Yield the innermost rule blocks of a stylesheet.

    At-rule wrappers such as ``@media`` are skipped over; the rules nested in
    them are yielded like top-level ones. Comments are ignored but offsets
    refer to the original text.
    """
    for match in _RULE_PATTERN.finditer(strip_comments(text)):
        selector_text = match.group(1).strip()
        if not selector_text or selector_text.startswith("@"):
            continue
        yield RuleBlock(
            selector_text=selector_text,
            body=text[match.start(2) : match.end(2)],
            body_start=match.start(2),
            body_end=match.end(2),
        )


def parse_root_properties(text: str) -> Dict[str, str]:
    """Collect ``--name: value`` pairs declared in ``:root`` rules."""

    properties: Dict[str, str] = {}
    for block in iter_rule_blocks(text):
        if ROOT_SELECTOR not in block.selectors:
            continue
        for name, value in _CUSTOM_PROPERTY_PATTERN.findall(strip_comments(block.body)):
            value = value.strip()
            if not value:
                continue
            properties[name] = value
    return properties


def load_root_properties(path: Path) -> Dict[str, str]:
    """Parse a .css file for the custom properties its ``:root`` rules define."""

    properties = parse_root_properties(path.read_text(encoding="utf-8"))
    log.info("Loaded %s root properties from %s", len(properties), path)
    return properties
