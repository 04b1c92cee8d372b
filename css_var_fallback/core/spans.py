"""
Span matching for ``var()`` references.

A value is scanned once for ``var`` tokens and parentheses. Parentheses are
paired with a depth walk, and every ``var`` token immediately followed by an
open paren becomes a :class:`ReferenceSpan`. Spans are returned flat, in the
order their ``var`` keyword appears, even when one sits inside another's
fallback text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "VAR_TOKEN",
    "ReferenceSpan",
    "find_spans",
    "match_parentheses",
]

VAR_TOKEN = "var"

_TOKEN_PATTERN = re.compile(r"var|\(|\)")
_IDENT_CHAR = re.compile(r"[\w-]")


@dataclass(frozen=True)
class ReferenceSpan:
    """Lexical extent of one ``var(...)`` occurrence inside a value string."""

    var_start: int
    open_paren: int
    close_paren: int
    name_end: Optional[int] = None  # index of the comma ending the name

    @property
    def has_fallback(self) -> bool:
        return self.name_end is not None

    @property
    def fallback_start(self) -> Optional[int]:
        if self.name_end is None:
            return None
        return self.name_end + 1

    def name(self, value: str) -> str:
        end = self.close_paren if self.name_end is None else self.name_end
        return value[self.open_paren + 1 : end].strip()

    def fallback(self, value: str) -> Optional[str]:
        if self.name_end is None:
            return None
        return value[self.name_end + 1 : self.close_paren]

    def contains(self, index: int) -> bool:
        return self.var_start <= index <= self.close_paren


def match_parentheses(opens: List[int], closes: List[int]) -> Optional[Dict[int, int]]:
    """
    Pair every open paren index with its matching close paren index.

    Args:
        opens: Ascending indices of ``(`` characters
        closes: Ascending indices of ``)`` characters

    Returns:
        Mapping of open index -> close index, or None if the parentheses do
        not balance (different counts, or a close before its open).
    """
    if len(opens) != len(closes):
        return None

    pairs: Dict[int, int] = {}
    pending: List[int] = []
    oi = ci = 0
    while ci < len(closes):
        if oi < len(opens) and opens[oi] < closes[ci]:
            pending.append(opens[oi])
            oi += 1
            continue
        if not pending:
            return None
        pairs[pending.pop()] = closes[ci]
        ci += 1
    return pairs


def _starts_identifier_tail(value: str, index: int) -> bool:
    return index > 0 and bool(_IDENT_CHAR.match(value[index - 1]))


def find_spans(value: str) -> Optional[List[ReferenceSpan]]:
    """
    Locate every ``var(...)`` reference in a declaration value.

    Returns an empty list when the value holds no reference, and None when the
    parentheses are unbalanced, in which case nothing in the value can be
    resolved safely.
    """
    var_starts: List[int] = []
    opens: List[int] = []
    closes: List[int] = []

    for match in _TOKEN_PATTERN.finditer(value):
        token = match.group(0)
        if token == VAR_TOKEN:
            var_starts.append(match.start())
        elif token == "(":
            opens.append(match.start())
        else:
            closes.append(match.start())

    pairs = match_parentheses(opens, closes)
    if pairs is None:
        log.debug(
            "Unbalanced parentheses in %r (%d open, %d close)",
            value,
            len(opens),
            len(closes),
        )
        return None

    spans: List[ReferenceSpan] = []
    for start in var_starts:
        open_paren = start + len(VAR_TOKEN)
        if open_paren not in pairs or _starts_identifier_tail(value, start):
            continue
        close_paren = pairs[open_paren]
        comma = value.find(",", open_paren + 1, close_paren)
        spans.append(
            ReferenceSpan(
                var_start=start,
                open_paren=open_paren,
                close_paren=close_paren,
                name_end=comma if comma != -1 else None,
            )
        )
    return spans
