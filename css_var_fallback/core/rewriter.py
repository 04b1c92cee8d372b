"""
Index-safe rewriting of a declaration value.

Edits are expressed against the original, unmodified value: half-open
:class:`Removal` ranges and point :class:`Insertion` records. They are
collected for every span first and applied together, right to left, so no
edit ever needs re-indexing after another has been applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .resolver import Resolution, ResolutionKind
from .spans import ReferenceSpan

__all__ = [
    "Removal",
    "Insertion",
    "EditSet",
    "plan_span_edits",
    "merge_removals",
    "apply_edits",
]


@dataclass(frozen=True, order=True)
class Removal:
    start: int
    end: int  # exclusive


@dataclass(frozen=True)
class Insertion:
    index: int
    text: str


@dataclass
class EditSet:
    """All edits computed for one declaration value."""

    removals: List[Removal] = field(default_factory=list)
    insertions: List[Insertion] = field(default_factory=list)

    def remove(self, start: int, end: int) -> None:
        if end > start:
            self.removals.append(Removal(start, end))

    def insert(self, index: int, text: str) -> None:
        self.insertions.append(Insertion(index, text))

    def covers(self, index: int) -> bool:
        return any(r.start <= index < r.end for r in self.removals)

    def __bool__(self) -> bool:
        return bool(self.removals or self.insertions)


def plan_span_edits(
    span: ReferenceSpan, resolution: Resolution, value: str, edits: EditSet
) -> None:
    """
    Schedule the edits one resolved span contributes.

    The ``var(`` token, the name and the comma are always removed, as is the
    span's close paren. A root value also removes the fallback text and is
    inserted where the span started; a kept fallback only loses the
    whitespace between the comma and its text.
    """
    name_stop = span.close_paren if span.name_end is None else span.name_end + 1
    edits.remove(span.var_start, name_stop)
    edits.remove(span.close_paren, span.close_paren + 1)

    if resolution.kind is ResolutionKind.ROOT_RESOLVED:
        edits.remove(name_stop, span.close_paren)
        edits.insert(span.var_start, resolution.value or "")
    elif resolution.kind is ResolutionKind.FALLBACK_KEPT:
        ws_end = name_stop
        while ws_end < span.close_paren and value[ws_end].isspace():
            ws_end += 1
        edits.remove(name_stop, ws_end)


def merge_removals(
    removals: Iterable[Removal], breakpoints: Iterable[int] = ()
) -> List[Removal]:
    """
    Merge overlapping and contiguous removals into single ranges.

    Ranges are split again at every breakpoint falling strictly inside them,
    so an insertion point always coincides with the start of a range.
    """
    merged: List[Removal] = []
    for removal in sorted(removals):
        if merged and removal.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = Removal(last.start, max(last.end, removal.end))
        else:
            merged.append(removal)

    cuts = sorted(set(breakpoints))
    result: List[Removal] = []
    for removal in merged:
        start = removal.start
        for point in cuts:
            if start < point < removal.end:
                result.append(Removal(start, point))
                start = point
        result.append(Removal(start, removal.end))
    return result


def apply_edits(value: str, edits: EditSet) -> str:
    """Apply every edit to ``value`` and return the trimmed result."""

    pending = {ins.index: ins.text for ins in edits.insertions}
    ops: List[Tuple[int, int, str]] = []
    for removal in merge_removals(edits.removals, pending):
        # an insertion at a removal's start replaces the removed text
        ops.append((removal.start, removal.end, pending.pop(removal.start, "")))
    ops.extend((index, index, text) for index, text in pending.items())

    for start, end, text in sorted(ops, key=lambda op: op[0], reverse=True):
        value = value[:start] + text + value[end:]
    return value.strip()
