"""
Resolution policy for a single ``var()`` span.

The root scope is always asked first and wins over any literal fallback.
Without a root value a supplied fallback is kept in place; without either the
reference is unresolved. Nested spans are not visited here: the span matcher
already lists them as separate entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .logger import get_logger
from .spans import ReferenceSpan
from .value_sources import ValueSource

log = get_logger(__name__)

__all__ = [
    "ResolutionKind",
    "Resolution",
    "resolve_reference",
]


class ResolutionKind(Enum):
    ROOT_RESOLVED = "root"
    FALLBACK_KEPT = "fallback"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Resolution:
    kind: ResolutionKind
    value: Optional[str] = None  # only set for ROOT_RESOLVED

    @classmethod
    def root_resolved(cls, value: str) -> "Resolution":
        return cls(ResolutionKind.ROOT_RESOLVED, value)

    @classmethod
    def fallback_kept(cls) -> "Resolution":
        return cls(ResolutionKind.FALLBACK_KEPT)

    @classmethod
    def unresolved(cls) -> "Resolution":
        return cls(ResolutionKind.UNRESOLVED)

    @property
    def is_root(self) -> bool:
        return self.kind is ResolutionKind.ROOT_RESOLVED


def resolve_reference(span: ReferenceSpan, value: str, source: ValueSource) -> Resolution:
    """
    Decide how one span is replaced in the fallback declaration.

    Args:
        span: Span located by :func:`~css_var_fallback.core.spans.find_spans`
        value: The declaration value the span indexes into
        source: Root scope queried for the variable's current value

    Returns:
        The span's :class:`Resolution`
    """
    name = span.name(value)
    root_value = source.lookup(name) if name else None
    if root_value is not None:
        root_value = root_value.strip()
    if root_value:
        return Resolution.root_resolved(root_value)
    if span.has_fallback:
        return Resolution.fallback_kept()
    log.debug("No root value or fallback for %s", name or "<empty name>")
    return Resolution.unresolved()
