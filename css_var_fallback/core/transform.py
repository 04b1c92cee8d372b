"""
Fallback generation for declarations and declaration blocks.

A declaration such as ``font-size: var(--font, 14px)`` gets a literal twin,
``font-size:14px``, emitted in front of it so that engines without custom
property support still get a usable value.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .logger import get_logger
from .resolver import resolve_reference
from .rewriter import EditSet, apply_edits, plan_span_edits
from .spans import find_spans
from .value_sources import NullValueSource, ValueSource

log = get_logger(__name__)

__all__ = [
    "DECLARATION_SEPARATOR",
    "has_variable",
    "split_declaration",
    "get_fallback_value",
    "get_fallback_declaration",
    "transform_content",
]

DECLARATION_SEPARATOR = ";"

_NULL_SOURCE = NullValueSource()


def has_variable(declaration: str) -> bool:
    return "var(" in declaration


def split_declaration(declaration: str) -> Tuple[str, str]:
    """Split on the first colon: trimmed property, untrimmed value."""

    prop, _, value = declaration.partition(":")
    return prop.strip(), value


def get_fallback_value(value: str, source: ValueSource) -> Optional[str]:
    """
    Rewrite a value with every ``var()`` reference replaced by a literal.

    Returns None when the value has no reference, its parentheses do not
    balance, or nothing usable is left after rewriting.
    """
    spans = find_spans(value)
    if not spans:
        return None

    edits = EditSet()
    for span in spans:
        # spans inside a fallback already removed by a root value are dead
        if edits.covers(span.var_start):
            continue
        resolution = resolve_reference(span, value, source)
        plan_span_edits(span, resolution, value, edits)

    rewritten = apply_edits(value, edits)
    return rewritten or None


def get_fallback_declaration(
    declaration: str, source: Optional[ValueSource] = None
) -> Optional[str]:
    """
    Build the fallback declaration for ``prop: value``.

    Args:
        declaration: One declaration without its trailing semicolon
        source: Root scope; defaults to an empty (headless) scope

    Returns:
        ``prop:literal-value``, or None when no fallback can be produced
    """
    if not has_variable(declaration):
        return None

    prop, value = split_declaration(declaration)
    fallback = get_fallback_value(value, source or _NULL_SOURCE)
    if fallback is None:
        log.debug("No fallback for declaration %r", declaration)
        return None
    return f"{prop}:{fallback}"


def transform_content(content: str, source: Optional[ValueSource] = None) -> Optional[str]:
    """
    Prefix every declaration of a block with its fallback declaration.

    Before::

        background-color:var(--bg, black); font-size:14px;

    After::

        background-color:black;background-color:var(--bg, black); font-size:14px;

    Declarations are split on ``;`` without any quoting awareness, so values
    containing a literal semicolon are not supported. Returns None when no
    declaration received a fallback, so the caller can keep its content
    untouched.
    """
    source = source or _NULL_SOURCE
    styles: List[str] = []
    did_transform = False

    for declaration in content.split(DECLARATION_SEPARATOR):
        if not declaration:
            continue
        fallback = get_fallback_declaration(declaration, source)
        if fallback is not None:
            did_transform = True
            styles.append(fallback)
        styles.append(declaration)

    if not did_transform:
        return None
    return DECLARATION_SEPARATOR.join(styles) + DECLARATION_SEPARATOR
