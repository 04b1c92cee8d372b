"""
Compiler-plugin entry point.

The host calls the plugin once per compilation phase with the raw content of
a rule. Only declaration blocks are rewritten; everything else, and every
block whose selectors include ``:root``, passes through as None.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from .cache import TransformCache
from .config import PluginOptions
from .css_utils import ROOT_SELECTOR
from .logger import get_logger
from .transform import transform_content
from .value_sources import NullValueSource, StylesheetValueSource, ValueSource

log = get_logger(__name__)

__all__ = [
    "PluginContext",
    "Plugin",
    "create_plugin",
    "is_root_scope",
]


class PluginContext(IntEnum):
    """Compilation phases reported by the host compiler."""

    POST_PROCESS = -2
    PREPARATION = -1
    NEWLINE = 0
    PROPERTY = 1
    SELECTOR_BLOCK = 2
    AT_RULE = 3


Plugin = Callable[..., Optional[str]]
NativeSupportCheck = Callable[[], bool]


def is_root_scope(selectors: Optional[Sequence[str]]) -> bool:
    return any(sel.strip() == ROOT_SELECTOR for sel in selectors or ())


def _default_source(options: PluginOptions) -> ValueSource:
    if options.root_stylesheet:
        return StylesheetValueSource(Path(options.root_stylesheet))
    return NullValueSource()


def create_plugin(
    options: Optional[PluginOptions] = None,
    *,
    value_source: Optional[ValueSource] = None,
    native_support: Optional[NativeSupportCheck] = None,
) -> Plugin:
    """
    Build a plugin callable for the host compiler.

    Args:
        options: Plugin options; defaults to :class:`PluginOptions`
        value_source: Root scope used for lookups; defaults to the
            ``root_stylesheet`` option, or an empty scope
        native_support: Checked once, now. When it reports support and
            ``skip_supported_browsers`` is set, the plugin never transforms.

    Returns:
        ``plugin(context, content, selectors, parents, line, column, length, ...)``
        returning the replacement block content, or None for no change.
        Extra trailing host arguments are ignored.
    """
    options = options or PluginOptions()
    source = value_source if value_source is not None else _default_source(options)
    cache: Optional[TransformCache] = TransformCache(source) if options.use_cache else None

    supported = bool(native_support()) if native_support is not None else False
    skip_all = options.skip_supported_browsers and supported
    if skip_all:
        log.debug("Native custom property support detected; plugin disabled")

    def plugin(
        context: int,
        content: str,
        selectors: Optional[Sequence[str]] = None,
        parents: Optional[Sequence[str]] = None,
        line: int = 0,
        column: int = 0,
        length: int = 0,
        *_host_args: Any,
    ) -> Optional[str]:
        if skip_all or context != PluginContext.SELECTOR_BLOCK:
            return None
        if is_root_scope(selectors):
            return None
        if cache is not None:
            return cache.get(content)
        return transform_content(content, source)

    return plugin
