"""
CSS custom property fallbacks

Rewrites declarations that use ``var(--name, fallback)`` into a literal
fallback declaration followed by the original one.
"""

from .core.cache import TransformCache, memoized_transform_content
from .core.config import PluginOptions, load_options
from .core.plugin import PluginContext, create_plugin
from .core.stylesheet import StylesheetReport, rewrite_stylesheet
from .core.transform import get_fallback_declaration, transform_content
from .core.value_sources import (
    MappingValueSource,
    NullValueSource,
    StylesheetValueSource,
    ValueSource,
)

__all__ = [
    "TransformCache",
    "memoized_transform_content",
    "PluginOptions",
    "load_options",
    "PluginContext",
    "create_plugin",
    "StylesheetReport",
    "rewrite_stylesheet",
    "get_fallback_declaration",
    "transform_content",
    "MappingValueSource",
    "NullValueSource",
    "StylesheetValueSource",
    "ValueSource",
]
