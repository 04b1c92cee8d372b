from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .logger import get_logger

log = get_logger(__name__)

ALWAYS_TRANSFORM_ENV = "CSS_VAR_FALLBACK_ALWAYS"
_TRUTHY = {"1", "true", "True", "yes", "on"}


class PluginOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # False means "ignore native support and always transform"
    skip_supported_browsers: bool = True
    use_cache: bool = True
    # Optional stylesheet whose :root rules provide root values
    root_stylesheet: Optional[str] = None


class PluginConfig:
    def __init__(self, path: Path):
        self.path = path
        self.model: Optional[PluginOptions] = None

    def load(self) -> PluginOptions:
        data = json.loads(self.path.read_text(encoding="utf-8"))
        self.model = PluginOptions.model_validate(data)
        return self.model


def load_options(path: Optional[Path] = None) -> PluginOptions:
    """
    Load plugin options from a JSON file, or defaults when no path is given.

    The CSS_VAR_FALLBACK_ALWAYS environment variable, when truthy, turns off
    skipping of engines with native custom property support.
    """
    options = PluginConfig(path).load() if path is not None else PluginOptions()
    if os.environ.get(ALWAYS_TRANSFORM_ENV, "") in _TRUTHY:
        log.debug("Using %s: transforming regardless of native support", ALWAYS_TRANSFORM_ENV)
        options = options.model_copy(update={"skip_supported_browsers": False})
    return options
