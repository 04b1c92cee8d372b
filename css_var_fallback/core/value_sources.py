"""
Read-only access to the root custom-property scope.

Resolution never reads ambient global state; callers hand the engine a
:class:`ValueSource` instead. Every source answers ``lookup(name)`` with the
value current at call time and exposes a ``version`` counter that changes
whenever the scope it reflects changes, so memoised results can be keyed on
it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

from .css_utils import load_root_properties
from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "ValueSource",
    "NullValueSource",
    "MappingValueSource",
    "StylesheetValueSource",
]


def _clean(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    value = str(raw).strip()
    return value or None


class ValueSource(ABC):
    """Base class for root-scope lookups."""

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """
        Return the current value of a custom property.

        Args:
            name: Custom property name including the ``--`` prefix

        Returns:
            The trimmed value, or None when undefined or whitespace-only
        """

    @property
    def version(self) -> int:
        return 0


class NullValueSource(ValueSource):
    """Scope used when no root scope exists (headless/server-side runs)."""

    def lookup(self, name: str) -> Optional[str]:
        return None


class MappingValueSource(ValueSource):
    """
    Live view over a mutable mapping of custom properties.

    The mapping is not copied: lookups always see its current contents.
    Changes made through :meth:`set_property`, :meth:`remove_property` and
    :meth:`clear` also bump :attr:`version`; edits made directly on the
    wrapped mapping are visible to ``lookup`` but not to caches keyed on the
    version.
    """

    def __init__(self, values: Optional[MutableMapping[str, str]] = None) -> None:
        self._values: MutableMapping[str, str] = values if values is not None else {}
        self._version = 0

    def lookup(self, name: str) -> Optional[str]:
        return _clean(self._values.get(name))

    @property
    def version(self) -> int:
        return self._version

    def set_property(self, name: str, value: str) -> None:
        self._values[name] = value
        self._version += 1

    def remove_property(self, name: str) -> None:
        if name in self._values:
            del self._values[name]
            self._version += 1

    def clear(self) -> None:
        self._values.clear()
        self._version += 1


def _fingerprint(path: Path) -> Dict[str, Any]:
    try:
        st = path.stat()
        return {"mtime": st.st_mtime_ns, "size": st.st_size}
    except OSError:
        return {"mtime": None, "size": None}


class StylesheetValueSource(ValueSource):
    """
    Root scope backed by the ``:root`` rules of a stylesheet file.

    The file is re-read whenever its fingerprint (mtime/size) changes, so
    edits to the stylesheet are observed by the next lookup.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._fingerprint: Optional[Dict[str, Any]] = None
        self._values: Dict[str, str] = {}
        self._version = 0

    def _refresh(self) -> None:
        fp = _fingerprint(self.path)
        if fp == self._fingerprint:
            return
        self._fingerprint = fp
        if fp["mtime"] is None:
            log.warning("Root stylesheet not found: %s", self.path)
            values: Dict[str, str] = {}
        else:
            try:
                values = load_root_properties(self.path)
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Failed to read root stylesheet %s: %s", self.path, exc)
                values = {}
        if values != self._values:
            self._values = values
            self._version += 1
            log.debug("Reloaded %d root properties from %s", len(values), self.path)

    def lookup(self, name: str) -> Optional[str]:
        self._refresh()
        return _clean(self._values.get(name))

    @property
    def version(self) -> int:
        self._refresh()
        return self._version
