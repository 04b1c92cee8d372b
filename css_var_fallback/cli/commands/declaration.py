from __future__ import annotations
from pathlib import Path

from ...core.logger import get_logger
from ...core.transform import get_fallback_declaration
from ...core.value_sources import NullValueSource, StylesheetValueSource

log = get_logger(__name__)


def run(args) -> int:
    source = StylesheetValueSource(Path(args.root)) if args.root else NullValueSource()
    fallback = get_fallback_declaration(args.declaration, source)
    if fallback is None:
        log.info("No fallback available for %r", args.declaration)
        return 1
    print(fallback)
    return 0
