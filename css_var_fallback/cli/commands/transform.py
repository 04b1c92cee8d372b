from __future__ import annotations
import json
from pathlib import Path

from pydantic import ValidationError

from ...core.config import load_options
from ...core.logger import get_logger
from ...core.plugin import create_plugin
from ...core.stylesheet import StylesheetReport, rewrite_stylesheet

log = get_logger(__name__)


def run(args) -> int:
    src = Path(args.input)
    if not src.exists():
        log.error("Input stylesheet not found: %s", src)
        return 1

    try:
        options = load_options(Path(args.config) if args.config else None)
    except FileNotFoundError:
        log.error("Config file not found: %s", args.config)
        return 1
    except (json.JSONDecodeError, ValidationError) as exc:
        log.error("Invalid config %s: %s", args.config, exc)
        return 1

    updates = {}
    if args.always:
        updates["skip_supported_browsers"] = False
    if args.no_cache:
        updates["use_cache"] = False
    if args.root:
        updates["root_stylesheet"] = args.root
    elif not options.root_stylesheet:
        updates["root_stylesheet"] = str(src)
    if updates:
        options = options.model_copy(update=updates)

    plugin = create_plugin(options)

    text = src.read_text(encoding="utf-8")
    report = StylesheetReport(source=src, dry_run=args.dry_run)
    output, report = rewrite_stylesheet(text, plugin, report=report)

    for line in report.summary_lines:
        log.info(line)

    if args.dry_run:
        log.info("Dry run: nothing written")
        return 0
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(output, encoding="utf-8")
        report.mark_saved(out)
        log.info("Wrote %s", out)
    else:
        print(output, end="")
    return 0
