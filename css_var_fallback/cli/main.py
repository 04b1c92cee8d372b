from __future__ import annotations
import argparse
from typing import List, Optional

from .commands import (
    declaration as cmd_declaration,
    transform as cmd_transform,
)
from ..core.logger import configure_logging


def entrypoint():
    raise SystemExit(main())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Add literal fallbacks in front of CSS declarations that use var()"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    t = sub.add_parser("transform", help="Add fallback declarations to a stylesheet")
    t.add_argument("input", type=str, help="Stylesheet (.css) to rewrite")
    t.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output file (defaults to printing the result on stdout)",
    )
    t.add_argument(
        "--root",
        type=str,
        default=None,
        help="Stylesheet whose :root rules provide root values (defaults to the input itself)",
    )
    t.add_argument(
        "--config", type=str, default=None, help="JSON file with plugin options"
    )
    t.add_argument(
        "--always",
        action="store_true",
        help="Transform even when native custom property support is reported",
    )
    t.add_argument(
        "--no-cache", action="store_true", help="Do not memoise block transforms"
    )
    t.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and report changes without writing any files",
    )

    d = sub.add_parser(
        "declaration", help="Print the fallback for a single declaration"
    )
    d.add_argument("declaration", type=str, help="Declaration, e.g. 'color: var(--fg, red)'")
    d.add_argument(
        "--root",
        type=str,
        default=None,
        help="Stylesheet whose :root rules provide root values",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "transform":
        return cmd_transform.run(args)
    if args.command == "declaration":
        return cmd_declaration.run(args)
    parser.error(f"unknown command {args.command}")
    return 2


if __name__ == "__main__":
    entrypoint()
