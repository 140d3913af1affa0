from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .commands import (
    bindings as cmd_bindings,
    script as cmd_script,
    clear as cmd_clear,
)
from ..core.errors import BindgenError
from ..core.logger import configure_logging, get_logger

log = get_logger(__name__)


def entrypoint():
    sys.exit(main())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uxml-bindgen",
        description="Generate C# bindings from Unity UXML documents",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Settings JSON file (defaults to ./uxml-bindgen.json when present)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    b = sub.add_parser("generate-bindings", help="Generate <Name>.g.cs bindings")
    b.add_argument("uxml", nargs="+", help="UXML files or directories")
    b.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output file (single document only; defaults to the configured output path)",
    )

    s = sub.add_parser("generate-script", help="Generate the <Name>.cs behaviour script")
    s.add_argument("uxml", nargs="+", help="UXML files or directories")
    s.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output file (single document only; defaults to beside the document)",
    )
    s.add_argument(
        "--force", action="store_true", help="Overwrite an existing script"
    )

    c = sub.add_parser("clear-bindings", help="Delete previously generated bindings")
    c.add_argument("uxml", nargs="+", help="UXML files or directories")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.command == "generate-bindings":
            return cmd_bindings.run(args)
        elif args.command == "generate-script":
            return cmd_script.run(args)
        elif args.command == "clear-bindings":
            return cmd_clear.run(args)
    except BindgenError as e:
        log.error(str(e))
        return 1

    parser.error(f"unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    entrypoint()
