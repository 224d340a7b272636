"""Command line entry point: print the lines a reference selects."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from codeimport.config import CodeImportConfig
from codeimport.errors import CodeImportError, FileReadError
from codeimport.importer import CodeImporter

LINE_SEPARATORS = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
    "native": os.linesep,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeimport",
        description="Resolve a file reference such as 'src/lib.rs#L10-L20' and print the selected lines.",
    )
    parser.add_argument("reference", help="path[#L<start>[-][L<end>]]")
    parser.add_argument(
        "--root-dir",
        default=os.getcwd(),
        help="Absolute directory substituted for ^<rootDir> (default: current directory)",
    )
    parser.add_argument(
        "--base-dir",
        default=os.getcwd(),
        help="Directory relative paths resolve against (default: current directory)",
    )
    parser.add_argument(
        "--line-separator",
        choices=sorted(LINE_SEPARATORS),
        default="native",
        help="Separator used to split the file into lines (default: native)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger("codeimport").setLevel(level)

    try:
        config = CodeImportConfig(
            root_dir=args.root_dir,
            line_separator=LINE_SEPARATORS[args.line_separator],
        )
        lines = CodeImporter(config).import_lines(args.reference, args.base_dir)
    except FileReadError as e:
        print(f"codeimport: {e}", file=sys.stderr)
        return 1
    except CodeImportError as e:
        print(f"codeimport: {e}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0
