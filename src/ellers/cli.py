#!/usr/bin/env python3
# src/ellers/cli.py
# Print an Eller's maze row by row: `ellers WIDTH ITERATIONS [--seed N]`.

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import MazeConfig
from .errors import InvalidArgument
from .mapgen.generator import generate_rows
from .render.text import print_row

DESCRIPTION = "Eller's maze generation algorithm implementation."

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ellers", description=DESCRIPTION, add_help=False)
    p.add_argument("-h", "--help", "-help", action="help", help="Show this help and exit")
    p.add_argument("width", help="Cells per row (>= 1)")
    p.add_argument("iterations", help="Rows to generate, closing row included (>= 2)")
    p.add_argument("--seed", type=str, default=None, help="Replay a maze from a seed")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each row to stderr")
    return p

def run(config: MazeConfig, out=None) -> None:
    out = out if out is not None else sys.stdout
    digits = config.label_digits
    for row in generate_rows(config):
        print_row(row, digits, out)

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        config = MazeConfig.from_strings(args.width, args.iterations, args.seed)
    except InvalidArgument as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    try:
        run(config)
        sys.stdout.flush()
    except OSError as e:
        print(f"{parser.prog}: error writing maze: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
