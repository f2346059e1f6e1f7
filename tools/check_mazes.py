#!/usr/bin/env python3
# Generate many mazes and check each one is perfect.
# Exits 1 if any seed produces a maze with a loop, an unreachable cell,
# or inconsistent walls.

import argparse

from ellers.config import MazeConfig
from ellers.mapgen.generator import generate_rows
from ellers.verify import check_perfect

def check_seed(width: int, iterations: int, seed: int):
    config = MazeConfig(width=width, iterations=iterations, seed=seed)
    return check_perfect(generate_rows(config))

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Batch-check generated mazes for perfectness")
    ap.add_argument("--width", type=int, default=10, help="Cells per row")
    ap.add_argument("--iterations", type=int, default=10, help="Rows per maze")
    ap.add_argument("--count", type=int, default=100, help="Number of seeds to check")
    ap.add_argument("--seed", type=int, default=1, help="First seed")
    args = ap.parse_args(argv)

    failures = 0
    for seed in range(args.seed, args.seed + args.count):
        report = check_seed(args.width, args.iterations, seed)
        if not report.perfect:
            failures += 1
            print(f"[check_mazes] seed {seed}: cycles={report.cycles} "
                  f"components={report.components} defects={report.defects[:3]}")
    print(f"[check_mazes] {args.count - failures}/{args.count} perfect "
          f"({args.width}x{args.iterations})")
    return 1 if failures else 0

if __name__ == "__main__":
    raise SystemExit(main())
