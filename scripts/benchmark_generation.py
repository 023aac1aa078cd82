"""Benchmark puzzle generation time per difficulty."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.game.generator import DIFFICULTIES, generate_puzzle


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku generation")
    parser.add_argument(
        "--difficulties",
        nargs="+",
        choices=sorted(DIFFICULTIES),
        default=list(DIFFICULTIES),
        help="Difficulty levels to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=50,
        help="Number of puzzles generated per difficulty",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible run",
    )
    return parser.parse_args()


def run_benchmark(difficulty: str, rounds: int, rng: random.Random):
    timings = []
    for _ in range(rounds):
        start = time.perf_counter()
        generate_puzzle(difficulty, rng)
        timings.append(time.perf_counter() - start)

    timings.sort()
    avg = sum(timings) / len(timings)
    return avg, timings[len(timings) // 2], timings[-1]


def main() -> int:
    args = parse_args()
    if args.rounds < 1:
        print("--rounds must be at least 1", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)

    print("Generation benchmark results")
    print(f"rounds={args.rounds} seed={args.seed}")
    for difficulty in args.difficulties:
        avg, median, worst = run_benchmark(difficulty, args.rounds, rng)
        print(
            f"{difficulty:<8} clues={DIFFICULTIES[difficulty]:>2} "
            f"avg={avg * 1000:.2f}ms median={median * 1000:.2f}ms "
            f"max={worst * 1000:.2f}ms"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
