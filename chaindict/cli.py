"""
Chained Dictionary Command-Line Interface (CLI)

Subcommands:
- demo:  insert one pair, look it up, and show the display form
- bench: time the container's operations and write a CSV report

Usage examples:
    python -m chaindict.cli demo
    python -m chaindict.cli bench --path dictionary_performance.csv --rounds 4
"""

import argparse
import logging
import sys

from .datastructures import Dictionary
from . import benchmark

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_demo(args):
    """Insert "Test" -> 1, print the looked-up item and the full listing."""
    dictionary = Dictionary()
    dictionary.insert("Test", 1)
    found = dictionary.lookup("Test")

    print(found.value)
    dictionary.display(sys.stdout)
    print()


def cmd_bench(args):
    """Run the timing harness and write the CSV report."""
    rows = benchmark.run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
    )
    print(f"Wrote {len(rows)} rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------

def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m chaindict.cli", description="Chained Dictionary CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Insert and look up one pair")
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("bench", help="Benchmark dictionary operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=benchmark.DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------

def main(argv=None):
    """CLI entry point when invoked via `python -m chaindict.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)
    args.func(args)


if __name__ == "__main__":
    main()
