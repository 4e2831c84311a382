"""
ArrayList Command-Line Interface (CLI)

Usage examples:
    python -m arraylist.cli bench --path results.csv --base-input 100 --steps 8
    python -m arraylist.cli bench --path results.csv --ops append get --log-level DEBUG
    python -m arraylist.cli demo
"""

import argparse
import logging
import sys

from . import bench
from .datastructures import ArrayList
from .errors import InvalidCursorStateError
from .logging_config import setup_logging


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_bench(args):
    """Run the operation benchmarks and write a CSV report."""
    results = bench.run_benchmarks(
        args.path,
        base_input=args.base_input,
        steps=args.steps,
        iterations=args.iterations,
        ops=args.ops,
    )
    print(f"Benchmark completed. {len(results)} rows saved to {args.path}")


def cmd_demo(args):
    """Walk a cursor over a small list, editing it in place."""
    lst = ArrayList([10, 20, 30])
    print(f"start:        {lst.to_array()}")
    cursor = lst.list_iterator()
    print(f"next():       {cursor.next()}")
    cursor.set(99)
    print(f"set(99):      {lst.to_array()}")
    print(f"next():       {cursor.next()}")
    cursor.remove()
    print(f"remove():     {lst.to_array()}")
    try:
        cursor.set(0)
    except InvalidCursorStateError as e:
        print(f"set(0):       rejected ({e})")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m arraylist.cli", description="ArrayList tools")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("bench", help="Benchmark list operations into a CSV file")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=12)
    s.add_argument("--iterations", type=int, default=5)
    s.add_argument("--ops", nargs="+", choices=sorted(bench.OPERATIONS), default=None)
    s.set_defaults(func=cmd_bench)

    s = sub.add_parser("demo", help="Show the cursor editing a list")
    s.set_defaults(func=cmd_demo)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m arraylist.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    args.func(args)


if __name__ == "__main__":
    main()
