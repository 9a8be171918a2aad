"""
Indexed Heap Command-Line Interface (CLI)

Small front-end over the heap package. It ties together:
- The indexed heap (ordering value/priority pairs read from CSV)
- The benchmark runner (CSV timing report)
- The hash table debug dump

Usage examples:
    python -m indexed_heap.cli sort --path jobs.csv
    python -m indexed_heap.cli sort --path jobs.csv --output ordered.csv
    python -m indexed_heap.cli bench --path bench.csv --base-input 100 --steps 6
    python -m indexed_heap.cli dump-table --keys a b c --capacity 5
"""

import argparse
import csv
import logging
import math
import sys

from . import benchmarks
from .datastructures import HashTable, Heap, HeapError

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: CSV input/output for value,priority rows
# -------------------------------------------------------------------
def read_pairs(path):
    """Yield (value, priority, priority_text) from a two-column CSV.

    Blank lines are skipped. The priority must be a finite number; the
    original text is passed along so it can be written back unchanged.
    """
    with open(path, "r", newline="", encoding="utf-8") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue
            if len(row) != 2:
                raise ValueError(f"{path}:{lineno}: expected 'value,priority', got {row!r}")
            value, text = row[0].strip(), row[1].strip()
            try:
                priority = float(text)
            except ValueError:
                raise ValueError(f"{path}:{lineno}: priority {text!r} is not a number") from None
            if not math.isfinite(priority):
                raise ValueError(f"{path}:{lineno}: priority {text!r} is not a finite number")
            yield value, priority, text


def write_pairs(rows, out):
    writer = csv.writer(out)
    for value, text in rows:
        writer.writerow([value, text])


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Order the CSV rows by priority using the heap."""
    heap = Heap()
    texts = HashTable()
    for value, priority, text in read_pairs(args.path):
        heap.add(value, priority)
        texts.put(value, text)
    logger.info("loaded %d values from %s", len(heap), args.path)

    ordered = []
    while heap:
        value = heap.poll()
        ordered.append((value, texts.get(value)))

    if args.output:
        with open(args.output, "w", newline="", encoding="utf-8") as f:
            write_pairs(ordered, f)
        print(f"Wrote {len(ordered)} rows to {args.output}")
    else:
        write_pairs(ordered, sys.stdout)


def cmd_bench(args):
    """Run the benchmark suite and write the CSV report."""
    benchmarks.run_benchmarks(
        args.path,
        base_input=args.base_input,
        steps=args.steps,
        iterations=args.iterations,
    )


def cmd_dump_table(args):
    """Map each key to its position and show the bucket layout."""
    table = HashTable(capacity=args.capacity)
    for i, key in enumerate(args.keys):
        table.put(key, i)
    print(table.dump())


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m indexed_heap.cli", description="Indexed heap CLI")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Order value,priority CSV rows by priority")
    s.add_argument("--path", required=True)
    s.add_argument("--output", default=None)
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("bench", help="Benchmark array, table and heap operations")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=8)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    s = sub.add_parser("dump-table", help="Print the bucket layout of a hash table")
    s.add_argument("--keys", nargs="+", required=True)
    s.add_argument("--capacity", type=int, default=17)
    s.set_defaults(func=cmd_dump_table)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m indexed_heap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except (HeapError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
