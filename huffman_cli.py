#!/usr/bin/env python3
"""
Command-line runner for the letter prefix-code encoder.

This script:
- Reads a text file and counts its letters (case-folded, other bytes ignored)
- Builds the encoding tree and prints the code table
- Prints the input re-encoded as a line of '0'/'1' characters
- Optionally writes the same results as a JSON report

Run with:
    python huffman_cli.py [input.txt] [--capacity N] [--report report.json]
"""
import argparse
import json
import sys
from pathlib import Path

from huffman_core import MAX_NODES, NodeTableFullError
from huffman_service import HuffmanService, render, render_headers
from letter_frequency import count_letters, read_input
from min_heap import HeapError

DEFAULT_INPUT = "input.txt"


def positive_int(value):
    """argparse type for capacities."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        description="Encode the letters of a text file with a prefix code"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Text file to encode (default: {DEFAULT_INPUT})"
    )
    parser.add_argument(
        "--capacity",
        type=positive_int,
        default=MAX_NODES,
        help=f"Node table and heap capacity (default: {MAX_NODES})"
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Also write a JSON report to this path"
    )
    return parser


def write_report(path, report):
    """Write the JSON report, creating parent directories as needed."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)


def finish(args, report, exit_code):
    """Write the optional report and settle the final exit code."""
    if not args.report:
        return exit_code
    try:
        write_report(args.report, report)
    except OSError:
        print(f"Error: could not write report {args.report}", file=sys.stderr)
        return 1
    return exit_code


def main(argv=None):
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        data = read_input(args.input)
    except OSError:
        print(f"Error: could not open {args.input}", file=sys.stderr)
        return 1

    service = HuffmanService(capacity=args.capacity)
    report = {"input": args.input}

    try:
        result = service.encode(data)
    except (NodeTableFullError, HeapError) as e:
        for line in render_headers(len(count_letters(data))):
            print(line)
        print(f"[error] {e}", file=sys.stderr)
        report.update(success=False, error=str(e))
        return finish(args, report, 1)

    for line in render(result):
        print(line)

    report.update(result.to_dict())
    report.update(success=True, error=None)
    return finish(args, report, 0)


if __name__ == "__main__":
    sys.exit(main())
