"""Fixture checker for JSON conformance suites.

Classifies each file by the first letter of its name, in the convention of
the JSONTestSuite corpus:

    y...  must scan as exactly one JSON text
    n...  must be rejected
    i...  implementation-defined; either outcome is accepted

Usage:
    jsonwalk test_parsing/*.json
    python -m jsonwalk --max-depth 500 -v test_parsing/y_*.json

Exit Codes:
    0   Every fixture behaved as its name demands
    1   At least one fixture contradicted its name
    2   File read error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from jsonwalk.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jsonwalk.diagnostics import SourceTooLargeError
from jsonwalk.syntax.parser import JsonScanner

__all__ = ["check_fixture", "main"]

logger = logging.getLogger(__name__)

_MUST_ACCEPT = "y"
_MUST_REJECT = "n"
_EITHER = "i"


def check_fixture(scanner: JsonScanner, path: Path, source: bytes) -> bool | None:
    """Check one fixture against the expectation encoded in its name.

    Args:
        scanner: Configured scanner
        path: Fixture path (only the file name is inspected)
        source: Fixture contents

    Returns:
        True if the outcome matches the name, False if it contradicts it,
        None if the name carries no expectation
    """
    expectation = path.name[:1]
    if expectation not in (_MUST_ACCEPT, _MUST_REJECT, _EITHER):
        return None

    try:
        valid = scanner.is_complete(source)
    except SourceTooLargeError as e:
        logger.warning("%s: %s", path, e)
        valid = False

    logger.debug("%s: %s", path, "valid" if valid else "invalid")
    if expectation == _MUST_ACCEPT:
        return valid
    if expectation == _MUST_REJECT:
        return not valid
    return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonwalk",
        description="Check JSON fixtures whose names encode the expected outcome.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a whole conformance directory:
  jsonwalk test_parsing/*.json

  # Allow deeper nesting and show every verdict:
  jsonwalk --max-depth 500 -v test_parsing/i_structure_*.json
""",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Fixture files (names start with y, n or i)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum array/object nesting depth (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=MAX_SOURCE_SIZE,
        help="Maximum fixture size in bytes, 0 for no limit (default: 10 MB)",
    )
    parser.add_argument(
        "--show-source",
        action="store_true",
        help="Print the contents of failing fixtures",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every verdict",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    scanner = JsonScanner(max_source_size=args.max_size, max_nesting_depth=args.max_depth)
    failures = 0

    for path in args.files:
        try:
            source = path.read_bytes()
        except OSError as e:
            print(f"[ERROR] Cannot read file: {e}", file=sys.stderr)
            return 2

        verdict = check_fixture(scanner, path, source)
        if verdict is None:
            print(f"invalid test: {path}")
        elif not verdict:
            failures += 1
            print(f"test failed: {path}")
            if args.show_source:
                print(source.decode("utf-8", errors="replace"))

    logger.info("%d fixture(s) checked, %d failed", len(args.files), failures)
    return 1 if failures else 0
