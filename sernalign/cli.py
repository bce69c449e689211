"""CLI entry point for sernalign."""

from __future__ import annotations

import argparse
import logging
import sys

from sernalign.aligner import StructuralSequenceAligner
from sernalign.dp_core import UnreachableAlignmentError
from sernalign.sequence import StructuralSequence


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sernalign",
        description="sernalign – edit alignment of RNA structural sequences",
    )
    parser.add_argument("x", help='First structural sequence, e.g. "1, 1, 3"')
    parser.add_argument("y", help="Second structural sequence")
    parser.add_argument("-n", "--no-constraints", action="store_true",
                        help="Do not use constraints on the alignment")
    parser.add_argument("--matrix", action="store_true", help="Print the cost matrix")
    parser.add_argument("--trace", action="store_true",
                        help="Print the step-by-step transformation of x into y")
    parser.add_argument("--derivation", action="store_true",
                        help="Print the constraint inequality behind every step")
    parser.add_argument("--fast", action="store_true", help="Use the Cython DP core")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        x = StructuralSequence.parse(args.x)
        y = StructuralSequence.parse(args.y)
        aligner = StructuralSequenceAligner(
            x, y, constraints=not args.no_constraints, use_fast=args.fast
        )
    except (ValueError, ImportError, UnreachableAlignmentError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(2)

    print(f"Distance: {aligner.distance()}")
    print(f"Alignment: {aligner.render_alignment()}")
    print(f"Admissible: {'yes' if aligner.check_optimal_alignment() else 'no'}")

    if args.matrix:
        print("\nCost matrix:")
        print(aligner.render_matrix(), end="")
    if args.trace:
        print("\nExecution:")
        print(aligner.render_execution_trace(), end="")
    if args.derivation:
        print("\nConstraints:")
        print(aligner.render_constraint_derivation(), end="")


if __name__ == "__main__":
    main()
