"""
verify.py — a posteriori admissibility check of an alignment

The check always uses the strict rule 1 <= h <= 2*pos - 1, whatever
constraints flag the alignment was computed with.  It answers two
questions: does an unconstrained alignment happen to be structurally
valid, and does a constrained one satisfy the rule end to end.

Each alignment step is checked at the cell (i, j) it was emitted from:

    deletion of x_i      x_i <= 2j - 1
    insertion of y_j     y_j <= 2i - 1
    match/mismatch       both of the above

Steps emitted on row 0 or column 0 are the base case of the DP, which
is reachable unconditionally, so they carry no check.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from .dp_core import AlignmentResult, is_admissible
from .edit_ops import EditOperation


def constraint_steps(result: AlignmentResult) -> Iterator[Tuple[EditOperation, int, int]]:
    """
    Yield (operation, i, j) for every checked step, left to right.

    (i, j) is the DP cell the operation was emitted from, so the operation
    consumes x_i and/or y_j.
    """
    for op, (i, j) in zip(result.alignment, result.path[1:]):
        if i == 0 or j == 0:
            continue
        yield op, i, j


def step_is_admissible(op: EditOperation, i: int, j: int) -> bool:
    if op.is_deletion:
        return is_admissible(op.a, j)
    if op.is_insertion:
        return is_admissible(op.b, i)
    return is_admissible(op.a, j) and is_admissible(op.b, i)


def check_alignment(result: AlignmentResult) -> bool:
    """True iff every checked step satisfies the strict admissibility rule."""
    return all(step_is_admissible(op, i, j) for op, i, j in constraint_steps(result))


def first_violation(result: AlignmentResult):
    """
    Return the first offending (operation, i, j), or None if the alignment
    passes check_alignment.
    """
    for op, i, j in constraint_steps(result):
        if not step_is_admissible(op, i, j):
            return op, i, j
    return None
