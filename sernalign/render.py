"""
render.py — text renderings of an alignment result

All functions are read-only views over a frozen AlignmentResult:

  - render_matrix               : the DP cost matrix, one row per line.
  - render_alignment            : the edit operations as "(a, b)" pairs.
  - render_execution_trace      : x turned into y one operation at a time.
  - render_constraint_derivation: the inequality behind every checked step.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .default import GAP_SYMBOL, UNREACHABLE
from .dp_core import AlignmentResult
from .verify import constraint_steps


def _format_sequence(codes: Iterable[int]) -> str:
    return ", ".join(str(c) for c in codes)


def _format_cost(value: int) -> str:
    return "inf" if value >= UNREACHABLE else str(value)


def render_matrix(result: AlignmentResult) -> str:
    """
    Cost matrix with cells separated by ", ".  Unreachable cells print
    as "inf".

    Raises
    ------
    ValueError
        If the result was computed without return_data=True.
    """
    if result.data is None:
        raise ValueError(
            "render_matrix requires result.data (AlignerData). "
            "Run the aligner with return_data=True."
        )
    cost = np.asarray(result.data.cost)
    lines = [", ".join(_format_cost(int(v)) for v in row) for row in cost]
    return "".join(line + "\n" for line in lines)


def render_alignment(result: AlignmentResult, gap: str = GAP_SYMBOL) -> str:
    """
    >>> render_alignment(align_structural([1], [1, 3], constraints=False))
    '(1, 1)(-, 3)'
    """
    return "".join(op.render(gap) for op in result.alignment)


def render_execution_trace(result: AlignmentResult, gap: str = GAP_SYMBOL) -> str:
    """
    Apply the alignment to a working copy of x, left to right.

    The first line is x.  Each operation adds two lines: the operation
    itself and the working sequence after it.  A cursor tracks the
    position in the working sequence that the next operation acts on:
    a deletion removes the element under the cursor, an insertion puts
    the new element before it, a match/mismatch overwrites it.  The last
    line is always y.
    """
    working: List[int] = result.x.to_list()
    cursor = 0
    lines = [_format_sequence(working)]

    for op in result.alignment:
        if op.is_deletion:
            del working[cursor]
        elif op.is_insertion:
            working.insert(cursor, op.b)
            cursor += 1
        else:
            working[cursor] = op.b
            cursor += 1
        lines.append(op.render(gap))
        lines.append(_format_sequence(working))

    return "".join(line + "\n" for line in lines)


def _bound(name: str, index: int, code: int, pos: int) -> str:
    limit = 2 * pos - 1
    relation = "<=" if code <= limit else ">"
    return f"{name}_{index} = {code} {relation} {limit} = C_{pos}"


def render_constraint_derivation(result: AlignmentResult) -> str:
    """
    One line per checked step, left to right, e.g.

        x_1 = 1 <= 1 = C_1 and y_1 = 1 <= 1 = C_1
        y_2 = 3 > 1 = C_1

    C_k = 2k - 1 is the largest code admissible at prefix length k.
    A step that breaks the rule (possible only without constraints)
    is shown with ">".  Border steps on row 0 or column 0 are not listed.
    """
    lines = []
    for op, i, j in constraint_steps(result):
        if op.is_deletion:
            lines.append(_bound("x", i, op.a, j))
        elif op.is_insertion:
            lines.append(_bound("y", j, op.b, i))
        else:
            lines.append(_bound("x", i, op.a, j) + " and " + _bound("y", j, op.b, i))
    return "".join(line + "\n" for line in lines)
