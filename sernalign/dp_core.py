"""
dp_core.py — structural sequence alignment dynamic programming core

This module implements the edit-distance DP between two structural
sequences with position-dependent admissibility constraints, and the
traceback that turns the filled direction matrix into an ordered list of
edit operations.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .default import COST_DTYPE, UNREACHABLE, STOP, DIAGONAL, UP, LEFT
from .edit_ops import EditOperation, insertion, deletion, substitution
from .sequence import StructuralSequence

logger = logging.getLogger(__name__)


class UnreachableAlignmentError(RuntimeError):
    """
    The cost at (n, m) is the unreachable sentinel.

    Raised instead of returning the sentinel as a distance.  It can only
    happen for inputs where neither the last code of x nor the last code
    of y is admissible against the other sequence's length, i.e. sequences
    that no secondary structure produces.
    """


# ---------------------------------------------------------------------------
# Admissibility
# ---------------------------------------------------------------------------

def is_admissible(h: int, pos: int) -> bool:
    """
    Strict admissibility rule: a code h may occupy prefix length pos
    iff 1 <= h <= 2*pos - 1.
    """
    return 1 <= h <= 2 * pos - 1


def allowed(h: int, pos: int, constraints: bool) -> bool:
    """is_admissible when constraints are on, always True otherwise."""
    return not constraints or is_admissible(h, pos)


def saturating_add(value: int, step: int) -> int:
    """value + step, except that UNREACHABLE stays UNREACHABLE."""
    if value >= UNREACHABLE:
        return UNREACHABLE
    return value + step


# ---------------------------------------------------------------------------
# Input, DP state and output containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AlignerInput:
    """
    Configuration for a single alignment run.

    Attributes
    ----------
    x, y : StructuralSequence
        Source (rows) and target (columns) sequences.

    constraints : bool
        If True, every insertion, deletion and match/mismatch in the DP
        must satisfy the admissibility rule; inadmissible moves cost
        UNREACHABLE.  Applies uniformly to every cell.
    """
    x: StructuralSequence
    y: StructuralSequence
    constraints: bool = True

    def allowed(self, h: int, pos: int) -> bool:
        return allowed(h, pos, self.constraints)


@dataclass
class AlignerData:
    """
    DP cost and traceback arrays.

    cost : (n+1, m+1) array of int64
        cost[i, j] = minimum edit cost turning x[:i] into y[:j], or
        UNREACHABLE when no admissible path reaches the cell.

    trace : (n+1, m+1) array of int8
        Direction that produced cost[i, j]: DIAGONAL, UP (deletion),
        LEFT (insertion), or STOP on the first row and column.
    """
    cost : NDArray[np.integer]
    trace: NDArray[np.integer]

    def freeze(self) -> None:
        """Mark both arrays read-only."""
        self.cost.setflags(write=False)
        self.trace.setflags(write=False)


@dataclass(frozen=True)
class AlignmentResult:
    """
    Result of a single structural alignment run.

    Attributes
    ----------
    distance : int
        Minimum edit cost cost[n, m].

    alignment : tuple of EditOperation
        Optimal alignment in left-to-right order.

    path : tuple of (i, j)
        DP cells visited by the traceback, from (0, 0) to (n, m).
        path[k+1] is the cell alignment[k] was emitted from.

    x, y : StructuralSequence
        The aligned sequences.

    constraints : bool
        The constraints flag the DP ran with.

    data : AlignerData or None
        Full DP tables, if requested.
    """
    distance: int
    alignment: Tuple[EditOperation, ...]
    path: Tuple[Tuple[int, int], ...]
    x: StructuralSequence
    y: StructuralSequence
    constraints: bool
    data: Optional[AlignerData] = None

    def to_tuple(self) -> Tuple[int, Tuple[EditOperation, ...], Tuple[Tuple[int, int], ...]]:
        """
        Returns
        -------
        tuple
            (distance, alignment, path)
        """
        return (self.distance, self.alignment, self.path)

    def aligned_rows(self) -> Tuple[List[Optional[int]], List[Optional[int]]]:
        """
        Project the alignment onto two gapped rows (None marks a gap).
        """
        row_x = [op.a for op in self.alignment]
        row_y = [op.b for op in self.alignment]
        return row_x, row_y

    def count_operations(self) -> dict:
        """Number of matches, mismatches, insertions and deletions."""
        counts = {"match": 0, "mismatch": 0, "insertion": 0, "deletion": 0}
        for op in self.alignment:
            if op.is_insertion:
                counts["insertion"] += 1
            elif op.is_deletion:
                counts["deletion"] += 1
            elif op.is_match:
                counts["match"] += 1
            else:
                counts["mismatch"] += 1
        return counts


# ---------------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------------

def init_matrices(config: AlignerInput) -> AlignerData:
    """
    Allocate the DP arrays and fill the boundary:

        cost[i, 0] = i,  cost[0, j] = j,  trace = STOP on both.

    Boundary cells are always reachable, whatever the constraints flag.
    """
    n, m = len(config.x), len(config.y)

    cost  = np.full((n + 1, m + 1), UNREACHABLE, dtype=COST_DTYPE)
    trace = np.full((n + 1, m + 1), STOP, dtype=np.int8)

    cost[:, 0] = np.arange(n + 1)
    cost[0, :] = np.arange(m + 1)

    return AlignerData(cost=cost, trace=trace)


# ---------------------------------------------------------------------------
# Per-cell update
# ---------------------------------------------------------------------------

def cell_update(config: AlignerInput, data: AlignerData, i: int, j: int) -> None:
    """
    Fill cost[i, j] and trace[i, j] for 1 <= i <= n, 1 <= j <= m.

    Candidates:
        insertion  cost[i, j-1] + 1      if y_j admissible at i
        deletion   cost[i-1, j] + 1      if x_i admissible at j
        diagonal   cost[i-1, j-1] + p    if both of the above hold

    where p = 0 on a match and 1 on a mismatch.  The running minimum
    starts at the insertion and is replaced only by a strictly smaller
    deletion, then only by a strictly smaller diagonal, so ties resolve
    insertion > deletion > diagonal.
    """
    cost, trace = data.cost, data.trace
    xi = config.x[i - 1]
    yj = config.y[j - 1]

    p = 0 if xi == yj else 1
    y_ok = config.allowed(yj, i)
    x_ok = config.allowed(xi, j)

    val_insertion = saturating_add(int(cost[i, j - 1]), 1) if y_ok else UNREACHABLE
    val_deletion  = saturating_add(int(cost[i - 1, j]), 1) if x_ok else UNREACHABLE
    val_diagonal  = saturating_add(int(cost[i - 1, j - 1]), p) if (y_ok and x_ok) else UNREACHABLE

    best, direction = val_insertion, LEFT
    if val_deletion < best:
        best, direction = val_deletion, UP
    if val_diagonal < best:
        best, direction = val_diagonal, DIAGONAL

    cost [i, j] = best
    trace[i, j] = direction


# ---------------------------------------------------------------------------
# Traceback
# ---------------------------------------------------------------------------

def traceback_alignment(
    config: AlignerInput,
    data: AlignerData,
) -> Tuple[List[EditOperation], List[Tuple[int, int]]]:
    """
    Replay the recorded directions from (n, m) back to (0, 0).

    On row 0 the remaining y codes are inserted, on column 0 the remaining
    x codes are deleted; elsewhere the stored direction decides.

    Returns
    -------
    alignment : list of EditOperation
        Left-to-right order.
    path : list of (i, j)
        Visited cells from (0, 0) to (n, m).
    """
    x, y = config.x, config.y
    trace = data.trace
    i, j = len(x), len(y)

    ops: List[EditOperation] = []
    path: List[Tuple[int, int]] = []

    while i > 0 or j > 0:
        path.append((i, j))

        if i == 0:  # only insertions left
            ops.append(insertion(y[j - 1]))
            j -= 1
        elif j == 0:  # only deletions left
            ops.append(deletion(x[i - 1]))
            i -= 1
        else:
            move = trace[i, j]
            if move == DIAGONAL:
                ops.append(substitution(x[i - 1], y[j - 1]))
                i -= 1
                j -= 1
            elif move == UP:
                ops.append(deletion(x[i - 1]))
                i -= 1
            else:  # LEFT
                ops.append(insertion(y[j - 1]))
                j -= 1

    path.append((0, 0))
    ops.reverse()
    path.reverse()
    return ops, path


def finish_alignment(
    config: AlignerInput,
    data: AlignerData,
    return_data: bool = False,
) -> AlignmentResult:
    """
    Check the final cost, run the traceback and freeze the result.

    Shared by the Python and Cython solvers.

    Raises
    ------
    UnreachableAlignmentError
        If cost[n, m] is the unreachable sentinel.
    """
    n, m = len(config.x), len(config.y)
    distance = int(data.cost[n, m])
    if distance >= UNREACHABLE:
        raise UnreachableAlignmentError(
            f"No admissible alignment between sequences of length {n} and {m}: "
            f"x_{n} = {config.x[n - 1]} and y_{m} = {config.y[m - 1]} "
            f"violate the constraint bound at the last cell"
        )

    alignment, path = traceback_alignment(config, data)
    data.freeze()

    return AlignmentResult(
        distance=distance,
        alignment=tuple(alignment),
        path=tuple(path),
        x=config.x,
        y=config.y,
        constraints=config.constraints,
        data=data if return_data else None,
    )


# ---------------------------------------------------------------------------
# Top-level driver
# ---------------------------------------------------------------------------

def run_aligner_dp(
    config: AlignerInput,
    return_data: bool = False,
) -> AlignmentResult:
    """
    Run the structural alignment DP and return the optimal alignment.

    Parameters
    ----------
    config : AlignerInput
        Sequences and the constraints flag.
    return_data : bool, default False
        If True, also return the full DP/traceback arrays (AlignerData).

    Returns
    -------
    AlignmentResult
    """
    n, m = len(config.x), len(config.y)
    logger.debug("Solving %dx%d alignment (constraints=%s)", n, m, config.constraints)

    data = init_matrices(config)
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cell_update(config, data, i, j)

    return finish_alignment(config, data, return_data=return_data)
