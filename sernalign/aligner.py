"""
aligner.py — User-facing structural alignment helpers

This module wraps the DP core.  align_structural builds an
AlignerInput, runs the DP and returns the frozen AlignmentResult;
StructuralSequenceAligner does the same inside its constructor and
exposes the distance, the alignment, the verifier and the renderers
as read-only methods.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .default import DEFAULT_CONSTRAINTS, GAP_SYMBOL
from .dp_core import AlignerInput, AlignmentResult, run_aligner_dp
from .edit_ops import EditOperation
from .fast import run_aligner_dp_fast
from .render import (
    render_alignment,
    render_constraint_derivation,
    render_execution_trace,
    render_matrix,
)
from .sequence import SequenceLike, as_structural_sequence
from .verify import check_alignment

logger = logging.getLogger(__name__)


def align_structural(
    x: SequenceLike,
    y: SequenceLike,
    constraints: bool = DEFAULT_CONSTRAINTS,
    return_data: bool = False,
    use_fast: bool = False,
) -> AlignmentResult:
    """
    Minimum-cost alignment of two structural sequences.

    Parameters
    ----------
    x, y : StructuralSequence or sequence of int
        Source and target sequences.  Plain sequences are coerced.

    constraints : bool, default True
        Enforce the admissibility rule 1 <= h <= 2*pos - 1 on every
        move of the DP.

    return_data : bool, default False
        If True, keep the cost and trace matrices in result.data.

    use_fast : bool, default False
        Fill the DP with the Cython core (raises ImportError if it was
        not built).

    Returns
    -------
    AlignmentResult

    Raises
    ------
    ValueError
        If x or y is None or holds a non-positive code.
    """
    config = AlignerInput(
        x=as_structural_sequence(x, "x"),
        y=as_structural_sequence(y, "y"),
        constraints=bool(constraints),
    )
    if use_fast:
        return run_aligner_dp_fast(config, return_data=return_data)
    return run_aligner_dp(config, return_data=return_data)


class StructuralSequenceAligner:
    """
    Alignment engine: solves on construction, read-only afterwards.

    Examples
    --------
    >>> aligner = StructuralSequenceAligner([3], [1])
    >>> aligner.distance()
    2
    >>> aligner.render_alignment()
    '(3, -)(-, 1)'
    """

    def __init__(
        self,
        x: SequenceLike,
        y: SequenceLike,
        constraints: bool = DEFAULT_CONSTRAINTS,
        use_fast: bool = False,
    ):
        self._result = align_structural(
            x, y, constraints=constraints, return_data=True, use_fast=use_fast
        )
        logger.debug(
            "Aligned %d x %d codes: distance %d, %d operations",
            len(self._result.x), len(self._result.y),
            self._result.distance, len(self._result.alignment),
        )

    @property
    def result(self) -> AlignmentResult:
        return self._result

    @property
    def constraints(self) -> bool:
        return self._result.constraints

    def distance(self) -> int:
        return self._result.distance

    def optimal_alignment(self) -> Tuple[EditOperation, ...]:
        return self._result.alignment

    def check_optimal_alignment(self) -> bool:
        """Strict admissibility check, independent of the constraints flag."""
        return check_alignment(self._result)

    def render_matrix(self) -> str:
        return render_matrix(self._result)

    def render_alignment(self, gap: str = GAP_SYMBOL) -> str:
        return render_alignment(self._result, gap)

    def render_execution_trace(self, gap: str = GAP_SYMBOL) -> str:
        return render_execution_trace(self._result, gap)

    def render_constraint_derivation(self) -> str:
        return render_constraint_derivation(self._result)

    def __repr__(self) -> str:
        return (
            f"StructuralSequenceAligner(n={len(self._result.x)}, m={len(self._result.y)}, "
            f"constraints={self.constraints}, distance={self.distance()})"
        )
