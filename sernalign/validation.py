"""
validation.py — independent baselines and regression helpers for sernalign

This module provides an independent plain edit distance
(edit_distance_plain), an alignment consistency check, random
well-formed structural sequences, and a Python vs Cython benchmark.

The goals are:

  1. Verify that the unconstrained aligner returns the classical unit-cost
     edit distance, computed here by a separate two-row recurrence so that
     bugs in dp_core cannot mask each other during testing.

  2. Verify that every alignment is internally consistent: its operations
     rebuild x and y, their costs add up to the distance, and its length
     lies in [max(n, m), n + m].
"""

from typing import List, Optional, Sequence, Tuple
import timeit

import numpy as np

from .aligner import align_structural
from .dp_core import AlignerInput, AlignmentResult, run_aligner_dp
from .fast import run_aligner_dp_fast
from .sequence import StructuralSequence


def edit_distance_plain(x: Sequence[int], y: Sequence[int]) -> int:
    """
    Unit-cost Levenshtein distance between two integer sequences.
    """
    n, m = len(x), len(y)
    prev = list(range(m + 1))
    for i in range(1, n + 1):
        cur = [i] + [0] * m
        for j in range(1, m + 1):
            cur[j] = min(
                prev[j] + 1,
                cur[j - 1] + 1,
                prev[j - 1] + (0 if x[i - 1] == y[j - 1] else 1),
            )
        prev = cur
    return prev[m]


def check_unconstrained_vs_plain(x: Sequence[int], y: Sequence[int]) -> Tuple[int, int]:
    """
    Compare the unconstrained aligner with edit_distance_plain.

    Returns
    -------
    aligner_distance, plain_distance : int
        The caller can assert they are equal.
    """
    res = align_structural(x, y, constraints=False)
    return res.distance, edit_distance_plain(list(x), list(y))


# ---------------------------------------------------------------------------
# Alignment validity helper
# ---------------------------------------------------------------------------

def check_alignment_validity(result: AlignmentResult) -> Tuple[bool, str]:
    """
    Check that an AlignmentResult is internally consistent.

    Verifies that the alignment:
    - Has length between max(n, m) and n + m
    - Rebuilds x from its a-sides and y from its b-sides
    - Has operation costs summing to the reported distance

    Returns
    -------
    valid : bool
        True if every check passes.
    message : str
        Description of what was checked or what failed.
    """
    n, m = len(result.x), len(result.y)
    length = len(result.alignment)
    if not max(n, m) <= length <= n + m:
        return False, f"Alignment length {length} outside [{max(n, m)}, {n + m}]"

    row_x, row_y = result.aligned_rows()
    x_recovered = [a for a in row_x if a is not None]
    y_recovered = [b for b in row_y if b is not None]
    if x_recovered != result.x.to_list():
        return False, f"x mismatch: {x_recovered} != {result.x.to_list()}"
    if y_recovered != result.y.to_list():
        return False, f"y mismatch: {y_recovered} != {result.y.to_list()}"

    computed = sum(op.cost for op in result.alignment)
    if computed != result.distance:
        return False, f"Cost mismatch: computed {computed}, reported {result.distance}"

    return True, f"Valid alignment of length {length}"


# ---------------------------------------------------------------------------
# Random sequence generation and mutation
# ---------------------------------------------------------------------------

def random_structural_sequence(length: int, rng: np.random.Generator) -> StructuralSequence:
    """
    Random well-formed structural sequence: the code at 1-based position
    k is drawn uniformly from 1..2k-1.
    """
    codes = [int(rng.integers(1, 2 * k)) for k in range(1, length + 1)]
    return StructuralSequence(codes)


def mutate_structural_sequence(
    seq: StructuralSequence,
    rng: np.random.Generator,
    sub_rate: float = 0.1,
    indel_rate: float = 0.05,
) -> StructuralSequence:
    """
    Apply random substitutions, deletions and insertions, then clamp every
    code into its admissible range so the result stays well-formed.

    Parameters
    ----------
    seq : StructuralSequence
        Input sequence.
    rng : numpy random generator
    sub_rate : float
        Per-code substitution probability (default 0.1).
    indel_rate : float
        Per-code insertion/deletion probability (default 0.05).
    """
    result: List[int] = []
    for code in seq:
        if rng.random() < indel_rate:
            continue
        if rng.random() < sub_rate:
            code = int(rng.integers(1, 2 * (len(result) + 1)))
        result.append(code)
        if rng.random() < indel_rate:
            result.append(int(rng.integers(1, 2 * (len(result) + 1))))

    clamped = [min(code, 2 * k - 1) for k, code in enumerate(result, start=1)]
    return StructuralSequence(clamped)


# ---------------------------------------------------------------------------
# Benchmarking
# ---------------------------------------------------------------------------

def benchmark_python_vs_cython(
    n: int,
    m: int,
    rng: np.random.Generator,
    constraints: bool = True,
    n_samples: int = 3,
    cython_multiplier: int = 100,
    x: Optional[StructuralSequence] = None,
    y: Optional[StructuralSequence] = None,
) -> Tuple[float, float]:
    """
    Benchmark Python vs Cython DP using timeit for accurate averaging.

    Parameters
    ----------
    n, m : int
        Sequence lengths (ignored for a sequence passed explicitly).
    rng : np.random.Generator
        Random number generator.
    constraints : bool
        Constraints flag for both runs.
    n_samples : int
        Number of timing samples for Python.
    cython_multiplier : int
        Run Cython this many more times than Python for accurate sub-ms timing.

    Returns
    -------
    (py_avg, cy_avg) : Tuple[float, float]
        Average time per call in seconds for Python and Cython implementations.
    """
    if x is None:
        x = random_structural_sequence(n, rng)
    if y is None:
        y = random_structural_sequence(m, rng)

    cfg = AlignerInput(x=x, y=y, constraints=constraints)

    # Warm-up calls to avoid one-time overhead in timing
    run_aligner_dp(cfg)
    run_aligner_dp_fast(cfg)

    timer_py = timeit.Timer(lambda: run_aligner_dp(cfg))
    py_avg = timer_py.timeit(number=n_samples) / n_samples

    timer_cy = timeit.Timer(lambda: run_aligner_dp_fast(cfg))
    cy_avg = timer_cy.timeit(number=n_samples * cython_multiplier) / (n_samples * cython_multiplier)

    return py_avg, cy_avg
