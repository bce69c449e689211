"""
batch.py — all-against-all comparison of a collection of structures

Every pair (i, j) with i < j is aligned independently, each structure
against all the subsequent ones.  Pairs share no state,
so with n_jobs > 1 they are spread over a process pool and each worker
owns its own DP matrices.  Reading structures and writing reports stay
with the caller.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .aligner import align_structural
from .default import DEFAULT_CONSTRAINTS
from .sequence import SequenceLike, StructuralSequence, as_structural_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairComparison:
    """
    Outcome of one pairwise alignment.

    Attributes
    ----------
    first, second : int
        Indices of the two structures in the input collection.
    length_first, length_second : int
        Their lengths.
    max_length : int
        max(length_first, length_second), a handy normalizer.
    distance : int
        Alignment distance.
    elapsed_ns : int
        Wall-clock time spent on the alignment.
    """
    first: int
    second: int
    length_first: int
    length_second: int
    max_length: int
    distance: int
    elapsed_ns: int

    @property
    def normalized_distance(self) -> float:
        """distance / max_length, 0.0 for two empty structures."""
        return self.distance / self.max_length if self.max_length else 0.0


def _compare_pair(
    task: Tuple[int, int, StructuralSequence, StructuralSequence, bool],
) -> PairComparison:
    first, second, x, y, constraints = task
    start = time.perf_counter_ns()
    result = align_structural(x, y, constraints=constraints)
    elapsed = time.perf_counter_ns() - start
    return PairComparison(
        first=first,
        second=second,
        length_first=len(x),
        length_second=len(y),
        max_length=max(len(x), len(y)),
        distance=result.distance,
        elapsed_ns=elapsed,
    )


def compare_all(
    sequences: Sequence[SequenceLike],
    constraints: bool = DEFAULT_CONSTRAINTS,
    n_jobs: int = 1,
) -> List[PairComparison]:
    """
    Align every pair i < j of the collection.

    Parameters
    ----------
    sequences : sequence of StructuralSequence or sequence of int
        The structures to compare.
    constraints : bool, default True
        Passed to every alignment.
    n_jobs : int, default 1
        Number of worker processes.  1 runs in the calling process.

    Returns
    -------
    list of PairComparison
        Ordered by (first, second).
    """
    if n_jobs < 1:
        raise ValueError(f"n_jobs must be >= 1, got {n_jobs}")

    seqs = [as_structural_sequence(s, f"sequences[{k}]") for k, s in enumerate(sequences)]
    tasks = [
        (i, j, seqs[i], seqs[j], bool(constraints))
        for i in range(len(seqs))
        for j in range(i + 1, len(seqs))
    ]
    logger.info("Comparing %d structures: %d pairs, %d job(s)", len(seqs), len(tasks), n_jobs)

    if n_jobs == 1 or len(tasks) < 2:
        return [_compare_pair(task) for task in tasks]

    with ProcessPoolExecutor(max_workers=n_jobs) as pool:
        # map preserves task order
        return list(pool.map(_compare_pair, tasks, chunksize=max(1, len(tasks) // (4 * n_jobs))))


def pairwise_distances(
    sequences: Sequence[SequenceLike],
    constraints: bool = DEFAULT_CONSTRAINTS,
    n_jobs: int = 1,
) -> NDArray[np.int64]:
    """
    Symmetric (k, k) distance matrix with a zero diagonal.
    """
    k = len(sequences)
    dist = np.zeros((k, k), dtype=np.int64)
    for cmp in compare_all(sequences, constraints=constraints, n_jobs=n_jobs):
        dist[cmp.first, cmp.second] = cmp.distance
        dist[cmp.second, cmp.first] = cmp.distance
    return dist
