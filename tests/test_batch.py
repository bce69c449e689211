"""
test_batch.py — Tests for all-against-all comparison
"""

import numpy as np
import pytest

from sernalign.aligner import align_structural
from sernalign.batch import compare_all, pairwise_distances


@pytest.fixture
def collection(rng, structural_factory):
    return [structural_factory(int(rng.integers(0, 12)), rng) for _ in range(5)]


class TestCompareAll:

    def test_pair_order(self, collection):
        pairs = [(c.first, c.second) for c in compare_all(collection)]
        assert pairs == [(i, j) for i in range(5) for j in range(i + 1, 5)]

    def test_records(self, collection):
        for cmp in compare_all(collection, constraints=False):
            x, y = collection[cmp.first], collection[cmp.second]
            assert cmp.length_first == len(x)
            assert cmp.length_second == len(y)
            assert cmp.max_length == max(len(x), len(y))
            assert cmp.distance == align_structural(x, y, constraints=False).distance
            assert cmp.elapsed_ns >= 0

    def test_normalized_distance(self):
        [cmp] = compare_all([[1, 1], [1, 1, 3, 1]])
        assert cmp.distance == 2
        assert cmp.normalized_distance == pytest.approx(0.5)
        [empty] = compare_all([[], []])
        assert empty.normalized_distance == 0.0

    def test_single_and_empty_collection(self):
        assert compare_all([]) == []
        assert compare_all([[1]]) == []

    def test_bad_jobs(self, collection):
        with pytest.raises(ValueError):
            compare_all(collection, n_jobs=0)

    def test_none_in_collection(self):
        with pytest.raises(ValueError):
            compare_all([[1], None])


class TestPairwiseDistances:

    def test_symmetric_zero_diagonal(self, collection):
        dist = pairwise_distances(collection)
        assert dist.shape == (5, 5)
        assert np.array_equal(dist, dist.T)
        assert np.all(np.diag(dist) == 0)

    def test_process_pool_matches_serial(self, collection):
        serial = pairwise_distances(collection, n_jobs=1)
        pooled = pairwise_distances(collection, n_jobs=2)
        assert np.array_equal(serial, pooled)
