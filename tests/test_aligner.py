"""
test_aligner.py — Tests for the alignment engine and its properties

Covers construction and argument validation, identity, symmetry, the
unconstrained triangle inequality, empty inputs, alignment length bounds
and agreement with an independent plain edit distance.
"""

import pytest

from sernalign import default
from sernalign.aligner import StructuralSequenceAligner, align_structural
from sernalign.edit_ops import EditOperation
from sernalign.sequence import StructuralSequence
from sernalign.validation import check_unconstrained_vs_plain, check_alignment_validity


class TestConstruction:

    @pytest.mark.parametrize("x,y", [(None, [1]), ([1], None), (None, None)])
    def test_none_rejected(self, x, y):
        with pytest.raises(ValueError):
            StructuralSequenceAligner(x, y)

    def test_non_positive_code_rejected(self):
        with pytest.raises(ValueError):
            align_structural([1, 0], [1])

    def test_accepts_plain_lists_and_text(self):
        a = StructuralSequenceAligner([1, 1, 3], "1, 2, 3")
        assert a.distance() == 1
        assert a.result.y == StructuralSequence([1, 2, 3])

    def test_default_is_constrained(self):
        assert StructuralSequenceAligner([3], [1]).distance() == 2
        assert StructuralSequenceAligner([3], [1], constraints=False).distance() == 1
        assert align_structural([3], [1], **default.align_params()).distance == 2
        assert align_structural([3], [1], **default.align_params(constraints=False)).distance == 1

    def test_keeps_matrix(self):
        a = StructuralSequenceAligner([1], [1])
        assert a.result.data is not None
        assert a.result.data.cost.shape == (2, 2)

    def test_repr(self):
        assert "distance=2" in repr(StructuralSequenceAligner([3], [1]))


class TestProperties:

    @pytest.mark.parametrize("constraints", [True, False])
    def test_identity(self, constraints, rng, structural_factory):
        for length in [0, 1, 5, 20]:
            s = structural_factory(length, rng)
            res = align_structural(s, s, constraints=constraints)
            assert res.distance == 0
            assert all(op.is_match for op in res.alignment)
            assert len(res.alignment) == length

    @pytest.mark.parametrize("constraints", [True, False])
    def test_symmetry(self, constraints, rng, structural_factory):
        for _ in range(20):
            x = structural_factory(int(rng.integers(0, 15)), rng)
            y = structural_factory(int(rng.integers(0, 15)), rng)
            d_xy = align_structural(x, y, constraints=constraints).distance
            d_yx = align_structural(y, x, constraints=constraints).distance
            assert d_xy == d_yx

    def test_triangle_inequality_unconstrained(self, rng, codes_factory):
        for _ in range(20):
            x, y, z = (codes_factory(int(rng.integers(0, 10)), rng) for _ in range(3))
            d = lambda a, b: align_structural(a, b, constraints=False).distance
            assert d(x, y) <= d(x, z) + d(z, y)

    @pytest.mark.parametrize("constraints", [True, False])
    def test_empty_target_is_all_deletions(self, constraints):
        x = [1, 1, 3, 2]
        res = align_structural(x, [], constraints=constraints)
        assert res.distance == 4
        assert res.alignment == tuple(EditOperation(a, None) for a in x)

    @pytest.mark.parametrize("constraints", [True, False])
    def test_empty_source_is_all_insertions(self, constraints):
        y = [1, 2, 5]
        res = align_structural([], y, constraints=constraints)
        assert res.distance == 3
        assert res.alignment == tuple(EditOperation(None, b) for b in y)

    def test_both_empty(self):
        res = align_structural([], [])
        assert res.distance == 0
        assert res.alignment == ()
        assert res.path == ((0, 0),)

    @pytest.mark.parametrize("constraints", [True, False])
    def test_alignment_length_bounds(self, constraints, rng, structural_factory):
        for _ in range(20):
            x = structural_factory(int(rng.integers(0, 15)), rng)
            y = structural_factory(int(rng.integers(0, 15)), rng)
            res = align_structural(x, y, constraints=constraints)
            assert max(len(x), len(y)) <= len(res.alignment) <= len(x) + len(y)

    @pytest.mark.parametrize("constraints", [True, False])
    def test_random_alignment_validity(self, constraints, rng, structural_factory):
        for _ in range(20):
            x = structural_factory(int(rng.integers(0, 20)), rng)
            y = structural_factory(int(rng.integers(0, 20)), rng)
            valid, msg = check_alignment_validity(align_structural(x, y, constraints=constraints))
            assert valid, msg

    def test_constrained_never_cheaper(self, rng, structural_factory):
        for _ in range(20):
            x = structural_factory(12, rng)
            y = structural_factory(9, rng)
            assert (align_structural(x, y, constraints=True).distance
                    >= align_structural(x, y, constraints=False).distance)


class TestUnconstrainedVsPlain:
    """The unconstrained aligner is the classical unit-cost edit distance."""

    FIXED_CASES = [
        ([1], [1, 3], "single insertion"),
        ([3], [1], "single mismatch"),
        ([1, 1, 3], [1, 2, 3], "one substitution"),
        ([1, 2, 3, 4], [4, 3, 2, 1], "reversed"),
        ([], [1, 2], "empty source"),
        ([5, 5, 5], [], "empty target"),
    ]

    @pytest.mark.parametrize("x,y,desc", FIXED_CASES)
    def test_fixed_cases(self, x, y, desc):
        got, plain = check_unconstrained_vs_plain(x, y)
        assert got == plain, f"Mismatch on '{desc}': aligner={got}, plain={plain}"

    def test_random_sequences(self, rng_alt, codes_factory):
        for n, m in [(5, 5), (10, 20), (30, 15), (1, 25)]:
            x = codes_factory(n, rng_alt)
            y = codes_factory(m, rng_alt)
            got, plain = check_unconstrained_vs_plain(x, y)
            assert got == plain, f"Mismatch on random n={n}, m={m}"
