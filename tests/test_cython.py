"""
test_cython.py — Tests for the Cython-accelerated DP

Verifies that run_aligner_dp_fast (Cython) produces identical results to
run_aligner_dp (Python), matrices included.  Skipped when the extension
was not built.
"""

import numpy as np
import pytest

from sernalign.dp_core import AlignerInput, UnreachableAlignmentError, run_aligner_dp
from sernalign.fast import CYTHON_AVAILABLE, run_aligner_dp_fast
from sernalign.sequence import StructuralSequence

pytestmark = pytest.mark.skipif(not CYTHON_AVAILABLE, reason="Cython extension not built")


class TestCythonVsPython:
    """Test that Cython implementation matches Python exactly."""

    @pytest.mark.parametrize("constraints", [True, False])
    def test_random_well_formed(self, constraints, rng, structural_factory):
        for _ in range(10):
            x = structural_factory(int(rng.integers(0, 30)), rng)
            y = structural_factory(int(rng.integers(0, 30)), rng)
            cfg = AlignerInput(x=x, y=y, constraints=constraints)

            py = run_aligner_dp(cfg, return_data=True)
            cy = run_aligner_dp_fast(cfg, return_data=True)

            assert py.distance == cy.distance
            assert py.alignment == cy.alignment
            assert py.path == cy.path
            assert np.array_equal(py.data.cost, cy.data.cost)
            assert np.array_equal(py.data.trace, cy.data.trace)

    def test_arbitrary_codes_with_unreachable_cells(self, rng, codes_factory):
        for _ in range(10):
            x = codes_factory(12, rng, max_code=9)
            y = codes_factory(12, rng, max_code=9)
            cfg = AlignerInput(x=x, y=y, constraints=True)
            try:
                py = run_aligner_dp(cfg, return_data=True)
            except UnreachableAlignmentError:
                with pytest.raises(UnreachableAlignmentError):
                    run_aligner_dp_fast(cfg)
                continue
            cy = run_aligner_dp_fast(cfg, return_data=True)
            assert np.array_equal(py.data.cost, cy.data.cost)
            assert py.alignment == cy.alignment

    def test_empty(self):
        cfg = AlignerInput(x=StructuralSequence([]), y=StructuralSequence([1, 2]))
        cy = run_aligner_dp_fast(cfg)
        assert cy.distance == 2
