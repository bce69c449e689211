"""
sernalign: edit alignment of RNA structural sequences.
"""

# =============================================================================
# CORE ALIGNMENT
# =============================================================================

from .aligner import (
    align_structural,
    StructuralSequenceAligner,
)

from .dp_core import (
    AlignmentResult,
    AlignerInput,
    AlignerData,
    UnreachableAlignmentError,
    is_admissible,
    run_aligner_dp,
)

from .fast import run_aligner_dp_fast, CYTHON_AVAILABLE

from .edit_ops import EditOperation

from .sequence import StructuralSequence, as_structural_sequence


# =============================================================================
# VERIFICATION AND RENDERING
# =============================================================================

from .verify import check_alignment, constraint_steps, first_violation

from .render import (
    render_matrix,
    render_alignment,
    render_execution_trace,
    render_constraint_derivation,
)


# =============================================================================
# BATCH COMPARISON
# =============================================================================

from .batch import PairComparison, compare_all, pairwise_distances


# =============================================================================
# VALIDATION AND TESTING
# =============================================================================

from .validation import (
    edit_distance_plain,
    check_unconstrained_vs_plain,
    check_alignment_validity,
    random_structural_sequence,
)


# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install sernalign[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "sernalign[plot]"'
    )

try:
    from .plot import plot_cost_matrix
    PLOT_AVAILABLE = True
except ImportError:
    # Raises ImportError if accessed without matplotlib/seaborn
    def plot_cost_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_cost_matrix")
    PLOT_AVAILABLE = False


__all__ = [
    # Core alignment
    "align_structural",
    "StructuralSequenceAligner",
    "AlignmentResult",
    "AlignerInput",
    "AlignerData",
    "UnreachableAlignmentError",
    "EditOperation",
    "StructuralSequence",
    "as_structural_sequence",
    "is_admissible",
    "run_aligner_dp",
    "run_aligner_dp_fast",
    "CYTHON_AVAILABLE",
    # Verification and rendering
    "check_alignment",
    "constraint_steps",
    "first_violation",
    "render_matrix",
    "render_alignment",
    "render_execution_trace",
    "render_constraint_derivation",
    # Batch
    "PairComparison",
    "compare_all",
    "pairwise_distances",
    # Validation
    "edit_distance_plain",
    "check_unconstrained_vs_plain",
    "check_alignment_validity",
    "random_structural_sequence",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_cost_matrix",
]
