"""
fast.py — Cython-backed structural alignment DP wrapper

This module provides a drop-in replacement for the Python DP core:
    run_aligner_dp_fast(config, return_data=False)

It:
  * converts x and y to contiguous int64 arrays,
  * calls sernalign_dp_core (Cython) to fill cost and trace,
  * wraps the resulting arrays into AlignerData,
  * reuses finish_alignment for the sentinel check and the traceback,
  * returns an AlignmentResult with the same shape as the Python path.
"""

import logging

from .dp_core import AlignerInput, AlignerData, AlignmentResult, finish_alignment

try:
    from ._cython.sernalign_dp import sernalign_dp_core
    CYTHON_AVAILABLE = True
except ImportError:
    sernalign_dp_core = None  # Placeholder to avoid NameError
    CYTHON_AVAILABLE = False

logger = logging.getLogger(__name__)


def _cython_not_available_error():
    """Raise a helpful error if Cython extension is not available."""
    raise ImportError(
        "The Cython extension 'sernalign._cython.sernalign_dp' is not available.\n"
        "This usually means the extension failed to compile during installation.\n\n"
        "To fix this:\n"
        "  1) Ensure a C compiler is installed (gcc, MSVC, etc.).\n"
        "  2) Reinstall sernalign with pip install -e . --force-reinstall\n\n"
        "Alternatively, use the pure-Python DP core via sernalign.dp_core import run_aligner_dp"
    )


def run_aligner_dp_fast(
    config: AlignerInput,
    return_data: bool = False,
) -> AlignmentResult:
    """
    Fast structural alignment DP using the Cython core.

    Parameters
    ----------
    config : AlignerInput
        Sequences and the constraints flag.
    return_data : bool, default False
        If True, attach the full AlignerData object in the result.

    Returns
    -------
    AlignmentResult
        Identical to what run_aligner_dp returns for the same input.
    """
    if not CYTHON_AVAILABLE:
        _cython_not_available_error()

    logger.debug(
        "Solving %dx%d alignment with Cython core (constraints=%s)",
        len(config.x), len(config.y), config.constraints,
    )
    cost, trace = sernalign_dp_core(
        config.x.to_array(),
        config.y.to_array(),
        config.constraints,
    )

    data = AlignerData(cost=cost, trace=trace)
    return finish_alignment(config, data, return_data=return_data)
