"""
default.py — Default parameters for sernalign

Provides the constraints flag, the gap placeholder, the "unreachable"
cost sentinel and the traceback direction codes used throughout the
solver, the renderers and the tests.
"""

import numpy as np

# Structural admissibility constraints are on unless asked otherwise
DEFAULT_CONSTRAINTS = True

# Placeholder for the absent side of an edit operation
GAP_SYMBOL = "-"

# Out-of-band cost for inadmissible moves; additions saturate here
COST_DTYPE = np.int64
UNREACHABLE = int(np.iinfo(COST_DTYPE).max)

## Traceback directions
STOP = -1
DIAGONAL = 0  # match / mismatch
UP = 1        # deletion
LEFT = 2      # insertion


def align_params(*, constraints: bool = DEFAULT_CONSTRAINTS) -> dict:
    """
    Bundle default alignment parameters into a dict for easy unpacking.

    Parameters:
        constraints (bool): If True, enforce structural admissibility in the DP.

    Usage:
        result = align_structural(x, y, **align_params(constraints=False))"""
    return {
        "constraints": constraints,
    }
