#!/usr/bin/env python
"""
Time the pure-Python DP against the Cython DP on random well-formed
structural sequences of increasing length.

Usage:
    python scripts/benchmark_cython.py --lengths 50 100 200 --unconstrained
"""

import argparse

import numpy as np

from sernalign.fast import CYTHON_AVAILABLE
from sernalign.validation import benchmark_python_vs_cython


# =============================================================================
# CLI
# =============================================================================

def main():
    parser = argparse.ArgumentParser(description='Benchmark Python vs Cython structural alignment')
    parser.add_argument('--lengths', type=int, nargs='+', default=[50, 100, 200],
                        help='Sequence lengths to time (both sequences get the same length)')
    parser.add_argument('--samples', type=int, default=3,
                        help='Timing samples for the Python core (default: 3)')
    parser.add_argument('--unconstrained', action='store_true',
                        help='Run the DP without admissibility constraints')
    parser.add_argument('--seed', type=int, default=888)
    args = parser.parse_args()

    if not CYTHON_AVAILABLE:
        raise SystemExit("Cython extension not built; reinstall with a C compiler available.")

    rng = np.random.default_rng(args.seed)
    print(f"{'length':>8} {'python [ms]':>12} {'cython [ms]':>12} {'speedup':>8}")
    for length in args.lengths:
        py_avg, cy_avg = benchmark_python_vs_cython(
            length, length, rng,
            constraints=not args.unconstrained,
            n_samples=args.samples,
        )
        print(f"{length:>8} {py_avg * 1e3:>12.3f} {cy_avg * 1e3:>12.3f} {py_avg / cy_avg:>8.1f}")


if __name__ == '__main__':
    main()
