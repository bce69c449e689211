"""
test_plot.py — Smoke tests for the cost matrix heatmap
"""

import pytest

matplotlib = pytest.importorskip("matplotlib")
pytest.importorskip("seaborn")
matplotlib.use("Agg")

from sernalign.aligner import align_structural  # noqa: E402
from sernalign.plot import plot_cost_matrix  # noqa: E402


def test_plot_returns_figure():
    import matplotlib.pyplot as plt

    res = align_structural([3, 1], [3, 1], return_data=True)
    fig = plot_cost_matrix(res)
    ax = fig.axes[0]
    assert "distance = 3" in ax.get_title()
    # one marker per step plus the origin
    assert len(ax.lines) == len(res.alignment) + 1
    plt.close(fig)


def test_plot_requires_data():
    with pytest.raises(ValueError):
        plot_cost_matrix(align_structural([1], [1]))
