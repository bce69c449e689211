"""
DP matrix visualization for sernalign.

Draws the cost matrix as a heatmap with the traceback path overlaid.
Requires the plot extra: pip install "sernalign[plot]".
"""

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from .default import UNREACHABLE

# Marker colors per step kind
STEP_COLORS = dict(
    match="#16946C",      # teal green
    mismatch="#D45500",   # orange-brown
    insertion="#396CB4",  # indigo-blue
    deletion="#E5A000",   # golden orange
)


def plot_cost_matrix(
    result,  # AlignmentResult
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[int, int] = (7, 6),
    colormap: str = "rocket_r",
    annotate: bool = True,
    show_path: bool = True,
    marker_size: int = 14,
    tick_fontsize: float = 10.0,
) -> plt.Figure:
    """
    Plot the cost matrix of an alignment as a heatmap.

    Unreachable cells are drawn grey.  The traceback path is drawn as
    square markers colored by the kind of step that entered each cell.

    Parameters
    ----------
    result : AlignmentResult
        Result computed with return_data=True.
    ax : matplotlib Axes, optional
        Axes to draw on; a new figure is created if omitted.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    if result.data is None:
        raise ValueError(
            "plot_cost_matrix requires result.data (AlignerData). "
            "Run the aligner with return_data=True."
        )

    cost = np.asarray(result.data.cost, dtype=float)
    cost[cost >= UNREACHABLE] = np.nan

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    cmap = sns.color_palette(colormap, as_cmap=True)
    cmap.set_bad(color="grey")

    xticklabels = [""] + [str(c) for c in result.y]
    yticklabels = [""] + [str(c) for c in result.x]

    sns.heatmap(
        cost,
        ax=ax,
        cmap=cmap,
        square=True,
        cbar=False,
        annot=annotate,
        fmt=".0f",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    title = "Cost matrix (constrained)" if result.constraints else "Cost matrix"
    ax.set_title(f"{title}, distance = {result.distance}")
    ax.set_xlabel("y (columns)")
    ax.set_ylabel("x (rows)")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.xaxis.set_label_position("top")
    for tick in ax.get_xticklabels() + ax.get_yticklabels():
        tick.set_rotation(0)
        tick.set_fontsize(tick_fontsize)

    if show_path:
        for op, (i, j) in zip(result.alignment, result.path[1:]):
            if op.is_insertion:
                kind = "insertion"
            elif op.is_deletion:
                kind = "deletion"
            elif op.is_match:
                kind = "match"
            else:
                kind = "mismatch"
            ax.plot(
                j + 0.5, i + 0.5,
                marker="s",
                markersize=marker_size,
                markerfacecolor="none",
                markeredgecolor=STEP_COLORS[kind],
                markeredgewidth=2,
            )
        ax.plot(0.5, 0.5, marker="s", markersize=marker_size,
                markerfacecolor="none", markeredgecolor="black", markeredgewidth=2)

    return fig
