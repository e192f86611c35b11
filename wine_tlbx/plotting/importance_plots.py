"""Feature importance visualization functions."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from wine_tlbx.analysis.importance import ScoreEntry
from wine_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


logger = logging.getLogger(__name__)


def _y_upper_bound(scores: Sequence[float], headroom: float = 1.1) -> float:
    """Upper y limit: ``headroom * max(score)`` over finite scores, 1.0 if none is positive."""
    finite = [s for s in scores if math.isfinite(s)]
    top = max(finite, default=0.0)
    return headroom * top if top > 0 else 1.0


def plot_feature_importance(
    scores: Sequence[ScoreEntry],
    figsize: tuple[float, float] = (8, 6),
    dpi: int = 100,
    color: str = "tab:red",
    plot_cfg: PlottingConfig = DEFAULT_PLOT_CFG,
    ax: plt.Axes | None = None,
) -> Figure:
    """Plot one bar per score entry, in the order given.

    Bars are labelled with the entry names; the y axis runs from 0 to 1.1 times the
    largest score. Non-finite scores cannot be drawn to scale: they are left out of the
    axis bound, drawn at height 0 and annotated with ``inf``/``nan``.

    Args:
        scores: Ordered score entries (typically ``ScoreReporter.report`` output).
        figsize: Figure size in inches; with the default ``dpi`` this is an 800x600 canvas.
        dpi: Figure resolution.
        color: Bar color.
        plot_cfg: Style applied while drawing.
        ax: Optional axes to draw into.

    Returns:
        Matplotlib Figure object.
    """
    names = [entry.name for entry in scores]
    values = [entry.score for entry in scores]
    heights = [v if math.isfinite(v) else 0.0 for v in values]

    with plot_cfg.apply():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
        else:
            fig = ax.figure

        positions = list(range(len(names)))
        ax.bar(positions, heights, width=0.8, color=color)
        for pos, value in zip(positions, values, strict=True):
            if not math.isfinite(value):
                ax.annotate(repr(value), xy=(pos, 0), ha="center", va="bottom", fontsize="small")

        ax.set_xticks(positions)
        ax.set_xticklabels(names, rotation=45, ha="right", rotation_mode="anchor")
        ax.set_xlim(-0.6, len(names) - 0.4)
        ax.set_ylim(0, _y_upper_bound(values))
        ax.set_xlabel("Features")
        ax.set_ylabel("Importance Score")
        ax.set_title("Feature Importance")
        fig.tight_layout()

    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int | None = None) -> Path:
    """Write ``fig`` to ``path`` (format from the suffix), creating parent directories.

    Raises:
        OSError: If the image cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi if dpi is not None else "figure")
    logger.info("Saved feature importance chart to %s", path)
    return path
