import logging
from typing import Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from noisy_clusters.file_utils import atomic_output
from noisy_clusters.config import (
    AXIS_BOUNDS,
    BACKGROUND_COLOR,
    CANVAS_SIZE,
    CLUSTER_COLORS,
    FALLBACK_COLOR,
    GRID_COLOR,
    TEXT_COLOR,
)
from noisy_clusters.dataset import LabeledSample
from noisy_clusters.errors import RenderError

logger = logging.getLogger(__name__)


def color_for_label(label: int, palette: Sequence[str], fallback: str) -> str:
    """palette[label] if the palette has an entry for it, else `fallback`."""
    if 0 <= label < len(palette):
        return palette[label]
    return fallback


def _style_axes(ax, xlim, ylim, fontsize):
    ax.set_facecolor(BACKGROUND_COLOR)
    ax.set_xlim(*xlim)
    ax.set_ylim(*ylim)
    for spine in ax.spines.values():
        spine.set_color(TEXT_COLOR)
    ax.tick_params(colors=TEXT_COLOR, labelsize=fontsize)
    ax.grid(True, color=GRID_COLOR, linewidth=0.8)
    ax.set_axisbelow(True)


def plot_clusters(
        labeled: Sequence[LabeledSample],
        *,
        savepath: str = None,
        palette: Sequence[str] = CLUSTER_COLORS,
        fallback_color: str = FALLBACK_COLOR,
        size_px: Tuple[int, int] = CANVAS_SIZE,
        dpi: int = 100,
        xlim: Tuple[float, float] = AXIS_BOUNDS,
        ylim: Tuple[float, float] = AXIS_BOUNDS,
        title: str = "Noisy Clusters",
        point_size: float = 33,
        fontsize: int = 16
) -> plt.Figure:
    """
    Scatter-plot the noisy coordinates colored by cluster label.

    Args:
      labeled        : rows with a cluster label
      savepath       : if given, the image is written there (replacing any
                       existing file)
      palette        : one color per expected label
      fallback_color : used for labels the palette does not cover
      size_px        : canvas size in pixels (width, height)
      dpi            : resolution used to convert size_px to inches
      xlim, ylim     : fixed axis bounds, independent of the data
      title          : figure title
      point_size     : marker area in points^2
      fontsize       : tick label size; the title is drawn larger

    Returns:
      fig : the matplotlib Figure instance
    """
    width, height = size_px
    try:
        fig, ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
    except (ValueError, RuntimeError) as err:
        raise RenderError(f"Could not create a {width}x{height} canvas: {err}") from err

    fig.patch.set_facecolor(BACKGROUND_COLOR)
    _style_axes(ax, xlim, ylim, fontsize)
    ax.set_title(title, color=TEXT_COLOR, fontsize=fontsize * 1.75)

    if labeled:
        xy = np.array([[s.noisy_x, s.noisy_y] for s in labeled], dtype=float)
        colors = [color_for_label(s.cluster, palette, fallback_color) for s in labeled]
        ax.scatter(xy[:, 0], xy[:, 1], c=colors, s=point_size, linewidths=0)

    if savepath:
        try:
            with atomic_output(savepath) as tmp_path:
                fig.savefig(tmp_path, dpi=dpi, facecolor=fig.get_facecolor())
        except (OSError, ValueError) as err:
            plt.close(fig)
            logger.error("Failed to save plot to %s: %s", savepath, err)
            raise RenderError(f"Could not save plot to {savepath}: {err}") from err
        logger.info("Saved scatter plot of %d points to %s", len(labeled), savepath)

    return fig
