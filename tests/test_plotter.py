# test_plotter.py

import os
import stat

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.colors import to_rgba

from noisy_clusters.config import CLUSTER_COLORS, FALLBACK_COLOR
from noisy_clusters.dataset import LabeledSample
from noisy_clusters.errors import RenderError
from noisy_clusters.plotter import color_for_label, plot_clusters


@pytest.fixture
def labeled():
    return (
        LabeledSample(2.0, 2.0, 2.02, 1.97, 0),
        LabeledSample(7.0, 7.0, 7.01, 6.99, 1),
        LabeledSample(2.0, 7.0, 1.98, 7.03, 2),
        # outside the palette
        LabeledSample(4.0, 4.0, 4.00, 4.00, 7),
        # outside the axis bounds
        LabeledSample(20.0, -3.0, 20.0, -3.0, 0),
    )


def test_color_for_label():
    palette = ["red", "green"]
    assert color_for_label(0, palette, "white") == "red"
    assert color_for_label(1, palette, "white") == "green"
    assert color_for_label(2, palette, "white") == "white"
    assert color_for_label(-1, palette, "white") == "white"


def test_plot_clusters_one_marker_per_row(labeled):
    fig = plot_clusters(labeled)
    ax = fig.axes[0]

    assert len(ax.collections) == 1
    points = ax.collections[0]
    assert points.get_offsets().shape == (len(labeled), 2)

    faces = points.get_facecolors()
    expected = [
        CLUSTER_COLORS[0], CLUSTER_COLORS[1], CLUSTER_COLORS[2],
        FALLBACK_COLOR, CLUSTER_COLORS[0],
    ]
    for face, col in zip(faces, expected):
        assert np.allclose(face, to_rgba(col))

    plt.close(fig)


def test_plot_clusters_fixed_bounds_and_size(labeled):
    fig = plot_clusters(labeled)
    ax = fig.axes[0]

    # bounds do not follow the data
    assert ax.get_xlim() == pytest.approx((0.5, 8.5))
    assert ax.get_ylim() == pytest.approx((0.5, 8.5))

    w, h = fig.get_size_inches() * fig.dpi
    assert (round(w), round(h)) == (1400, 800)
    assert ax.get_title() == "Noisy Clusters"

    plt.close(fig)


def test_plot_clusters_saves_png(tmp_path, labeled):
    out = tmp_path / "clusters.png"
    out.write_bytes(b"stale")

    fig = plot_clusters(labeled, savepath=str(out))
    plt.close(fig)

    img = mpimg.imread(str(out))
    assert img.shape[:2] == (800, 1400)
    # background fill in the top-left corner
    assert np.allclose(img[0, 0, :3], to_rgba("#1e1e2e")[:3], atol=0.01)
    # no temporary files left behind
    assert [p.name for p in tmp_path.iterdir()] == ["clusters.png"]


def test_plot_clusters_custom_canvas(tmp_path, labeled):
    out = tmp_path / "small.png"
    fig = plot_clusters(labeled, savepath=str(out), size_px=(400, 300), xlim=(0, 25), ylim=(-5, 10))
    assert fig.axes[0].get_xlim() == pytest.approx((0, 25))
    plt.close(fig)
    assert mpimg.imread(str(out)).shape[:2] == (300, 400)


def test_plot_clusters_empty_dataset(tmp_path):
    out = tmp_path / "empty.png"
    fig = plot_clusters((), savepath=str(out))
    assert len(fig.axes[0].collections) == 0
    plt.close(fig)
    assert out.exists()


def test_plot_clusters_unwritable_destination(tmp_path, labeled):
    out = tmp_path / "missing" / "clusters.png"
    with pytest.raises(RenderError):
        plot_clusters(labeled, savepath=str(out))
    assert not out.exists()


def test_saved_png_mode_matches_plain_write(tmp_path, labeled):
    old = os.umask(0o022)
    try:
        out = tmp_path / "clusters.png"
        plain = tmp_path / "plain.png"
        fig = plot_clusters(labeled, savepath=str(out))
        plt.close(fig)
        plain.write_bytes(b"png")
    finally:
        os.umask(old)

    assert stat.S_IMODE(out.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)
