"""
Reference Configuration
=======================
Every parameter of the pipeline is a constant of the build: blob centers,
spreads and counts, k, output paths, canvas size, axis bounds and colors.

PipelineConfig bundles them so callers (and tests) can run the same
pipeline with a seed or different output paths without a runtime
configuration surface.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from noisy_clusters.dataset import ClusterSpec, Point
from noisy_clusters.synthetic_data import NOISE_STD

REFERENCE_SPECS: Tuple[ClusterSpec, ...] = (
    ClusterSpec(center=Point(2.0, 2.0), std_dev=0.3, n_samples=50),
    ClusterSpec(center=Point(7.0, 7.0), std_dev=0.3, n_samples=50),
    ClusterSpec(center=Point(2.0, 7.0), std_dev=0.3, n_samples=50),
)

N_CLUSTERS: int = 3

TABLE_PATH: str = "final_clustered.csv"
PLOT_PATH: str = "clusters.png"

CANVAS_SIZE: Tuple[int, int] = (1400, 800)
AXIS_BOUNDS: Tuple[float, float] = (0.5, 8.5)

# Catppuccin-style dark theme
BACKGROUND_COLOR: str = "#1e1e2e"
TEXT_COLOR: str = "#cdd6f4"
GRID_COLOR: str = "#6c7086"

CLUSTER_COLORS: Tuple[str, ...] = (
    "#fab387",  # peach
    "#cba6f7",  # mauve
    "#89dceb",  # sky
)
FALLBACK_COLOR: str = "#ffffff"


@dataclass(frozen=True)
class PipelineConfig:
    specs: Tuple[ClusterSpec, ...] = REFERENCE_SPECS
    noise_std: float = NOISE_STD
    n_clusters: int = N_CLUSTERS
    table_path: str = TABLE_PATH
    plot_path: str = PLOT_PATH
    canvas_size: Tuple[int, int] = CANVAS_SIZE
    axis_bounds: Tuple[float, float] = AXIS_BOUNDS
    palette: Tuple[str, ...] = CLUSTER_COLORS
    fallback_color: str = FALLBACK_COLOR
    # None -> process-wide NumPy random source, runs are not reproducible
    random_state: Optional[int] = None
