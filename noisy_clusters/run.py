# run.py

import logging
import sys

import matplotlib.pyplot as plt
from sklearn.utils import check_random_state

from noisy_clusters.clustering_utils import assign_clusters, save_cluster_labels
from noisy_clusters.config import PipelineConfig
from noisy_clusters.errors import NoisyClustersError
from noisy_clusters.logging_config import setup_logging
from noisy_clusters.plotter import plot_clusters
from noisy_clusters.synthetic_data import assemble_dataset

logger = logging.getLogger(__name__)


def run_pipeline(config: PipelineConfig = PipelineConfig()):
    """
    Generate, cluster, export and plot. Errors propagate to the caller.

    Returns the labeled rows.
    """
    # one source for generation and centroid seeding
    rs = check_random_state(config.random_state)

    # 1) Generate the dataset
    samples = assemble_dataset(config.specs, noise_std=config.noise_std, random_state=rs)

    # 2) Cluster the noisy coordinates
    labeled, _ = assign_clusters(samples, config.n_clusters, random_state=rs)

    # 3) Save the labeled table
    save_cluster_labels(labeled, config.table_path)

    # 4) Plot
    lo, hi = config.axis_bounds
    fig = plot_clusters(
        labeled,
        savepath=config.plot_path,
        palette=config.palette,
        fallback_color=config.fallback_color,
        size_px=config.canvas_size,
        xlim=(lo, hi),
        ylim=(lo, hi),
    )
    plt.close(fig)

    return labeled


def main():
    setup_logging()
    config = PipelineConfig()
    try:
        run_pipeline(config)
    except NoisyClustersError as err:
        logger.error("Pipeline failed: %s", err)
        return 1

    print(f"Saved clustered table to {config.table_path} and plot to {config.plot_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
