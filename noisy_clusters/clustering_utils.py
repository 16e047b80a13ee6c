# clustering_utils.py
import logging
from typing import Sequence, Tuple

import pandas as pd

from noisy_clusters.clusterer import KMeansClusterer
from noisy_clusters.dataset import (
    LabeledSample,
    Sample,
    attach_labels,
    from_frame,
    noisy_matrix,
    to_frame,
)
from noisy_clusters.errors import ExportError
from noisy_clusters.file_utils import atomic_output

logger = logging.getLogger(__name__)


def assign_clusters(
    samples: Sequence[Sample],
    n_clusters: int,
    *,
    random_state=None,
    **clusterer_kwargs
) -> Tuple[Tuple[LabeledSample, ...], KMeansClusterer]:
    """
    1) Fit k-means on the noisy coordinates of `samples`
    2) Attach the resulting label to every row, keeping row order

    Args:
      samples          : dataset rows, in generation order
      n_clusters       : k, 1 <= k <= len(samples)
      random_state     : None, int seed or RandomState for centroid seeding
      **clusterer_kwargs: passed through to KMeansClusterer(...)

    Returns:
      labeled          : rows with their cluster label
      cl               : fitted clusterer instance
    """
    X = noisy_matrix(samples)
    cl = KMeansClusterer(n_clusters=n_clusters, random_state=random_state, **clusterer_kwargs)
    cl.fit(X)
    labeled = attach_labels(samples, cl.get_labels())

    m = cl.get_metrics()
    logger.info(
        "k-means (k=%d) converged in %d iterations, inertia=%.4f, silhouette=%.4f, "
        "calinski_harabasz=%.4f, davies_bouldin=%.4f, unbalanced_factor=%.4f",
        n_clusters, cl.n_iter_, cl.inertia_, m["silhouette"],
        m["calinski_harabasz"], m["davies_bouldin"], m["unbalanced_factor"]
    )
    logger.debug("Cluster populations: %s", m["population"])
    logger.debug("Within-cluster sum of squares: %s", m["wcss"])
    logger.debug("Average distance to centroid: %s", m["avg_distance"])
    return labeled, cl


def save_cluster_labels(labeled: Sequence[LabeledSample], filepath: str) -> None:
    """
    Dump the labeled table as CSV.

    Columns = ['true_x', 'true_y', 'noisy_x', 'noisy_y', 'cluster']. Any
    existing file is replaced; a failed write leaves nothing behind.
    """
    df = to_frame(labeled)
    try:
        with atomic_output(filepath) as tmp_path:
            df.to_csv(tmp_path, index=False, encoding="utf-8")
    except OSError as err:
        logger.error("Failed to write table to %s: %s", filepath, err)
        raise ExportError(f"Could not write table to {filepath}: {err}") from err
    logger.info("Saved %d labeled rows to %s", len(df), filepath)


def load_cluster_labels(filepath: str) -> Tuple[LabeledSample, ...]:
    """Read back a table written by save_cluster_labels."""
    df = pd.read_csv(filepath)
    return from_frame(df)
