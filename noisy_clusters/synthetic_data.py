# synthetic_data.py

import logging
import numbers
from typing import Iterable, List, Tuple

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.utils import check_random_state

from noisy_clusters.dataset import ClusterSpec, Point, Sample
from noisy_clusters.errors import GenerationError

logger = logging.getLogger(__name__)

NOISE_STD = 0.05


def _validate_params(center, std_dev, n_samples, noise_std):
    if not all(isinstance(c, numbers.Real) for c in (center.x, center.y)):
        raise GenerationError(f"Center coordinates must be real numbers, got {center}")
    if not (np.isfinite(center.x) and np.isfinite(center.y)):
        raise GenerationError(f"Center must be finite, got {center}")
    if not np.isfinite(std_dev) or std_dev <= 0:
        raise GenerationError(f"std_dev must be a positive number, got {std_dev}")
    if not np.isfinite(noise_std) or noise_std < 0:
        raise GenerationError(f"noise_std must be >= 0, got {noise_std}")
    if isinstance(n_samples, bool) or not isinstance(n_samples, numbers.Integral):
        raise GenerationError(f"n_samples must be an integer, got {n_samples!r}")
    if n_samples < 0:
        raise GenerationError(f"n_samples must be >= 0, got {n_samples}")


def generate_cluster(
    center: Point,
    std_dev: float,
    n_samples: int,
    *,
    noise_std: float = NOISE_STD,
    random_state=None
) -> List[Sample]:
    """
    Draw `n_samples` points around `center` and perturb each one.

    True coordinates come from N(center, std_dev) per axis; the noisy
    coordinates add an independent N(0, noise_std) draw per axis.

    Args:
      center       : blob mean
      std_dev      : blob spread, > 0
      n_samples    : number of points, >= 0
      noise_std    : spread of the per-point perturbation
      random_state : None (global NumPy source), int seed or RandomState

    Returns:
      list of Sample, in generation order
    """
    _validate_params(center, std_dev, n_samples, noise_std)
    if n_samples == 0:
        return []

    rs = check_random_state(random_state)

    X_true, _ = make_blobs(
        n_samples=int(n_samples),
        n_features=2,
        centers=[[center.x, center.y]],
        cluster_std=std_dev,
        random_state=rs
    )
    X_noisy = X_true + rs.normal(0.0, noise_std, size=X_true.shape)

    return [
        Sample(float(t[0]), float(t[1]), float(n[0]), float(n[1]))
        for t, n in zip(X_true, X_noisy)
    ]


def generate_from_spec(spec: ClusterSpec, *, noise_std=NOISE_STD, random_state=None):
    return generate_cluster(
        spec.center,
        spec.std_dev,
        spec.n_samples,
        noise_std=noise_std,
        random_state=random_state,
    )


def assemble_dataset(
    specs: Iterable[ClusterSpec],
    *,
    noise_std: float = NOISE_STD,
    random_state=None
) -> Tuple[Sample, ...]:
    """
    Generate every ClusterSpec in order and concatenate the samples.

    All specs share one random source, so a seeded run is reproducible
    as a whole. Overlapping blobs are kept as they are.
    """
    rs = check_random_state(random_state)

    rows = []
    for i, spec in enumerate(specs):
        samples = generate_from_spec(spec, noise_std=noise_std, random_state=rs)
        logger.debug(
            "Spec %d: %d samples around (%.3f, %.3f), std=%.3f",
            i, len(samples), spec.center.x, spec.center.y, spec.std_dev
        )
        rows.extend(samples)

    logger.info("Assembled dataset with %d rows", len(rows))
    return tuple(rows)
