# dataset.py

from dataclasses import dataclass, astuple
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from noisy_clusters.errors import TableConstructionError

COLUMNS = ("true_x", "true_y", "noisy_x", "noisy_y", "cluster")


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ClusterSpec:
    """
    Generation parameters for one synthetic blob.

    Args:
      center    : mean of the blob
      std_dev   : standard deviation of both coordinates (> 0)
      n_samples : number of points to draw (>= 0)
    """
    center: Point
    std_dev: float
    n_samples: int


@dataclass(frozen=True)
class Sample:
    true_x: float
    true_y: float
    noisy_x: float
    noisy_y: float


@dataclass(frozen=True)
class LabeledSample(Sample):
    cluster: int


def noisy_matrix(samples: Sequence[Sample]) -> np.ndarray:
    """Noisy coordinates as an (n, 2) array, in row order."""
    if not samples:
        return np.empty((0, 2))
    return np.array([[s.noisy_x, s.noisy_y] for s in samples], dtype=float)


def true_matrix(samples: Sequence[Sample]) -> np.ndarray:
    if not samples:
        return np.empty((0, 2))
    return np.array([[s.true_x, s.true_y] for s in samples], dtype=float)


def attach_labels(samples: Sequence[Sample], labels) -> Tuple[LabeledSample, ...]:
    """
    Pair row i of `samples` with labels[i].

    Raises TableConstructionError if the label column does not line up
    with the rows.
    """
    labels = np.asarray(labels)
    if labels.ndim != 1:
        raise TableConstructionError(
            f"Labels must be one-dimensional, got shape {labels.shape}"
        )
    if labels.shape[0] != len(samples):
        raise TableConstructionError(
            f"Got {labels.shape[0]} labels for {len(samples)} rows"
        )
    if labels.size and (labels < 0).any():
        raise TableConstructionError("Cluster labels must be non-negative")

    return tuple(
        LabeledSample(s.true_x, s.true_y, s.noisy_x, s.noisy_y, int(lab))
        for s, lab in zip(samples, labels)
    )


def to_frame(labeled: Sequence[LabeledSample]) -> pd.DataFrame:
    df = pd.DataFrame([astuple(s) for s in labeled], columns=list(COLUMNS))
    # an empty frame would otherwise come back with object columns
    return df.astype({
        "true_x": float, "true_y": float,
        "noisy_x": float, "noisy_y": float,
        "cluster": int,
    })


def from_frame(df: pd.DataFrame) -> Tuple[LabeledSample, ...]:
    if tuple(df.columns) != COLUMNS:
        raise TableConstructionError(
            f"Expected columns {list(COLUMNS)}, got {list(df.columns)}"
        )
    return tuple(
        LabeledSample(float(tx), float(ty), float(nx), float(ny), int(c))
        for tx, ty, nx, ny, c in df.itertuples(index=False, name=None)
    )
