from noisy_clusters.dataset import ClusterSpec, LabeledSample, Point, Sample
from noisy_clusters.errors import (
    ExportError,
    FitError,
    GenerationError,
    NoisyClustersError,
    RenderError,
    TableConstructionError,
)

__version__ = "0.1.0"
