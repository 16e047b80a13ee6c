import numpy as np
import pandas as pd
from sklearn.cluster import KMeans

from noisy_clusters.errors import FitError
from noisy_clusters.metrics import compute_all_metrics


class BaseClusterer:
    def __init__(self, n_clusters=3, **kwargs):
        self.n_clusters = n_clusters
        self.model = None

    def _validate_input(self, X):
        if isinstance(X, pd.DataFrame):
            X = X.values
        if not isinstance(X, np.ndarray):
            raise FitError("Input must be numpy array or pandas DataFrame")
        try:
            X = X.astype(float, copy=False)
        except (TypeError, ValueError) as err:
            raise FitError(f"Input must be numeric: {err}") from err
        if X.ndim != 2:
            raise FitError(f"Input must be a 2-D matrix, got shape {X.shape}")
        if X.shape[0] == 0:
            raise FitError("Cannot fit on an empty dataset")
        if not np.isfinite(X).all():
            raise FitError("Input contains NaN or infinite coordinates")
        if self.n_clusters < 1:
            raise FitError(f"n_clusters must be >= 1, got {self.n_clusters}")
        if self.n_clusters > X.shape[0]:
            raise FitError(
                f"n_clusters={self.n_clusters} exceeds the number of rows ({X.shape[0]})"
            )
        return X

    def fit(self, X):
        X_arr = self._validate_input(X)
        try:
            self.model.fit(X_arr)
        except ValueError as err:
            raise FitError(f"Clustering fit failed: {err}") from err
        self.labels_ = np.asarray(self.model.labels_, dtype=int)
        self.centroids_ = getattr(self.model, "cluster_centers_", None)
        self.X_ = X_arr
        return self

    def get_virtual_centroids(self):
        """
        Return model-provided centers if available, else compute
        the mean of each cluster's points.
        """
        if self.centroids_ is not None:
            return np.array(self.centroids_)

        labels = self.labels_
        centers = [self.X_[labels == lbl].mean(axis=0) for lbl in np.unique(labels)]
        return np.vstack(centers) if centers else np.empty((0, self.X_.shape[1]))

    def get_real_centroids(self):
        """
        Map each virtual centroid to the nearest actual data point.
        Returns array of shape (n_clusters, n_features).
        """
        virtual = self.get_virtual_centroids()
        real = []
        for vc in virtual:
            dists = np.linalg.norm(self.X_ - vc, axis=1)
            real.append(self.X_[np.argmin(dists)])
        return np.vstack(real) if real else np.empty_like(virtual)

    def get_labels(self):
        return self.labels_

    def get_metrics(self):
        return compute_all_metrics(self.X_, self.labels_, self.centroids_)


class KMeansClusterer(BaseClusterer):
    """
    Lloyd's k-means: k-means++ seeding, then alternate nearest-centroid
    assignment and centroid recomputation until the assignment is stable
    or max_iter is reached.
    """

    def __init__(self, n_clusters=3, *, n_init=10, max_iter=300, **kwargs):
        super().__init__(n_clusters=n_clusters)
        self.model = KMeans(
            n_clusters=n_clusters, n_init=n_init, max_iter=max_iter, **kwargs
        )

    def fit(self, X):
        super().fit(X)
        self.inertia_ = float(self.model.inertia_)
        self.n_iter_ = int(self.model.n_iter_)
        return self
