# errors.py


class NoisyClustersError(Exception):
    """Base class for every error raised by the pipeline."""


class GenerationError(NoisyClustersError, ValueError):
    """Invalid distribution parameters for the synthetic generator."""


class FitError(NoisyClustersError, ValueError):
    """The clustering model cannot be fitted on the given input."""


class TableConstructionError(NoisyClustersError, ValueError):
    """Row/column shape mismatch while building the labeled table."""


class ExportError(NoisyClustersError, OSError):
    """The labeled table could not be written."""


class RenderError(NoisyClustersError, RuntimeError):
    """The scatter plot could not be created or saved."""
