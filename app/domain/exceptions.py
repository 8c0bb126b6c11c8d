"""Domain exceptions.

Error taxonomy shared by every layer of the pipeline.
"""


class MoistureModelError(Exception):
    """Base class for all soil moisture modeling errors."""

    pass


class DataError(MoistureModelError, ValueError):
    """Raised when input records are malformed or insufficient."""

    pass


class InsufficientDataError(DataError):
    """Raised when a split would leave the train or test subset empty."""

    pass


class FitError(MoistureModelError):
    """Raised when a model cannot be fitted to the training data."""

    pass


class RenderError(MoistureModelError):
    """Raised when the visualization artifact cannot be produced."""

    pass
