"""Pipeline configuration value object.

Design-time constants for splitting, model fitting and rendering.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for one modeling run.

    With the default bandwidth (gamma = 0.1) a support point's influence
    fades within about 30 mL, so inputs well beyond the training range
    (e.g. 90 and 100 mL after an 80/20 split of 0-100 mL) predict close to
    the SVR bias term, roughly the mean training moisture.

    Attributes:
        split_ratio: Fraction of leading observations used for training.
        kernel_bandwidth: Gaussian kernel bandwidth; gamma = 1 / bandwidth.
        regularization_c: SVR box constraint C.
        epsilon: Width of the epsilon-insensitive tube.
        solver_max_iterations: Iteration cap of the SVR solver.
        n_clusters: Number of k-means clusters.
        max_iterations: Cap on k-means centroid-update rounds.
        plot_path: Destination of the rendered scatter plot.
        plot_width: Image width in pixels.
        plot_height: Image height in pixels.
    """

    # Split
    split_ratio: float = 0.8

    # Kernel regression
    kernel_bandwidth: float = 10.0
    regularization_c: float = 100.0
    epsilon: float = 0.1
    solver_max_iterations: int = 100_000

    # Clustering
    n_clusters: int = 3
    max_iterations: int = 100

    # Rendering
    plot_path: str = "plot.png"
    plot_width: int = 800
    plot_height: int = 600

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 0.0 < self.split_ratio < 1.0:
            raise ValueError(
                f"split_ratio must be between 0 and 1 (exclusive), got {self.split_ratio}"
            )
        if self.kernel_bandwidth <= 0:
            raise ValueError(f"kernel_bandwidth must be positive, got {self.kernel_bandwidth}")
        if self.regularization_c <= 0:
            raise ValueError(f"regularization_c must be positive, got {self.regularization_c}")
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")
        if self.solver_max_iterations < 1:
            raise ValueError(
                f"solver_max_iterations must be at least 1, got {self.solver_max_iterations}"
            )
        if self.n_clusters < 1:
            raise ValueError(f"n_clusters must be at least 1, got {self.n_clusters}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations}")
        if not self.plot_path:
            raise ValueError("plot_path cannot be empty")
        if self.plot_width < 1 or self.plot_height < 1:
            raise ValueError(
                f"plot size must be positive, got {self.plot_width}x{self.plot_height}"
            )

    @property
    def gamma(self) -> float:
        """Return the Gaussian kernel coefficient derived from the bandwidth."""
        return 1.0 / self.kernel_bandwidth
