"""End-to-end experiments built on the core network."""

from .sine_cosine_experiment import SineCosineResult, nrmse, run_sine_cosine_experiment

__all__ = [
    "SineCosineResult",
    "nrmse",
    "run_sine_cosine_experiment",
]
