from .config import ESNConfig, load_config
from .errors import DimensionMismatchError, SingularMatrixError
from .initializers import init_reservoir_weights, make_rng, uniform_weights
from .linalg import cross_product, gauss_jordan_inverse, gram_matrix, spectral_radius
from .model import EchoStateNetwork
from .reservoir import ReservoirState
from .ridge import RidgeRegressionSolver

__all__ = [
    "DimensionMismatchError",
    "EchoStateNetwork",
    "ESNConfig",
    "ReservoirState",
    "RidgeRegressionSolver",
    "SingularMatrixError",
    "cross_product",
    "gauss_jordan_inverse",
    "gram_matrix",
    "init_reservoir_weights",
    "load_config",
    "make_rng",
    "spectral_radius",
    "uniform_weights",
]
