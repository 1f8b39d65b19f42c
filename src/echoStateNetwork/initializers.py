"""Random initialisation of the fixed reservoir weights."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_INPUT_SCALE = 0.5
DEFAULT_RESERVOIR_SCALE = 0.9 * 0.5


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a NumPy generator; ``seed=None`` draws fresh OS entropy."""
    return np.random.default_rng(seed)


def uniform_weights(
    shape: tuple[int, int], scale: float, rng: np.random.Generator
) -> np.ndarray:
    """Sample a matrix with entries i.i.d. uniform on ``[-scale, +scale]``.

    Args:
        shape: (rows, cols), both >= 1.
        scale: Half-width of the sampling interval, >= 0.
        rng: Generator the entries are drawn from.

    Returns:
        np.ndarray: Float matrix of the requested shape.
    """
    rows, cols = (int(s) for s in shape)
    if rows < 1 or cols < 1:
        raise ValueError("weight matrix dimensions must be >= 1")
    if scale < 0.0:
        raise ValueError("scale must be >= 0")
    return rng.uniform(-scale, scale, size=(rows, cols))


def init_reservoir_weights(
    n_inputs: int,
    n_reservoir: int,
    *,
    input_scale: float = DEFAULT_INPUT_SCALE,
    reservoir_scale: float = DEFAULT_RESERVOIR_SCALE,
    rng: np.random.Generator,
) -> tuple[np.ndarray, np.ndarray]:
    """Create input and recurrent weights from one shared generator.

    The input matrix is drawn first, then the recurrent matrix, so a fixed
    seed always reproduces the same pair. No spectral-radius rescaling is
    applied to the recurrent matrix.

    Returns:
        tuple[np.ndarray, np.ndarray]: ``W_in`` of shape (n_reservoir, n_inputs)
        and ``W`` of shape (n_reservoir, n_reservoir).
    """
    W_in = uniform_weights((n_reservoir, n_inputs), input_scale, rng)
    W = uniform_weights((n_reservoir, n_reservoir), reservoir_scale, rng)
    logger.debug(
        "initialised W_in %s (scale=%g) and W %s (scale=%g)",
        W_in.shape,
        input_scale,
        W.shape,
        reservoir_scale,
    )
    return W_in, W
