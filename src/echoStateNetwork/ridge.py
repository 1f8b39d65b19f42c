"""Closed-form ridge regression for the linear readout."""

from __future__ import annotations

import logging

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError
from .linalg import cross_product, gauss_jordan_inverse, gram_matrix

logger = logging.getLogger(__name__)


class RidgeRegressionSolver:
    """Solve ``min_W ||D - W X||^2 + ridge ||W||^2`` in closed form.

    The solution is ``W = (D X^T) (X X^T + ridge I)^-1`` where ``X`` is the
    state history (n_reservoir, T) and ``D`` the teacher history (n_outputs, T).
    """

    def __init__(self, ridge: float = 1e-2, pivot_tol: float = 1e-12) -> None:
        if ridge < 0.0:
            raise ValueError("ridge must be >= 0")
        if pivot_tol < 0.0:
            raise ValueError("pivot_tol must be >= 0")
        self.ridge = float(ridge)
        self.pivot_tol = float(pivot_tol)

    def solve(self, X: np.ndarray, D: np.ndarray) -> np.ndarray:
        """Return readout weights of shape (n_outputs, n_reservoir).

        Raises:
            DimensionMismatchError: If ``X`` and ``D`` disagree on ``T``.
            SingularMatrixError: If the regularised Gram matrix cannot be
                inverted without pivoting, or the result is not finite.
        """
        X = np.asarray(X, dtype=float)
        D = np.asarray(D, dtype=float)
        if X.ndim != 2 or D.ndim != 2:
            raise DimensionMismatchError("X and D must be 2D")
        if X.shape[1] != D.shape[1]:
            raise DimensionMismatchError(
                f"state history has {X.shape[1]} steps but teacher history has {D.shape[1]}"
            )
        if X.shape[1] < X.shape[0]:
            logger.debug(
                "fewer training steps (%d) than reservoir units (%d)",
                X.shape[1],
                X.shape[0],
            )

        M = gram_matrix(X, self.ridge)
        M_inv = gauss_jordan_inverse(M, pivot_tol=self.pivot_tol)
        DXt = cross_product(D, X)
        W_out = DXt @ M_inv

        if not np.all(np.isfinite(W_out)):
            raise SingularMatrixError("readout weights are not finite")
        logger.debug(
            "ridge solve: T=%d ridge=%g |W_out|=%.4g",
            X.shape[1],
            self.ridge,
            float(np.linalg.norm(W_out)),
        )
        return W_out
