"""Dense matrix primitives used by the ridge readout.

Each helper is a separate operation so the pieces of the closed-form solve
``W = D X^T (X X^T + ridge I)^-1`` can be checked in isolation.
"""

from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError


def _as_matrix(A: np.ndarray, name: str) -> np.ndarray:
    arr = np.asarray(A, dtype=float)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"{name} must be 2D, got ndim={arr.ndim}")
    return arr


def gram_matrix(X: np.ndarray, ridge: float = 0.0) -> np.ndarray:
    """Return ``X @ X.T + ridge * I``.

    Args:
        X: State history of shape (n_reservoir, T), one column per time step.
        ridge: Regularisation added to the diagonal only.

    Returns:
        np.ndarray: Symmetric matrix of shape (n_reservoir, n_reservoir).
    """
    X = _as_matrix(X, "X")
    M = X @ X.T
    M[np.diag_indices_from(M)] += float(ridge)
    return M


def cross_product(D: np.ndarray, X: np.ndarray) -> np.ndarray:
    """Return ``D @ X.T`` for teacher history D (n_out, T) and states X (n_res, T)."""
    D = _as_matrix(D, "D")
    X = _as_matrix(X, "X")
    if D.shape[1] != X.shape[1]:
        raise DimensionMismatchError(
            f"D and X must have the same number of columns, got {D.shape[1]} and {X.shape[1]}"
        )
    return D @ X.T


def gauss_jordan_inverse(M: np.ndarray, pivot_tol: float = 1e-12) -> np.ndarray:
    """Invert a square matrix by Gauss-Jordan elimination without pivoting.

    The matrix is augmented with the identity; for each row ``i`` the row is
    divided by its diagonal pivot and every other row has a multiple of row
    ``i`` subtracted so column ``i`` becomes zero. After the last row the
    augmented half holds the inverse.

    Rows are never exchanged, so a zero on the diagonal fails even when the
    matrix is invertible. This is fine for ``X X^T + ridge I`` with
    ``ridge > 0``, which is symmetric positive definite.

    Args:
        M: Square matrix of shape (n, n). Not modified.
        pivot_tol: Relative tolerance. A pivot is rejected when its absolute
            value is ``<= pivot_tol * max(abs(M))``, so the check follows the
            scale of ``M`` rather than a fixed cutoff.

    Returns:
        np.ndarray: The inverse of ``M``.

    Raises:
        DimensionMismatchError: If ``M`` is not square.
        SingularMatrixError: If ``M`` has non-finite entries or a pivot is
            zero, near zero relative to ``M``, or not finite.
    """
    A = _as_matrix(M, "M").copy()
    n, m = A.shape
    if n != m:
        raise DimensionMismatchError(f"M must be square, got shape {A.shape}")
    if not np.all(np.isfinite(A)):
        raise SingularMatrixError("matrix has non-finite entries")

    threshold = pivot_tol * (float(np.abs(A).max()) if A.size else 0.0)
    inv = np.eye(n, dtype=float)
    for i in range(n):
        pivot = A[i, i]
        if not np.isfinite(pivot) or abs(pivot) <= threshold:
            raise SingularMatrixError(
                f"singular matrix: pivot {pivot!r} at row {i}",
                row=i,
                pivot=float(pivot),
            )
        A[i] /= pivot
        inv[i] /= pivot

        # eliminate column i from all other rows at once
        factors = A[:, i].copy()
        factors[i] = 0.0
        A -= np.outer(factors, A[i])
        inv -= np.outer(factors, inv[i])

    return inv


def spectral_radius(W: np.ndarray) -> float:
    """Largest absolute eigenvalue of a square matrix."""
    W = _as_matrix(W, "W")
    if W.shape[0] != W.shape[1]:
        raise DimensionMismatchError(f"W must be square, got shape {W.shape}")
    if W.size == 0:
        return 0.0
    return float(np.max(np.abs(np.linalg.eigvals(W))))
