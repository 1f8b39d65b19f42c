"""Exceptions raised by the echo state network core."""

from __future__ import annotations

import numpy as np


class DimensionMismatchError(ValueError):
    """A vector or matrix does not have the width the model was built with."""


class SingularMatrixError(np.linalg.LinAlgError):
    """Gauss-Jordan elimination hit a zero or near-zero pivot."""

    def __init__(self, message: str, *, row: int | None = None, pivot: float | None = None):
        super().__init__(message)
        self.row = row
        self.pivot = pivot


def check_length(vec: np.ndarray, expected: int, name: str) -> np.ndarray:
    """Return ``vec`` as a 1D float array, raising if its length is wrong."""
    arr = np.asarray(vec, dtype=float).reshape(-1)
    if arr.size != expected:
        raise DimensionMismatchError(
            f"{name} must have length {expected}, got {arr.size}"
        )
    return arr
