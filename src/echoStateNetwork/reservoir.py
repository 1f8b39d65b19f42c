"""Leaky-integrator reservoir state and its update rule."""

from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError, check_length


class ReservoirState:
    """Owns the reservoir state vector and advances it one input at a time.

    The update is

        x(t+1) = (1 - leak_rate) * x(t) + leak_rate * tanh(W_in u(t) + W x(t))

    and every unit reads the same snapshot of ``x(t)``.
    """

    def __init__(self, W_in: np.ndarray, W: np.ndarray, leak_rate: float) -> None:
        W_in = np.ascontiguousarray(W_in, dtype=float)
        W = np.ascontiguousarray(W, dtype=float)
        if W_in.ndim != 2 or W.ndim != 2:
            raise DimensionMismatchError("W_in and W must be 2D")
        if W.shape[0] != W.shape[1]:
            raise DimensionMismatchError(f"W must be square, got shape {W.shape}")
        if W_in.shape[0] != W.shape[0]:
            raise DimensionMismatchError(
                f"W_in has {W_in.shape[0]} rows but reservoir has {W.shape[0]} units"
            )
        if not (0.0 < leak_rate <= 1.0):
            raise ValueError("leak_rate must be in (0, 1]")

        self.W_in = W_in
        self.W = W
        self.leak_rate = float(leak_rate)
        self.n_inputs = int(W_in.shape[1])
        self.n_reservoir = int(W.shape[0])
        self._x = np.zeros(self.n_reservoir, dtype=float)
        self._scratch = np.empty(self.n_reservoir, dtype=float)

    @property
    def state(self) -> np.ndarray:
        return self._x.copy()

    def reset(self) -> None:
        self._x[:] = 0.0

    def set_state(self, x: np.ndarray) -> None:
        self._x[:] = check_length(x, self.n_reservoir, "state")

    def step(self, u: np.ndarray) -> np.ndarray:
        """Advance the state by one input vector of length ``n_inputs``."""
        u = check_length(u, self.n_inputs, "input")
        a = self.leak_rate
        # new state goes to the scratch buffer so no unit sees an updated sibling
        np.tanh(self.W_in @ u + self.W @ self._x, out=self._scratch)
        self._scratch *= a
        self._scratch += (1.0 - a) * self._x
        self._x[:] = self._scratch
        return self._x.copy()

    def run(self, U: np.ndarray) -> np.ndarray:
        """Replay a (T, n_inputs) sequence and return states as (n_reservoir, T)."""
        U = np.asarray(U, dtype=float)
        if U.ndim == 1 and self.n_inputs == 1:
            U = U.reshape(-1, 1)
        if U.ndim != 2 or U.shape[1] != self.n_inputs:
            raise DimensionMismatchError(
                f"input sequence must have shape (T, {self.n_inputs}), got {U.shape}"
            )
        X = np.zeros((self.n_reservoir, U.shape[0]), dtype=float)
        for t in range(U.shape[0]):
            X[:, t] = self.step(U[t])
        return X
