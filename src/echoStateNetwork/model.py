"""Echo state network estimator: fixed random reservoir plus ridge readout."""

from __future__ import annotations

import logging

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin

from .config import ESNConfig
from .errors import DimensionMismatchError
from .initializers import (
    DEFAULT_INPUT_SCALE,
    DEFAULT_RESERVOIR_SCALE,
    init_reservoir_weights,
    make_rng,
)
from .linalg import spectral_radius
from .reservoir import ReservoirState
from .ridge import RidgeRegressionSolver

logger = logging.getLogger(__name__)


class EchoStateNetwork(RegressorMixin, BaseEstimator):
    """Minimal echo state network with a closed-form linear readout.

    The input and recurrent weights are drawn once at construction and never
    change. Only the readout ``W_out`` is learned, by ridge regression on the
    reservoir states collected while replaying the training inputs.

    Notes:
    - The reservoir state persists between calls. ``fit`` and ``predict`` do
      not reset it; call ``reset_state()`` when a fresh start is wanted.
    - ``readout()`` before ``fit`` returns zeros.
    - ``fit(U, D)`` expects ``U`` of shape (T, n_inputs) and ``D`` of shape
      (T, n_outputs), one row per time step.
    - Every constructor argument is fixed once the weights are drawn, so
      ``set_params`` refuses to change any of them. Build a new model instead.
    - ``clone`` rebuilds the model from its parameters. With ``seed`` the clone
      gets the same weights. With ``rng`` the clone draws from a copy of that
      generator in its current, already advanced state, so its weights differ
      from the original's.
    """

    def __init__(
        self,
        n_inputs: int = 1,
        n_reservoir: int = 10,
        n_outputs: int = 1,
        leak_rate: float = 0.3,
        input_scale: float = DEFAULT_INPUT_SCALE,
        reservoir_scale: float = DEFAULT_RESERVOIR_SCALE,
        ridge: float = 1e-2,
        washout: int = 0,
        pivot_tol: float = 1e-12,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.n_inputs = int(n_inputs)
        self.n_reservoir = int(n_reservoir)
        self.n_outputs = int(n_outputs)
        self.leak_rate = float(leak_rate)
        self.input_scale = float(input_scale)
        self.reservoir_scale = float(reservoir_scale)
        self.ridge = float(ridge)
        self.washout = int(washout)
        self.pivot_tol = float(pivot_tol)
        self.seed = seed
        self.rng = rng

        if self.n_inputs < 1 or self.n_reservoir < 1 or self.n_outputs < 1:
            raise ValueError("n_inputs, n_reservoir and n_outputs must be >= 1")
        if self.washout < 0:
            raise ValueError("washout must be >= 0")

        gen = rng if rng is not None else make_rng(seed)
        W_in, W = init_reservoir_weights(
            self.n_inputs,
            self.n_reservoir,
            input_scale=self.input_scale,
            reservoir_scale=self.reservoir_scale,
            rng=gen,
        )
        self._reservoir = ReservoirState(W_in, W, self.leak_rate)
        self._solver = RidgeRegressionSolver(ridge=self.ridge, pivot_tol=self.pivot_tol)
        self._W_out = np.zeros((self.n_outputs, self.n_reservoir), dtype=float)
        self._last_output: np.ndarray | None = None

        # set during fit
        self.n_train_steps_: int | None = None

    @classmethod
    def from_config(
        cls, cfg: ESNConfig, rng: np.random.Generator | None = None
    ) -> "EchoStateNetwork":
        return cls(
            n_inputs=cfg.n_inputs,
            n_reservoir=cfg.n_reservoir,
            n_outputs=cfg.n_outputs,
            leak_rate=cfg.leak_rate,
            input_scale=cfg.input_scale,
            reservoir_scale=cfg.reservoir_scale,
            ridge=cfg.ridge,
            washout=cfg.washout,
            pivot_tol=cfg.pivot_tol,
            seed=cfg.seed,
            rng=rng,
        )

    def set_params(self, **params):
        if params:
            raise ValueError(
                f"EchoStateNetwork parameters are fixed at construction, cannot set {sorted(params)}"
            )
        return self

    # read access for reporting
    @property
    def state(self) -> np.ndarray:
        return self._reservoir.state

    @property
    def input_weights(self) -> np.ndarray:
        return self._reservoir.W_in.copy()

    @property
    def reservoir_weights(self) -> np.ndarray:
        return self._reservoir.W.copy()

    @property
    def readout_weights(self) -> np.ndarray:
        return self._W_out.copy()

    @property
    def last_output(self) -> np.ndarray | None:
        return None if self._last_output is None else self._last_output.copy()

    def spectral_radius(self) -> float:
        """Spectral radius of the recurrent weights (diagnostic only)."""
        return spectral_radius(self._reservoir.W)

    def reset_state(self) -> None:
        self._reservoir.reset()

    def step(self, u: np.ndarray) -> np.ndarray:
        """Feed one input vector and return the new reservoir state."""
        return self._reservoir.step(u)

    def readout(self) -> np.ndarray:
        """Return ``W_out @ state`` for the current state."""
        y = self._W_out @ self._reservoir.state
        self._last_output = y
        return y.copy()

    def _coerce_inputs(self, U: np.ndarray) -> np.ndarray:
        U = np.asarray(U, dtype=float)
        if U.ndim == 1 and self.n_inputs == 1:
            U = U.reshape(-1, 1)
        if U.ndim != 2 or U.shape[1] != self.n_inputs:
            raise DimensionMismatchError(
                f"inputs must have shape (T, {self.n_inputs}), got {U.shape}"
            )
        return U

    def _coerce_targets(self, D: np.ndarray) -> np.ndarray:
        D = np.asarray(D, dtype=float)
        if D.ndim == 1 and self.n_outputs == 1:
            D = D.reshape(-1, 1)
        if D.ndim != 2 or D.shape[1] != self.n_outputs:
            raise DimensionMismatchError(
                f"targets must have shape (T, {self.n_outputs}), got {D.shape}"
            )
        return D

    def collect_states(self, U: np.ndarray) -> np.ndarray:
        """Replay inputs from the current state and return states (n_reservoir, T)."""
        return self._reservoir.run(self._coerce_inputs(U))

    def fit_states(self, X: np.ndarray, D: np.ndarray):
        """Solve the readout from a state history (n_reservoir, T) and teacher (n_outputs, T)."""
        X = np.asarray(X, dtype=float)
        D = np.asarray(D, dtype=float)
        if X.ndim != 2 or X.shape[0] != self.n_reservoir:
            raise DimensionMismatchError(
                f"state history must have {self.n_reservoir} rows, got shape {X.shape}"
            )
        if D.ndim != 2 or D.shape[0] != self.n_outputs:
            raise DimensionMismatchError(
                f"teacher history must have {self.n_outputs} rows, got shape {D.shape}"
            )
        self._W_out = self._solver.solve(X, D)
        self.n_train_steps_ = int(X.shape[1])
        return self

    def fit(self, U: np.ndarray, D: np.ndarray):
        """Drive the reservoir with ``U`` and fit the readout to ``D``.

        The first ``washout`` steps still drive the reservoir but are left out
        of the regression.
        """
        U = self._coerce_inputs(U)
        D = self._coerce_targets(D)
        if U.shape[0] != D.shape[0]:
            raise DimensionMismatchError(
                f"got {U.shape[0]} input steps but {D.shape[0]} target steps"
            )
        if self.washout >= U.shape[0]:
            raise ValueError("washout must be shorter than the training sequence")

        X = self._reservoir.run(U)
        logger.debug(
            "collected %d states, discarding %d washout steps", X.shape[1], self.washout
        )
        return self.fit_states(X[:, self.washout :], D[self.washout :].T)

    def predict(self, U: np.ndarray) -> np.ndarray:
        """Replay inputs and return one readout per step, shape (T, n_outputs)."""
        U = self._coerce_inputs(U)
        Y = np.zeros((U.shape[0], self.n_outputs), dtype=float)
        for t in range(U.shape[0]):
            self.step(U[t])
            Y[t] = self.readout()
        return Y
