import numpy as np
import pytest

from echoStateNetwork.errors import DimensionMismatchError, SingularMatrixError
from echoStateNetwork.ridge import RidgeRegressionSolver


def test_recovers_known_readout():
    rng = np.random.default_rng(0)
    n_res, n_out, T = 8, 3, 400
    X = rng.normal(size=(n_res, T))
    W_true = rng.normal(size=(n_out, n_res))
    D = W_true @ X

    W_fit = RidgeRegressionSolver(ridge=1e-12).solve(X, D)

    rel_err = np.linalg.norm(W_fit - W_true) / np.linalg.norm(W_true)
    assert rel_err < 1e-6


def test_matches_normal_equations():
    rng = np.random.default_rng(1)
    X = rng.normal(size=(6, 50))
    D = rng.normal(size=(2, 50))
    ridge = 0.3
    expected = D @ X.T @ np.linalg.inv(X @ X.T + ridge * np.eye(6))
    np.testing.assert_allclose(RidgeRegressionSolver(ridge).solve(X, D), expected, atol=1e-10)


def test_larger_ridge_shrinks_weights():
    rng = np.random.default_rng(2)
    X = rng.normal(size=(5, 60))
    D = rng.normal(size=(1, 5)) @ X + 0.1 * rng.normal(size=(1, 60))

    norms = [
        np.linalg.norm(RidgeRegressionSolver(ridge).solve(X, D))
        for ridge in (0.0, 0.1, 1.0, 10.0, 100.0, 1e4)
    ]
    assert all(a > b for a, b in zip(norms, norms[1:]))
    assert norms[-1] < 0.05 * norms[0]


def test_mismatched_histories_rejected():
    with pytest.raises(DimensionMismatchError):
        RidgeRegressionSolver().solve(np.zeros((3, 10)), np.zeros((1, 11)))


def test_all_zero_states_without_ridge_is_singular():
    with pytest.raises(SingularMatrixError):
        RidgeRegressionSolver(ridge=0.0).solve(np.zeros((3, 10)), np.ones((1, 10)))


def test_all_zero_states_with_ridge_give_zero_readout():
    W = RidgeRegressionSolver(ridge=1e-2).solve(np.zeros((3, 10)), np.ones((1, 10)))
    np.testing.assert_array_equal(W, np.zeros((1, 3)))


def test_negative_ridge_rejected():
    with pytest.raises(ValueError):
        RidgeRegressionSolver(ridge=-1.0)
