import numpy as np
import pytest

from echoStateNetwork.errors import DimensionMismatchError, SingularMatrixError
from echoStateNetwork.linalg import (
    cross_product,
    gauss_jordan_inverse,
    gram_matrix,
    spectral_radius,
)


def test_gram_matrix_adds_ridge_on_diagonal_only():
    rng = np.random.default_rng(0)
    X = rng.normal(size=(4, 30))
    M0 = gram_matrix(X, 0.0)
    M1 = gram_matrix(X, 0.5)

    np.testing.assert_allclose(M0, X @ X.T)
    np.testing.assert_allclose(M1 - M0, 0.5 * np.eye(4))
    np.testing.assert_allclose(M1, M1.T)


def test_cross_product_matches_dense_formula():
    rng = np.random.default_rng(1)
    X = rng.normal(size=(5, 20))
    D = rng.normal(size=(2, 20))
    np.testing.assert_allclose(cross_product(D, X), D @ X.T)


def test_cross_product_rejects_mismatched_steps():
    with pytest.raises(DimensionMismatchError):
        cross_product(np.zeros((1, 10)), np.zeros((3, 9)))


def test_inverse_round_trip():
    rng = np.random.default_rng(2)
    for n in (1, 3, 10, 25):
        A = rng.normal(size=(n, 2 * n + 5))
        M = A @ A.T + 0.1 * np.eye(n)
        M_inv = gauss_jordan_inverse(M)
        assert np.max(np.abs(M @ M_inv - np.eye(n))) < 1e-9


def test_inverse_does_not_modify_input():
    M = np.array([[4.0, 1.0], [2.0, 3.0]])
    before = M.copy()
    gauss_jordan_inverse(M)
    np.testing.assert_array_equal(M, before)


def test_inverse_matches_numpy_on_nonsymmetric_matrix():
    M = np.array([[2.0, 1.0, 0.5], [0.3, 3.0, 1.0], [1.0, -1.0, 4.0]])
    np.testing.assert_allclose(gauss_jordan_inverse(M), np.linalg.inv(M), atol=1e-12)


def test_zero_pivot_raises_singular():
    M = np.array([[0.0, 1.0], [1.0, 0.0]])
    with pytest.raises(SingularMatrixError) as exc:
        gauss_jordan_inverse(M)
    assert exc.value.row == 0


def test_rank_deficient_matrix_raises_instead_of_nan():
    M = np.array([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(SingularMatrixError) as exc:
        gauss_jordan_inverse(M)
    assert exc.value.row == 1


def test_non_square_rejected():
    with pytest.raises(DimensionMismatchError):
        gauss_jordan_inverse(np.ones((2, 3)))


def test_spectral_radius_of_diagonal():
    assert spectral_radius(np.diag([0.5, -2.0, 1.0])) == pytest.approx(2.0)


def test_rank_deficient_large_magnitude_gram_raises():
    rng = np.random.default_rng(3)
    x = rng.normal(size=200)
    X = np.vstack([x * 1e4, 0.1 * (x * 1e4), rng.normal(size=200)])
    with pytest.raises(SingularMatrixError) as exc:
        gauss_jordan_inverse(gram_matrix(X, 0.0))
    assert exc.value.row == 1


def test_small_magnitude_well_conditioned_matrix_inverts():
    rng = np.random.default_rng(4)
    X = rng.normal(size=(4, 100)) * 1e-8
    M = gram_matrix(X, 0.0)
    M_inv = gauss_jordan_inverse(M)
    assert np.max(np.abs(M @ M_inv - np.eye(4))) < 1e-9


def test_inverse_check_is_scale_invariant():
    M = np.array([[2.0, 1.0], [1.0, 3.0]])
    for scale in (1e-20, 1.0, 1e20):
        np.testing.assert_allclose(
            gauss_jordan_inverse(M * scale) * scale, np.linalg.inv(M), rtol=1e-12
        )


def test_non_finite_matrix_raises_singular():
    with pytest.raises(SingularMatrixError):
        gauss_jordan_inverse(np.array([[1.0, np.nan], [0.0, 1.0]]))
