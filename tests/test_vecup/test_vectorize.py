"""Tests for vec/vech vectorization."""

from __future__ import annotations

import numpy as np
import pytest

from pymvcalc.exceptions import DimensionError, ShapeMismatchError
from pymvcalc.structmat import duplication
from pymvcalc.vecup import unvec, unvech, vec, vech


class TestVec:
    def test_column_major(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(vec(A), [1.0, 3.0, 2.0, 4.0])

    def test_returns_copy(self):
        A = np.ones((3, 1))
        v = vec(A)
        v[0] = 5.0
        assert A[0, 0] == 1.0

    def test_unvec_roundtrip(self, rng):
        A = rng.standard_normal((4, 3))
        np.testing.assert_array_equal(unvec(vec(A), 4, 3), A)
        np.testing.assert_array_equal(unvec(vec(A), 4), A)

    def test_unvec_bad_length(self):
        with pytest.raises(ShapeMismatchError):
            unvec(np.arange(7.0), 2, 3)

    def test_unvec_negative(self):
        with pytest.raises(DimensionError):
            unvec(np.arange(4.0), -2)


class TestVech:
    def test_symmetric_3x3(self, sym_3x3):
        np.testing.assert_array_equal(vech(sym_3x3), [1, 2, 3, 4, 5, 6])

    def test_column_by_column(self):
        A = np.array([[1.0, 9.0], [2.0, 3.0]])
        np.testing.assert_array_equal(vech(A), [1.0, 2.0, 3.0])

    def test_tall_length(self, rng):
        m, n = 5, 3
        A = rng.standard_normal((m, n))
        v = vech(A)
        assert v.shape == ((2 * m - n + 1) * n // 2,)
        np.testing.assert_array_equal(v[:m], A[:, 0])
        np.testing.assert_array_equal(v[m:2 * m - 1], A[1:, 1])
        np.testing.assert_array_equal(v[2 * m - 1:], A[2:, 2])

    def test_vector_is_copied(self):
        x = np.array([1.0, 2.0, 3.0])
        v = vech(x)
        np.testing.assert_array_equal(v, x)
        v[0] = 0.0
        assert x[0] == 1.0

    def test_scalar(self):
        np.testing.assert_array_equal(vech(2.5), [2.5])

    def test_1x1(self):
        np.testing.assert_array_equal(vech(np.array([[5.0]])), [5.0])

    def test_wide_rejected(self):
        with pytest.raises(DimensionError):
            vech(np.zeros((2, 3)))


class TestUnvech:
    def test_inverse_of_vech(self, sym_3x3):
        np.testing.assert_array_equal(unvech(vech(sym_3x3)), sym_3x3)

    def test_matches_duplication(self, rng):
        v = rng.standard_normal(10)
        np.testing.assert_array_equal(unvech(v), unvec(duplication(4) @ v, 4))

    def test_not_triangular(self):
        with pytest.raises(ShapeMismatchError):
            unvech(np.arange(4.0))


class TestDuplicationRoundtrip:
    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_unvec_duplication_vech(self, rng, n):
        B = rng.standard_normal((n, n))
        A = B + B.T
        np.testing.assert_array_equal(unvec(duplication(n) @ vech(A), n), A)


class TestTorch:
    def test_vech_torch(self, xp_torch, sym_3x3):
        import torch

        t = torch.tensor(sym_3x3)
        v = vech(t)
        assert isinstance(v, torch.Tensor)
        np.testing.assert_array_equal(v.numpy(), [1, 2, 3, 4, 5, 6])

    def test_vec_torch(self, xp_torch):
        import torch

        t = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
        np.testing.assert_array_equal(vec(t).numpy(), [1.0, 3.0, 2.0, 4.0])
