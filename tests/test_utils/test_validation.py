"""Tests for input validation helpers."""

from __future__ import annotations

import numpy as np
import pytest

from pymvcalc.exceptions import DimensionError, MVCalcError, ShapeMismatchError
from pymvcalc.utils import (
    check_dim,
    check_shape,
    check_square,
    resolve_dims,
)


class TestCheckDim:
    def test_valid(self):
        assert check_dim(0) == 0
        assert check_dim(np.int64(4)) == 4

    def test_negative(self):
        with pytest.raises(DimensionError):
            check_dim(-1)

    def test_non_integer(self):
        with pytest.raises(TypeError):
            check_dim(2.5)

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            check_dim(-3)
        with pytest.raises(MVCalcError):
            check_dim(-3)


class TestResolveDims:
    def test_default_square(self):
        assert resolve_dims(3) == (3, 3, None)

    def test_explicit(self):
        assert resolve_dims(2, 5) == (2, 5, None)

    def test_matrix(self):
        m, n, dtype = resolve_dims(np.zeros((2, 4), dtype=np.float32))
        assert (m, n) == (2, 4)
        assert dtype == np.float32

    def test_matrix_with_n_rejected(self):
        with pytest.raises(TypeError):
            resolve_dims(np.zeros((2, 2)), 3)

    def test_vector_rejected(self):
        with pytest.raises(ShapeMismatchError):
            resolve_dims(np.zeros(3))


class TestShapeChecks:
    def test_check_shape(self):
        check_shape(np.zeros((2, 3)), (2, 3))
        with pytest.raises(ShapeMismatchError):
            check_shape(np.zeros((3, 2)), (2, 3))

    def test_check_square(self):
        with pytest.raises(ShapeMismatchError):
            check_square(np.zeros((2, 3)))
