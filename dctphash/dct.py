"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Two-dimensional DCT-II with orthonormal per-axis scaling.
"""

import math
from typing import Tuple

import numpy as np

from .errors import DimensionMismatch


def scale_factors(n: int) -> Tuple[float, float]:
    """
    Per-axis scale factors for an axis of length n.

    :param n: Axis length
    :return: Factor for frequency index 0 and factor for any other index
    """
    return 1.0 / math.sqrt(n), math.sqrt(2.0 / n)


def scale_factor(x: int, y: int, n: int) -> float:
    """
    Scale factor applied to coefficient (x, y) of an n x n transform.

    The two axes are normalized independently, the result is the product
    of the per-axis factors.
    """
    zero_scale, scale = scale_factors(n)
    x_scale = zero_scale if x == 0 else scale
    y_scale = zero_scale if y == 0 else scale
    return x_scale * y_scale


def _cosines(n: int) -> np.ndarray:
    """Unscaled table where row k holds cos((2i+1)k*pi/2n) for i in [0, n)."""
    k = np.arange(n, dtype=np.float64).reshape(-1, 1)
    i = np.arange(n, dtype=np.float64).reshape(1, -1)
    return np.cos((2 * i + 1) * k * np.pi / (2 * n))


def dct_basis(n: int) -> np.ndarray:
    """
    Scaled DCT-II basis matrix.

    Row k is the k-th cosine multiplied by its per-axis scale factor, so that
    ``basis @ grid @ basis.T`` is the 2D transform.

    :param n: Transform size
    :return: n x n float64 matrix
    """
    zero_scale, scale = scale_factors(n)
    factors = np.full((n, 1), scale)
    factors[0, 0] = zero_scale
    return _cosines(n) * factors


def _check_square(grid: np.ndarray) -> np.ndarray:
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise DimensionMismatch(f'DCT requires a square 2D grid, got shape {grid.shape}')
    return grid


def dct2(grid: np.ndarray) -> np.ndarray:
    """
    Calculate the 2D DCT-II of a square grid.

    Separable O(N^3) form of the direct summation, see :func:`dct2_direct`.

    :param grid: N x N matrix of real values
    :return: N x N coefficient matrix indexed by frequency
    """
    grid = _check_square(grid)
    basis = dct_basis(grid.shape[0])
    return basis @ grid @ basis.T


def dct2_direct(grid: np.ndarray) -> np.ndarray:
    """
    Calculate the 2D DCT-II by direct summation.

    C[x][y] = a(x) * a(y) * sum_i sum_j grid[i][j] * cos((2i+1)x*pi/2N) * cos((2j+1)y*pi/2N)

    This is the O(N^4) reference the faster :func:`dct2` must agree with.

    :param grid: N x N matrix of real values
    :return: N x N coefficient matrix indexed by frequency
    """
    grid = _check_square(grid)
    n = grid.shape[0]
    cosines = _cosines(n)
    result = np.empty((n, n), dtype=np.float64)
    for x in range(n):
        for y in range(n):
            total = np.sum(grid * np.outer(cosines[x], cosines[y]))
            result[x, y] = total * scale_factor(x, y, n)
    return result
