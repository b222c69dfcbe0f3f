"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

PerceptualHasher class.
"""

import logging
import math
from typing import Optional, Union

import numpy as np

from .config import DEFAULT_CONFIG, REDUCED_SIZE, SAMPLE_SIZE, HashConfig
from .dct import dct2
from .errors import DimensionMismatch, InvalidReduction
from .image_hash import ImageHash
from .scaling import ScaleFunc

logger = logging.getLogger(__name__)

HashLike = Union[ImageHash, str]


class PerceptualHasher:
    """
    Perceptual hashing implementation for grayscale images.
    Uses the DCT-based pHash algorithm with a mean threshold that excludes the DC term.

    Hash values depend on how the caller scales images to the sample grid size,
    so scaling is always supplied by the caller.
    """

    @staticmethod
    def sample_grid(image: np.ndarray, size: int = SAMPLE_SIZE) -> np.ndarray:
        """
        Read a size x size grayscale image into a sample grid.

        The grid is indexed [x][y], x being the pixel column and y the pixel row.

        :param image: Single-channel image as numpy array
        :param size: Required width and height of the image
        :return: Sample grid as float64 array
        """
        image = np.asarray(image)
        if image.ndim != 2:
            raise DimensionMismatch(f'Expected a single-channel image, got shape {image.shape}')
        if image.shape != (size, size):
            raise DimensionMismatch(
                f'Expected a {size}x{size} image, got {image.shape[1]}x{image.shape[0]}'
            )
        return image.astype(np.float64).T

    @staticmethod
    def reduce_matrix(coefficients: np.ndarray, size: int = REDUCED_SIZE) -> np.ndarray:
        """
        Take the top-left size x size low-frequency coefficients.

        :param coefficients: N x N coefficient matrix
        :param size: Side of the reduced matrix, must not exceed N
        :return: Copy of the reduced matrix
        """
        n = coefficients.shape[0]
        if size > n or size < 1:
            raise InvalidReduction(f'Cannot reduce a {n}x{n} matrix to {size}x{size}')
        return coefficients[:size, :size].copy()

    @staticmethod
    def mean_value(reduced: np.ndarray) -> float:
        """Mean of the reduced matrix without the DC coefficient at [0][0]."""
        cells = np.asarray(reduced, dtype=np.float64).ravel()
        if cells.size < 2:
            raise InvalidReduction('Mean needs at least two coefficients')
        # offsets from the first AC cell keep the mean exact when all AC cells are equal
        base = float(cells[1])
        return base + math.fsum(cells[1:] - base) / (cells.size - 1)

    @staticmethod
    def build_hash(
            reduced: np.ndarray,
            mean: Optional[float] = None,
            tie_tolerance: float = 0.0,
    ) -> ImageHash:
        """
        Binarize the reduced matrix against its mean.

        Cells are visited row-major, a cell above the mean gives bit 1 and
        anything else, ties included, gives bit 0.

        :param reduced: M x M reduced coefficient matrix
        :param mean: Threshold, computed with :meth:`mean_value` when omitted
        :param tie_tolerance: Band, relative to the largest magnitude in the matrix,
            within which a cell counts as equal to the mean
        :return: Hash of M*M bits, most-significant bit first
        """
        reduced = np.asarray(reduced, dtype=np.float64)
        if mean is None:
            mean = PerceptualHasher.mean_value(reduced)
        band = tie_tolerance * max(1.0, float(np.max(np.abs(reduced))))
        diff = (reduced - mean) > band
        return ImageHash(diff.flatten())

    @staticmethod
    def phash(
            image: np.ndarray,
            scale_func: Optional[ScaleFunc] = None,
            config: HashConfig = DEFAULT_CONFIG,
    ) -> ImageHash:
        """
        Calculate perceptual hash (pHash) using DCT.

        A coefficient gives bit 1 only when it exceeds the mean by more than
        config.tie_tolerance times the largest coefficient magnitude (1e-9 by
        default). Use a config with tie_tolerance=0 for the bare strict comparison.

        :param image: Grayscale image as numpy array
        :param scale_func: Called as scale_func(image, N, N) only when the image is not N x N
        :param config: Sample and reduced sizes
        :return: ImageHash of config.hash_length bits
        """
        n = config.sample_size
        image = np.asarray(image)
        if image.shape[:2] != (n, n):
            if scale_func is None:
                raise DimensionMismatch(
                    f'Image shape {image.shape} is not {n}x{n} and no scale function was given'
                )
            logger.debug('Scaling image of shape %s to %dx%d', image.shape, n, n)
            image = np.asarray(scale_func(image, n, n))
            if image.shape[:2] != (n, n):
                raise DimensionMismatch(f'Scale function returned shape {image.shape}, expected {n}x{n}')

        grid = PerceptualHasher.sample_grid(image, n)
        reduced = PerceptualHasher.reduce_matrix(dct2(grid), config.reduced_size)
        mean = PerceptualHasher.mean_value(reduced)
        return PerceptualHasher.build_hash(reduced, mean, config.tie_tolerance)

    @staticmethod
    def hamming_distance(hash1: HashLike, hash2: HashLike) -> int:
        """Calculate Hamming distance between two hashes of equal length."""
        if isinstance(hash1, str):
            hash1 = ImageHash.from_string(hash1)
        if isinstance(hash2, str):
            hash2 = ImageHash.from_string(hash2)
        return hash1 - hash2

    @staticmethod
    def similarity_score(hash1: HashLike, hash2: HashLike) -> float:
        """
        Calculate similarity score between two hashes (0.0 to 1.0).
        1.0 means identical, 0.0 means every bit differs.
        """
        distance = PerceptualHasher.hamming_distance(hash1, hash2)
        return 1.0 - distance / len(hash1)
