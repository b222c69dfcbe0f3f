"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.
"""

import cv2
import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_image(rng):
    """32x32 grayscale noise image."""
    return rng.integers(0, 256, (32, 32)).astype(np.uint8)


@pytest.fixture
def smooth_image(rng):
    """32x32 grayscale image upscaled from 8x8 noise, dominated by low frequencies."""
    small = rng.integers(0, 256, (8, 8)).astype(np.uint8)
    return cv2.resize(small, (32, 32), interpolation=cv2.INTER_CUBIC)


@pytest.fixture
def cosine_image():
    """32x32 image whose only structure is the first horizontal DCT frequency."""
    x = np.arange(32)
    row = 100.0 + 50.0 * np.cos((2 * x + 1) * np.pi / 64)
    return np.tile(row, (32, 1))
