"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

OpenCV adapters for scaling and grayscale conversion.

The hasher never calls these implicitly. Hash values depend highly on the
scaling algorithm, smoother interpolation usually works better.
"""

from typing import Callable

import cv2
import numpy as np

from .errors import DimensionMismatch

ScaleFunc = Callable[[np.ndarray, int, int], np.ndarray]


class OpenCVScaler:  # pylint: disable=too-few-public-methods
    """
    Scale function backed by cv2.resize.

    Instances are picklable, so they can be handed to worker processes.

    :param interpolation: OpenCV interpolation flag, e.g. cv2.INTER_AREA
    :type interpolation: int
    """

    def __init__(self, interpolation: int):
        self.interpolation = interpolation

    def __call__(self, image: np.ndarray, width: int, height: int) -> np.ndarray:
        return cv2.resize(image, (width, height), interpolation=self.interpolation)

    def __repr__(self) -> str:
        return f'OpenCVScaler(interpolation={self.interpolation})'


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """
    Convert a BGR or BGRA image to a single channel.

    :param image: Image as numpy array, single-channel images are returned unchanged
    :return: Single-channel image
    """
    if image.ndim == 2:
        return image
    if image.ndim == 3 and image.shape[2] == 1:
        return image[:, :, 0]
    if image.ndim == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    raise DimensionMismatch(f'Unsupported image shape {image.shape}')
