"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.
"""

from dctphash.batch import BatchHasher, HashResult  # noqa: F401
from dctphash.config import DEFAULT_CONFIG, REDUCED_SIZE, SAMPLE_SIZE, HashConfig  # noqa: F401
from dctphash.errors import DimensionMismatch, InvalidReduction, LengthMismatch, PHashError  # noqa: F401
from dctphash.image_hash import ImageHash  # noqa: F401
from dctphash.perceptual_hasher import PerceptualHasher  # noqa: F401
from dctphash.scaling import OpenCVScaler, ScaleFunc, to_grayscale  # noqa: F401
