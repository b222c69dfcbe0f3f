"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Hash configuration.
"""

from dataclasses import dataclass

from .errors import InvalidReduction

SAMPLE_SIZE = 32
REDUCED_SIZE = 8


@dataclass(frozen=True)
class HashConfig:
    """
    Sizes used by the pipeline.

    Hashes are only comparable when produced with identical sizes.

    :param sample_size: Side of the sample grid (N)
    :type sample_size: int
    :param reduced_size: Side of the low-frequency sub-matrix (M), hash has M*M bits
    :type reduced_size: int
    :param tie_tolerance: Relative band around the mean treated as a tie (bit 0)
    :type tie_tolerance: float
    """
    sample_size: int = SAMPLE_SIZE
    reduced_size: int = REDUCED_SIZE
    tie_tolerance: float = 1e-9

    def __post_init__(self):
        if self.sample_size < 1:
            raise InvalidReduction(f'Sample size must be positive, got {self.sample_size}')
        if self.reduced_size > self.sample_size:
            raise InvalidReduction(
                f'Reduced size {self.reduced_size} exceeds sample size {self.sample_size}'
            )
        if self.reduced_size < 2:
            raise InvalidReduction(f'Reduced size must be at least 2, got {self.reduced_size}')
        if self.tie_tolerance < 0:
            raise ValueError(f'Tie tolerance must not be negative, got {self.tie_tolerance}')

    @property
    def hash_length(self) -> int:
        """Number of bits in a hash produced with this configuration."""
        return self.reduced_size * self.reduced_size


DEFAULT_CONFIG = HashConfig()
