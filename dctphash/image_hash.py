"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

ImageHash value type.
"""

from typing import Iterable, Iterator, Tuple

from .errors import LengthMismatch


class ImageHash:
    """
    Ordered bit sequence produced by the perceptual hasher.

    Bits are stored most-significant first. The bit string returned by
    ``str()`` is the serialized form and round-trips through
    :meth:`from_string`. Instances are immutable and can be used as
    dictionary keys.
    """

    __slots__ = ('_bits',)

    def __init__(self, bits: Iterable[int]):
        bits = tuple(1 if b else 0 for b in bits)
        if not bits:
            raise ValueError('Hash must contain at least one bit')
        self._bits: Tuple[int, ...] = bits

    @classmethod
    def from_string(cls, value: str) -> 'ImageHash':
        """
        Parse a hash from its '0'/'1' string form.

        :param value: Bit string, most-significant bit first
        :return: ImageHash
        """
        if not value or any(c not in '01' for c in value):
            raise ValueError(f'Not a binary hash string: {value!r}')
        return cls(c == '1' for c in value)

    @classmethod
    def from_int(cls, value: int, length: int = 64) -> 'ImageHash':
        """
        Build a hash from an unsigned integer.

        :param value: Integer whose binary form holds the bits, MSB first
        :param length: Number of bits in the hash
        :return: ImageHash
        """
        if value < 0 or value.bit_length() > length:
            raise ValueError(f'{value} does not fit in {length} unsigned bits')
        return cls((value >> shift) & 1 for shift in range(length - 1, -1, -1))

    @property
    def bits(self) -> Tuple[int, ...]:
        return self._bits

    def __str__(self) -> str:
        return ''.join('1' if b else '0' for b in self._bits)

    def __repr__(self) -> str:
        return f"ImageHash('{self}')"

    def __int__(self) -> int:
        value = 0
        for bit in self._bits:
            value = (value << 1) | bit
        return value

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImageHash):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __sub__(self, other: 'ImageHash') -> int:
        """Hamming distance to another hash of the same length."""
        if not isinstance(other, ImageHash):
            return NotImplemented
        if len(self) != len(other):
            raise LengthMismatch(f'Cannot compare {len(self)}-bit hash with {len(other)}-bit hash')
        return sum(b1 != b2 for b1, b2 in zip(self._bits, other._bits))
