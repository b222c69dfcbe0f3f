"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Exceptions raised by the hashing pipeline.
"""


class PHashError(Exception):
    """Base class for all dctphash errors."""


class DimensionMismatch(PHashError, ValueError):
    """Image or grid does not have the exact size the pipeline requires."""


class InvalidReduction(PHashError, ValueError):
    """Reduced matrix size is not valid for the sample grid size."""


class LengthMismatch(PHashError, ValueError):
    """Two hashes of different bit length were compared."""
