"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Batch hashing of many images.
"""

import logging
import pickle
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from typing import Any, Hashable, Iterable, List, Optional, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, HashConfig
from .image_hash import ImageHash
from .perceptual_hasher import PerceptualHasher
from .scaling import ScaleFunc

logger = logging.getLogger(__name__)


@dataclass
class HashResult:
    """Data class to store the outcome of hashing one image."""
    key: Any
    image_hash: Optional[ImageHash] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchHasher:  # pylint: disable=too-few-public-methods
    """
    Hash a batch of images, one pipeline invocation per image.

    A failing image does not abort the batch, its error is recorded in the
    corresponding HashResult.

    Parallel hashing sends the scale function to worker processes, so it must
    be picklable (e.g. OpenCVScaler or a module-level function). A scale
    function that cannot be pickled, such as a lambda or a closure, makes the
    batch run sequentially in this process.

    :param scale_func: Scale function passed to every pipeline invocation
    :type scale_func: ScaleFunc
    :param n_processes: Number of processes to use for parallel processing (0 = auto)
    :type n_processes: int
    :param config: Sizes used for every hash in the batch
    :type config: HashConfig
    """

    def __init__(
            self,
            scale_func: Optional[ScaleFunc] = None,
            n_processes: int = 0,
            config: HashConfig = DEFAULT_CONFIG,
    ):
        self.scale_func = scale_func
        self.n_processes = n_processes
        if n_processes == 0 or n_processes > cpu_count():
            self.n_processes = cpu_count() - 1 if cpu_count() > 1 else 1
        if self.n_processes > 1 and not _is_picklable(scale_func):
            logger.warning('Scale function %r cannot be pickled, hashing sequentially', scale_func)
            self.n_processes = 1
        self.config = config

    def run(self, items: Iterable[Tuple[Hashable, np.ndarray]]) -> List[HashResult]:
        """
        Hash every (key, image) pair.

        :param items: Pairs of caller-chosen key and grayscale image
        :returns: One result per item
        :rtype: List[HashResult]
        """
        items = list(items)
        if not items:
            return []

        logger.info('Hashing %d images', len(items))
        if self.n_processes > 1:
            results = self._hash_parallel(items)
        else:
            results = self._hash_sequential(items)

        failed = sum(1 for r in results if not r.ok)
        logger.info('Hashed %d images, %d failed', len(results) - failed, failed)
        return results

    def _hash_sequential(self, items: List[Tuple[Hashable, np.ndarray]]) -> List[HashResult]:
        """Hash images one after another in this process."""
        return [self._hash_worker(item) for item in items]

    def _hash_parallel(self, items: List[Tuple[Hashable, np.ndarray]]) -> List[HashResult]:
        """Hash images in parallel using multiprocessing."""
        logger.info('Using %d processes for parallel hashing', self.n_processes)

        results = []
        with Pool(processes=self.n_processes) as pool:
            for result in pool.imap(self._hash_worker, items):
                results.append(result)
        return results

    def _hash_worker(self, item: Tuple[Hashable, np.ndarray]) -> HashResult:
        """
        Worker function to hash a single image.

        :param item: Key and image
        :return: HashResult holding either the hash or the error
        """
        key, image = item
        try:
            image_hash = PerceptualHasher.phash(image, self.scale_func, self.config)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning('Error hashing %s: %s', key, e)
            return HashResult(key=key, error=f'{type(e).__name__}: {e}')
        return HashResult(key=key, image_hash=image_hash)


def _is_picklable(obj: Any) -> bool:
    try:
        pickle.dumps(obj)
    except (pickle.PicklingError, AttributeError, TypeError):
        return False
    return True
