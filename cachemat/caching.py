# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

'''
Defines the `CacheCell` class.

A `CacheCell` holds one matrix and, once it was computed, its inverse. Setting
a new matrix throws away the cached inverse. See `cachemat.solving` for the
function that fills the cache.
'''

from __future__ import annotations

import enum
import logging
import threading
from typing import Union, Optional, Tuple, Any

import numpy as np

logger = logging.getLogger(__name__)


__all__ = ['CacheCell', 'Absent', 'freeze']


class _AbsentType(enum.Enum):
    absent = 'absent'

    def __repr__(self) -> str:
        return 'Absent'

    def __bool__(self) -> bool:
        return False


Absent = _AbsentType.absent
'''The inverse slot's value when there's no valid cached inverse for the current matrix.'''

MaybeMatrix = Union[np.ndarray, _AbsentType]


def is_frozen(array: np.ndarray) -> bool:
    '''Whether `array` sits on top of a `bytes` buffer, which nothing can write to.'''
    base = array
    while isinstance(base, np.ndarray):
        base = base.base
    if isinstance(base, memoryview):
        base = base.obj
    return isinstance(base, bytes)


def freeze(array_like: Any) -> np.ndarray:
    '''
    Get an array with the contents of `array_like` that can't be changed in place.

    The data is copied into a `bytes` object, so unlike an array with `writeable=False`, there's no
    way to turn writing back on, not on the result and not on its `.base`.
    '''
    if isinstance(array_like, np.ndarray) and is_frozen(array_like):
        return array_like
    array = np.array(array_like, order='C')
    if array.size == 0: # Nothing in there to write to
        array.flags.writeable = False
        return array
    return np.frombuffer(array.tobytes(), dtype=array.dtype).reshape(array.shape)


def make_placeholder() -> np.ndarray:
    # Like R's `matrix()`, a 1x1 matrix with a missing value.
    return freeze(np.full((1, 1), np.nan))


class CacheCell:
    '''
    A matrix together with its cached inverse.

    The inverse slot is either an array or `Absent`. Whenever it's an array, it's the inverse of
    the current matrix: `set_matrix` resets it to `Absent` in the same step that replaces the
    matrix.

    Every `set_matrix` bumps `version`. Pass the version you read to `set_inverse` and it'll
    refuse to store an inverse that was computed for a matrix that's since been replaced.
    '''
    def __init__(self, matrix: Optional[Any] = None) -> None:
        self.lock = threading.RLock()
        self._matrix: np.ndarray = make_placeholder() if matrix is None else freeze(matrix)
        self._inverse: MaybeMatrix = Absent
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not Absent

    def set_matrix(self, matrix: Any) -> None:
        frozen_matrix = freeze(matrix)
        with self.lock:
            self._matrix = frozen_matrix
            self._inverse = Absent
            self._version += 1

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    def set_inverse(self, inverse: Any, *, version: Optional[int] = None) -> bool:
        '''
        Store `inverse` as the cached inverse of the current matrix.

        If `version` is given and the matrix was replaced since then, nothing is stored and
        `False` is returned.
        '''
        frozen_inverse = freeze(inverse)
        with self.lock:
            if version is not None and version != self._version:
                logger.debug(f'Discarding inverse computed for version {version}, the cell is '
                             f'already at version {self._version}.')
                return False
            self._inverse = frozen_inverse
            return True

    def get_inverse(self) -> MaybeMatrix:
        return self._inverse

    def snapshot(self) -> Tuple[np.ndarray, MaybeMatrix, int]:
        with self.lock:
            return (self._matrix, self._inverse, self._version)

    def __repr__(self) -> str:
        return (f'<{type(self).__name__}: {self._matrix.shape} matrix, version {self._version}, '
                f'{"inverse cached" if self.has_inverse else "no inverse"}>')
