# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

from __future__ import annotations

import logging
from typing import Optional, Any, Callable

import numpy as np

from . import constants
from .caching import CacheCell, Absent, freeze

logger = logging.getLogger(__name__)


DEFAULT_TOLERANCE = float(np.finfo(np.float64).eps)


class InversionError(Exception):
    pass


def get_default_tolerance() -> float:
    return float(constants.read_config().get('tolerance', DEFAULT_TOLERANCE))


def invert(matrix: Any, b: Optional[Any] = None, *,
           tolerance: Optional[float] = None) -> np.ndarray:
    '''
    Get the inverse of `matrix`, or the solution `x` of `matrix @ x == b` if `b` is given.

    Raises `InversionError` if `matrix` isn't a finite square matrix, or if its reciprocal
    condition number is below `tolerance`.
    '''
    if tolerance is None:
        tolerance = get_default_tolerance()
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InversionError(f"Can't invert a matrix of shape {matrix.shape}, it must be square.")
    if matrix.size == 0:
        raise InversionError("Can't invert an empty matrix.")
    if not np.isfinite(matrix).all():
        raise InversionError("Can't invert a matrix with missing or infinite values.")

    try:
        inverse = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as lin_alg_error:
        raise InversionError('Matrix is singular.') from lin_alg_error

    reciprocal_condition = 1 / (np.linalg.norm(matrix, 1) * np.linalg.norm(inverse, 1))
    if not reciprocal_condition >= tolerance:
        raise InversionError(f'Matrix is computationally singular: reciprocal condition '
                             f'number = {reciprocal_condition:g}.')

    if b is None:
        return inverse
    try:
        return np.linalg.solve(matrix, np.asarray(b))
    except (np.linalg.LinAlgError, ValueError) as exception:
        raise InversionError(f"Can't solve for `b` of shape {np.shape(b)}.") from exception


def cached_inverse(cell: CacheCell, *args: Any, solver: Callable[..., Any] = invert,
                   **kwargs: Any) -> np.ndarray:
    '''
    Get the inverse of the cell's matrix, computing it only if it isn't cached yet.

    Extra arguments are passed to `solver` as-is. They don't take part in the cache lookup, the
    cell caches one result for its current matrix.

    If `solver` raises, the exception propagates and nothing is cached, so the next call tries
    again.
    '''
    matrix, inverse, version = cell.snapshot()
    if inverse is not Absent:
        logger.info('Getting cached inverse.')
        return inverse

    logger.debug(f'No cached inverse for version {version} of {cell!r}, computing it.')
    inverse = freeze(solver(matrix, *args, **kwargs))
    cell.set_inverse(inverse, version=version)
    return inverse
