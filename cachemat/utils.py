# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

'''A collection of general-purpose tools.'''

from __future__ import annotations

import json
import numbers
from typing import Any

import click
import more_itertools
import numpy as np


def parse_matrix(text: str) -> np.ndarray:
    '''
    Parse a matrix written as a JSON list of rows, like `[[1, 2], [3, 4]]`.

    Raises `click.BadParameter` if `text` isn't a non-ragged list of rows of numbers. Whether the
    matrix is square is left for whoever inverts it.
    '''
    try:
        rows = json.loads(text)
    except json.JSONDecodeError as json_decode_error:
        raise click.BadParameter(f'{text!r} is not valid JSON.') from json_decode_error
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise click.BadParameter(f'{text!r} should be a list of rows.')
    if not more_itertools.all_equal(map(len, rows)):
        raise click.BadParameter(f'The rows of {text!r} have different lengths.')
    if not all(isinstance(item, numbers.Real) and not isinstance(item, bool)
               for row in rows for item in row):
        raise click.BadParameter(f'{text!r} should contain only numbers.')
    return np.array(rows, dtype=np.float64)


def format_matrix(matrix: Any) -> str:
    # Adding zero turns `-0.0` into `0.0`:
    return '\n'.join(' '.join(f'{item + 0.0:g}' for item in row) for row in np.asarray(matrix))
