# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

import click
import numpy as np
import pytest

from cachemat import utils


def test_parse_matrix():
    matrix = utils.parse_matrix('[[1, 2], [3, 4.5]]')
    assert matrix.dtype == np.float64
    assert (matrix == np.array([[1, 2], [3, 4.5]])).all()

    # Not square is fine here, it's the solver's business:
    assert utils.parse_matrix('[[1, 2, 3]]').shape == (1, 3)


@pytest.mark.parametrize('text', [
    '[[1, 2], [3',
    '{"a": 1}',
    '[1, 2]',
    '[[1, 2], [3]]',
    '[["a", 2], [3, 4]]',
    '[[true, 2], [3, 4]]',
])
def test_parse_matrix_rejects(text):
    with pytest.raises(click.BadParameter):
        utils.parse_matrix(text)


def test_format_matrix():
    assert utils.format_matrix([[0.5, 0], [0, 0.5]]) == '0.5 0\n0 0.5'
    assert utils.format_matrix(np.array([[-2.0, 1.0], [1.5, -0.5]])) == '-2 1\n1.5 -0.5'
