# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

import contextlib
import functools
import logging
import platform
import sys
from typing import Optional, Tuple, Any

import click
import more_itertools

from . import logging_setup
from . import utils
from .caching import CacheCell
from .solving import cached_inverse

logger = logging.getLogger(__name__)


@click.group()
@click.option('-v', '--verbose', is_flag=True)
@click.option('--log-to-file/--dont-log-to-file', is_flag=True, default=True)
def cachemat_command_group(*, verbose: bool = False, log_to_file: bool = True) -> None:
    from cachemat import __version__
    logging_setup.setup(verbose=verbose, log_to_file=log_to_file)
    logger.debug(f'Starting cachemat {__version__}, Python version {platform.python_version()}')
    logger.debug(f'{sys.argv=}')

@cachemat_command_group.result_callback()
def cachemat_done(result: Any, *, verbose: bool = False, log_to_file: bool = True) -> None:
    logger.debug(f'cachemat finished, exiting.')


@click.argument('matrices', nargs=-1, required=True)
@click.option('-r', '--repeat', default=2, type=click.IntRange(min=1),
              help='How many times to ask for the inverse of each matrix.')
@click.option('-t', '--tolerance', default=None, type=float)
@cachemat_command_group.command()
def invert(*, matrices: Tuple[str, ...], repeat: int, tolerance: Optional[float]) -> None:
    '''Invert each of MATRICES, given as JSON lists of rows, reusing one cache cell.'''
    parsed_matrices = tuple(map(utils.parse_matrix, matrices))
    cell = CacheCell()
    get_inverse = functools.partial(cached_inverse, cell, tolerance=tolerance)
    for matrix in parsed_matrices:
        cell.set_matrix(matrix)
        inverse = more_itertools.last(more_itertools.repeatfunc(get_inverse, repeat))
        click.echo(utils.format_matrix(inverse))
        click.echo()

####################################################################################################

def is_exit_0_exception(exception: BaseException) -> bool:
    return (
        (isinstance(exception, SystemExit) and exception.code == 0) or
        (isinstance(exception, click.exceptions.Exit) and exception.exit_code == 0)
    )


@contextlib.contextmanager
def run_and_log_exception():
    try:
        yield
    except BaseException as base_exception:
        if not is_exit_0_exception(base_exception):
            logger.exception('cachemat exited because of an exception.')
            raise SystemExit(1) from base_exception


def cachemat(*args: Any, **kwargs: Any) -> None:
    with run_and_log_exception():
        cachemat_command_group(*args, **kwargs)
