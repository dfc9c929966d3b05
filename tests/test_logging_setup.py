# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

import logging

import pytest

from cachemat import constants
from cachemat import logging_setup
from cachemat.caching import CacheCell
from cachemat.solving import cached_inverse


@pytest.fixture
def fresh_logging(monkeypatch):
    root_logger = logging.getLogger()
    cachemat_logger = logging.getLogger('cachemat')
    old_levels = (root_logger.level, cachemat_logger.level)
    monkeypatch.setattr(logging_setup, 'did_logging_setup', False)
    monkeypatch.setattr(logging_setup, 'log_file_path', None)
    yield
    # `dictConfig` names handlers after their keys in the config:
    for handler in root_logger.handlers[:]:
        if handler.name in ('console', 'file'):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(old_levels[0])
    cachemat_logger.setLevel(old_levels[1])


def test_setup_with_log_file(fresh_logging):
    logging_setup.setup()
    log_file_path = logging_setup.log_file_path
    assert log_file_path.parent == constants.logs_folder
    assert log_file_path.suffix == '.log'

    cell = CacheCell([[2, 0], [0, 2]])
    cached_inverse(cell)
    cached_inverse(cell)
    log_text = log_file_path.read_text()
    assert 'computing it.' in log_text
    assert 'INFO' in log_text and 'Getting cached inverse.' in log_text

    # Second call does nothing:
    logging_setup.setup(log_to_file=False)
    assert logging_setup.log_file_path == log_file_path


def test_console_levels(fresh_logging, capsys):
    logging_setup.setup(log_to_file=False)
    assert logging_setup.log_file_path is None
    assert not constants.logs_folder.exists()

    cell = CacheCell([[2, 0], [0, 2]])
    cached_inverse(cell)
    cached_inverse(cell)
    logging.getLogger('some_library').info('Chatter.')
    err = capsys.readouterr().err
    assert err == 'Getting cached inverse.\n'


def test_verbose_console(fresh_logging, capsys):
    logging_setup.setup(verbose=True, log_to_file=False)
    cached_inverse(CacheCell([[2, 0], [0, 2]]))
    assert 'computing it.' in capsys.readouterr().err


def test_clean_logs_folder():
    constants.logs_folder.mkdir(parents=True)
    for i in range(logging_setup.MAX_LOG_FILES_TO_KEEP + 5):
        (constants.logs_folder / f'{i:04d}.log').write_text('')
    logging_setup.clean_logs_folder()
    assert len(tuple(constants.logs_folder.iterdir())) == logging_setup.MAX_LOG_FILES_TO_KEEP - 1

    logging_setup.clean_logs_folder()
    assert len(tuple(constants.logs_folder.iterdir())) == logging_setup.MAX_LOG_FILES_TO_KEEP - 1
