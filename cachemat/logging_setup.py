# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

'''
Logging for the `cachemat` command line.

Cache hits are announced at INFO by `cachemat.solving`, so the console shows them by default.
Misses and dropped stale inverses are at DEBUG, and show up with `--verbose` or in the log file.
'''

import pathlib
import logging.config
import datetime as datetime_module
import re
from typing import Optional


from . import constants


MAX_LOG_FILES_TO_KEEP = 20

log_file_path: Optional[pathlib.Path] = None
did_logging_setup: bool = False


def clean_logs_folder() -> None:
    '''Delete the oldest log files, making room for one more.'''
    logs = sorted(constants.logs_folder.iterdir(), key=lambda path: path.stat().st_mtime)
    for log_to_delete in logs[: max(len(logs) - (MAX_LOG_FILES_TO_KEEP - 1), 0)]:
        log_to_delete.unlink()


def make_log_file_path() -> pathlib.Path:
    constants.logs_folder.mkdir(parents=True, exist_ok=True)
    clean_logs_folder()
    now = datetime_module.datetime.now()
    log_file_stem = re.sub('[^0-9]+', '-', now.isoformat(timespec='milliseconds'))
    return constants.logs_folder / f'{log_file_stem}.log'


def setup(*, verbose: bool = False, log_to_file: bool = True) -> None:
    global log_file_path, did_logging_setup
    if did_logging_setup:
        return

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG' if verbose else 'INFO',
            'formatter': 'simple',
        },
    }
    if log_to_file:
        log_file_path = make_log_file_path()
        handlers['file'] = {
            'class': 'logging.FileHandler',
            'level': 'DEBUG',
            'filename': log_file_path,
            'formatter': 'verbose',
        }

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'verbose': {
                    'format': '{levelname} {asctime} {name} | {message}',
                    'style': '{',
                },
                'simple': {
                    'format': '{message}',
                    'style': '{',
                },
            },
            'handlers': handlers,
            'loggers': {
                'cachemat': {
                    'level': 'DEBUG',
                },
            },
            'root': {
                'handlers': tuple(handlers),
                'level': 'WARNING',
            },
        }
    )

    if log_file_path is not None:
        logging.getLogger(__name__).debug(f'Log file: {log_file_path}')
    did_logging_setup = True
