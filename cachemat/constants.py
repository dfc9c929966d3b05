# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

import pathlib
import functools
import json


@functools.cache
def read_config() -> dict:
    try:
        content = config_path.read_text()
    except FileNotFoundError:
        return {}
    return json.loads(content)


cachemat_folder: pathlib.Path = pathlib.Path.home() / '.cachemat'
config_path: pathlib.Path = cachemat_folder / 'config.json'
logs_folder: pathlib.Path = cachemat_folder / 'logs'
