# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

import pytest

from cachemat import constants


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(constants, 'cachemat_folder', tmp_path / '.cachemat')
    monkeypatch.setattr(constants, 'config_path', tmp_path / '.cachemat' / 'config.json')
    monkeypatch.setattr(constants, 'logs_folder', tmp_path / '.cachemat' / 'logs')
    constants.read_config.cache_clear()
    yield constants.config_path
    constants.read_config.cache_clear()
