# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.

'''Cache the inverse of a matrix so it's computed only once per matrix.'''

import collections

from . import constants
from . import caching
from . import solving
from .caching import CacheCell, Absent
from .solving import cached_inverse, invert, InversionError

__VersionInfo = collections.namedtuple('VersionInfo',
                                       ('major', 'minor', 'micro'))

__version__ = '0.1.0'
__version_info__ = __VersionInfo(*(map(int, __version__.split('.'))))


del collections, __VersionInfo # Avoid polluting the namespace
