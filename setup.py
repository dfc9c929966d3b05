# Copyright 2020 Ram Rachum and collaborators.
# This program is distributed under the MIT license.
import setuptools
import re



def read_file(filename):
    with open(filename) as file:
        return file.read()


version = re.search("__version__ = '([0-9.]*)'",
                    read_file('cachemat/__init__.py')).group(1)

setuptools.setup(
    name='cachemat',
    version=version,
    author='Ram Rachum',
    author_email='ram@rachum.com',
    description='cachemat - Compute the inverse of a matrix once and cache it',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests*']),
    install_requires=read_file('requirements.txt'),
    python_requires='>=3.9',
    extras_require={
        'tests': {
            'pytest',
            'pytest-xdist',
            'pytest-html',
        },
    },
    entry_points={
        'console_scripts': [
            'cachemat = cachemat.commanding:cachemat'
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
)
