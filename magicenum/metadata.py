#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Metadata constants synopsizing high-level package behaviour.

Python Version
----------
For uniformity between this codebase and the ``setup.py`` setuptools script
importing this module, this module also validates the version of the active
Python 3 interpreter. An exception is raised if this version is insufficient.

This package currently requires **Python 3.10**, the first release supporting
``|``-delimited unions of type hints as used throughout this codebase.

Design
----------
This submodule intentionally imports *only* from the standard library, as the
top-level ``setup.py`` script imports this submodule *before* any third-party
dependencies are guaranteed to be installed.
'''

# ....................{ IMPORTS                           }....................
import sys

# ....................{ METADATA                          }....................
NAME = 'magicenum'
'''
Human-readable package name.
'''


PACKAGE_NAME = NAME.lower()
'''
Fully-qualified name of the top-level Python package implementing this
project.
'''


LICENSE = '2-clause BSD'
'''
Human-readable name of the license this package is licensed under.
'''

# ....................{ PYTHON ~ version                  }....................
PYTHON_VERSION_MIN = '3.10.0'
'''
Human-readable minimum version of Python required by this package as a
``.``-delimited string.
'''


PYTHON_VERSION_MINOR_MAX = 13
'''
Maximum minor stable version of this major version of Python currently released
(e.g., ``5`` if Python 3.5 is the most recent stable version of Python 3.x).
'''


def _convert_version_str_to_tuple(version_str: str) -> tuple:
    '''
    Convert the passed human-readable ``.``-delimited version string into a
    machine-readable version tuple of corresponding integers.
    '''
    assert isinstance(version_str, str), (
        '"{}" not a version string.'.format(version_str))

    return tuple(int(version_part) for version_part in version_str.split('.'))


PYTHON_VERSION_MIN_PARTS = _convert_version_str_to_tuple(PYTHON_VERSION_MIN)
'''
Machine-readable minimum version of Python required by this package as a
tuple of integers.
'''


# If the active Python interpreter is older than required, die.
if sys.version_info[:3] < PYTHON_VERSION_MIN_PARTS:
    # Human-readable current version of Python.
    PYTHON_VERSION = '.'.join(
        str(version_part) for version_part in sys.version_info[:3])

    # Die ignominiously.
    raise RuntimeError(
        '{} requires at least Python {}, but the active interpreter '
        'is only Python {}.'.format(
            NAME, PYTHON_VERSION_MIN, PYTHON_VERSION))

# ....................{ METADATA ~ version                }....................
VERSION = '0.1.0'
'''
Human-readable package version as a ``.``-delimited string.
'''


VERSION_PARTS = _convert_version_str_to_tuple(VERSION)
'''
Machine-readable package version as a tuple of integers.
'''

# ....................{ METADATA ~ synopsis               }....................
SYNOPSIS = (
    'Enumerated model attributes mapping stored values to symbolic names.')
'''
Human-readable single-line synopsis of this package.
'''


DESCRIPTION = (
    '{} attaches accessors to model classes translating between the raw value '
    'of an attribute as stored (typically an integer column) and the '
    'symbolic name that value signifies, with configurable defaults, '
    'validation, per-name predicates and query scopes.'.format(NAME))
'''
Human-readable multiline description of this package.
'''

# ....................{ METADATA ~ authors                }....................
AUTHORS = 'The magicenum contributors'
'''
Human-readable list of all principal authors of this package as a
comma-delimited string.
'''
