#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Top-level package namespace.

For PEP 8 compliance, this namespace exposes a subset of the metadata constants
provided by the :mod:`magicenum.metadata` module commonly inspected by external
automation.

Enumerated attributes themselves are defined by the
:func:`magicenum.enum.enumdef.define_enum` function and the
:func:`magicenum.enum.enumdef.enum_attr` class decorator.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from modules guaranteed to exist at the start of
# installation. This includes all standard Python and package modules but *NOT*
# third-party dependencies, which if currently uninstalled will only be
# installed at some later time in the installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from magicenum.metadata import VERSION as __version__
from magicenum.metadata import VERSION_PARTS as __version_info__

# ....................{ GLOBALS                           }....................
# Declare PEP 8-compliant version constants expected by external automation.

__version__
'''
Human-readable package version as a ``.``-delimited string.
'''


__version_info__
'''
Machine-readable package version as a tuple of integers.
'''
