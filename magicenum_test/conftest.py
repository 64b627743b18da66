#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Global test configuration** (i.e., early-time configuration guaranteed to be
run by :mod:`pytest` *after* passed command-line arguments are parsed) for
this test suite.

:mod:`pytest` implicitly imports *all* functionality defined by this module
into *all* submodules of this subpackage.

See Also
----------
:mod:`conftest`
    Root test configuration applied before this configuration.
'''

# ....................{ IMPORTS ~ fixture : manual        }....................
# Import fixtures required to be manually required by other fixtures and tests.

from magicenum_test.fixture.hoster import (
    roles,
    row_type,
    statuses,
)

# ....................{ IMPORTS ~ fixture : autouse       }....................
# Import fixtures automatically run at the start of each test *AFTER*
# importing all non-autouse fixtures possibly required by these fixtures.

from magicenum_test.fixture.logger import magicenum_log_level
