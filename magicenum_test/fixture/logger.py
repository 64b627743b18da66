#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Autouse logging fixtures** (i.e., fixtures unconditionally configuring the
capture of log messages for all tests).
'''

# ....................{ IMPORTS                           }....................
from pytest import fixture

# ....................{ FIXTURES                          }....................
@fixture(autouse=True)
def magicenum_log_level(
    caplog: '_pytest.logging.LogCaptureFixture',
    pytestconfig: '_pytest.config.Config',
) -> None:
    '''
    Per-test autouse fixture capturing all messages logged by the package
    logger at or above the level passed by the ``--magicenum-log-level``
    command-line option (defaulting to ``DEBUG``).

    The builtin ``caplog`` fixture restores this logger's prior level at test
    teardown.
    '''

    # Defer heavyweight imports.
    from magicenum.util.io.log import logs

    caplog.set_level(
        pytestconfig.getoption('magicenum_log_level'),
        logger=logs.LOGGER_NAME,
    )
