#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Root test configuration** (i.e., early-time configuration guaranteed to be
run by :mod:`pytest` *before* passed command-line arguments are parsed) for
this test suite.

Caveats
----------
For safety, this configuration should contain *only* early-time hooks
absolutely required by :mod:`pytest` design to be defined in this
configuration (e.g., :func:`pytest_addoption`).

See Also
----------
:mod:`magicenum_test.conftest`
    Global test configuration applied after this configuration.
'''

# ....................{ IMPORTS                           }....................
import sys

# ....................{ HOOKS ~ option                    }....................
def pytest_addoption(parser: '_pytest.config.Parser') -> None:
    '''
    Hook run immediately on :mod:`pytest` startup *before* parsing command-line
    arguments, registering package-specific options.

    Options
    ----------
    ``--magicenum-log-level``
        Minimum level of messages logged by the package logger captured by the
        builtin ``caplog`` fixture (e.g., ``DEBUG``). Defaults to ``DEBUG``,
        exposing the fallbacks logged on invalid reads and writes.

    Parameters
    ----------
    parser : _pytest.config.Parser
        :mod:`pytest`-specific command-line argument parser, inspired by the
        :mod:`argparse` API.
    '''

    parser.addoption(
        '--magicenum-log-level',
        dest='magicenum_log_level',
        default='DEBUG',
        help='minimum level of package log messages captured by tests',
        metavar='LEVEL',
    )

# ....................{ HOOKS ~ session : start           }....................
def pytest_sessionstart(session: '_pytest.main.Session') -> None:
    '''
    Hook run immediately *before* starting the current test session.

    Parameters
    ----------
    session: _pytest.main.Session
        :mod:`pytest`-specific test session object.
    '''

    _print_metadata()


def _print_metadata() -> None:
    '''
    Print test-specific metadata for debuggability and quality assurance (QA).
    '''

    # Print a header for disambiguity.
    print('------[ paths ]------')

    # Print the absolute dirname of the system-wide Python prefix and current
    # Python prefix, which differs from the former under venvs.
    print('python prefix (system [base]): ' + sys.base_prefix)
    print('python prefix (current): ' + sys.prefix)

    # Defer heavyweight imports until *AFTER* printing the above metadata.
    import magicenum
    from magicenum import metadeps

    # Print the absolute dirname of the top-level "magicenum" package.
    print('project path: ' + magicenum.__path__[0])

    # Print the version of this package and its mandatory dependencies.
    print('------[ versions ]------')
    print('magicenum: ' + magicenum.__version__)
    print('requirements: ' + ', '.join(metadeps.get_runtime_mandatory_tuple()))
