#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level logging facilities.

Logging Hierarchy
----------
Loggers are hierarchically structured according to their ``.``-delimited
names. All messages logged by this package are logged to the package logger
:data:`LOGGER_NAME` and hence implicitly propagated up to the root logger.

This package never configures logging itself (e.g., by adding handlers or
setting levels). Applications embedding this package configure logging as
they see fit, typically with the :func:`logging.basicConfig` function.
'''

# ....................{ IMPORTS                           }....................
import logging
from beartype import beartype
from beartype.typing import Optional

# ....................{ GLOBALS                           }....................
LOGGER_NAME = 'magicenum'
'''
Name of the package logger to which all messages are logged by default.
'''

# ....................{ GETTERS                           }....................
@beartype
def get(logger_name: Optional[str] = None) -> logging.Logger:
    '''
    Logger with the passed ``.``-delimited name, defaulting to the **package
    logger** (i.e., :data:`LOGGER_NAME`).

    Parameters
    ----------
    logger_name : Optional[str]
        ``.``-delimited name of the logger to retrieve. Defaults to ``None``,
        in which case the package logger is retrieved.
    '''

    # If no name was passed, default to the package logger.
    if logger_name is None:
        logger_name = LOGGER_NAME

    return logging.getLogger(logger_name)

# ....................{ LOGGERS                           }....................
def log_debug(message: str, *args, **kwargs) -> None:
    '''
    Log the passed debug message with the package logger, formatted with the
    passed ``%``-style positional and keyword arguments.
    '''

    get().debug(message, *args, **kwargs)


def log_info(message: str, *args, **kwargs) -> None:
    '''
    Log the passed informational message with the package logger, formatted
    with the passed ``%``-style positional and keyword arguments.
    '''

    get().info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    '''
    Log the passed warning message with the package logger, formatted with the
    passed ``%``-style positional and keyword arguments.
    '''

    get().warning(message, *args, **kwargs)
