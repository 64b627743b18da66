#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the interactive examples embedded in the docstrings of
all submodules of the :mod:`magicenum` package.
'''

# ....................{ IMPORTS                           }....................
import pytest

# ....................{ TESTS                             }....................
@pytest.mark.parametrize('module_name', (
    'magicenum.enum.enumdef',
    'magicenum.enum.enumdesc',
    'magicenum.enum.enummap',
    'magicenum.enum.enumscope',
    'magicenum.util.type.text.strs',
))
def test_docstring_examples(module_name: str) -> None:
    '''
    Test that all interactive examples embedded in the docstrings of the
    submodule with the passed fully-qualified name succeed.

    Parameters
    ----------
    module_name : str
        Fully-qualified name of the submodule to be tested.
    '''

    # Defer heavyweight imports.
    import doctest
    from importlib import import_module

    results = doctest.testmod(import_module(module_name))
    assert results.failed == 0
