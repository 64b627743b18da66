#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.util.type.mapping.maputil`
submodule.
'''

# ....................{ IMPORTS                           }....................
import pytest

# ....................{ TESTS                             }....................
def test_values_unique_pass() -> None:
    '''
    Test aspects of the :mod:`magicenum.util.type.mapping.maputil` submodule
    intended to succeed.
    '''

    # Defer heavyweight imports.
    from magicenum.util.type.mapping import maputil

    # Dictionaries whose values are and are not unique, respectively.
    unique = {'unknown': 0, 'draft': 1, 'simple': None}
    duplicate = {'unknown': 0, 'draft': 1, 'legacy': 0, 'old': 1, 'new': 2}

    assert maputil.is_values_unique(unique) is True
    assert maputil.is_values_unique(duplicate) is False
    assert maputil.is_values_unique({}) is True

    # Duplicate values are reported in order of their first duplication.
    assert maputil.get_values_duplicate(unique) == ()
    assert maputil.get_values_duplicate(duplicate) == (0, 1)

    # Validating a dictionary of unique values silently succeeds.
    maputil.die_unless_values_unique(unique)


def test_values_unique_fail() -> None:
    '''
    Test aspects of the :mod:`magicenum.util.type.mapping.maputil` submodule
    intended to fail.
    '''

    # Defer heavyweight imports.
    from magicenum.exceptions import MagicEnumMappingException
    from magicenum.util.type.mapping import maputil

    with pytest.raises(MagicEnumMappingException, match=r'"0" and "1"'):
        maputil.die_unless_values_unique(
            {'unknown': 0, 'draft': 1, 'legacy': 0, 'old': 1})
