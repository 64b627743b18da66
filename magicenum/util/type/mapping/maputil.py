#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **mapping utilities** (i.e., functions operating on dictionary-like
types and instances).
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from magicenum.exceptions import MagicEnumMappingException
from magicenum.util.type.types import MappingType

# ....................{ EXCEPTIONS                        }....................
@beartype
def die_unless_values_unique(mapping: MappingType) -> None:
    '''
    Raise an exception unless *all* values of the passed dictionary are
    **unique** (i.e., no two values of two distinct key-value pairs are equal).

    Parameters
    ----------
    mapping : MappingType
        Dictionary to be inspected.

    Raises
    ----------
    MagicEnumMappingException
        If at least one value of this dictionary is a duplicate.
    '''

    # Avoid circular import dependencies.
    from magicenum.util.type.text import strs

    # If one or more values of this dictionary are duplicates...
    if not is_values_unique(mapping):
        # Tuple of the representations of all duplicate values.
        values_duplicate = tuple(
            repr(value) for value in get_values_duplicate(mapping))

        # Raise an exception embedding these values.
        raise MagicEnumMappingException(
            'Dictionary values {} duplicate.'.format(
                strs.join_as_conjunction_double_quoted(*values_duplicate)))

# ....................{ TESTERS                           }....................
@beartype
def is_values_unique(mapping: MappingType) -> bool:
    '''
    ``True`` only if *all* values of the passed dictionary are **unique** (i.e.,
    no two values of two distinct key-value pairs are equal).

    Parameters
    ----------
    mapping : MappingType
        Dictionary to be inspected. All values of this dictionary are assumed
        to be hashable.

    Returns
    ----------
    bool
        ``True`` only if *all* values of this dictionary are unique.
    '''

    # Sets silently ignore duplicates, which this comparison detects.
    return len(set(mapping.values())) == len(mapping)

# ....................{ GETTERS                           }....................
@beartype
def get_values_duplicate(mapping: MappingType) -> tuple:
    '''
    Tuple of all values of the passed dictionary mapped to by two or more keys,
    in the order their first duplicate is encountered.

    Parameters
    ----------
    mapping : MappingType
        Dictionary to be inspected. All values of this dictionary are assumed
        to be hashable.

    Returns
    ----------
    tuple
        Tuple of all duplicate values of this dictionary.
    '''

    # Set of all values visited so far.
    values_visited = set()

    # Dictionary of all duplicate values visited so far. Dictionaries preserve
    # insertion order; sets do not.
    values_duplicate = {}

    for value in mapping.values():
        if value in values_visited:
            values_duplicate[value] = None
        else:
            values_visited.add(value)

    return tuple(values_duplicate)
