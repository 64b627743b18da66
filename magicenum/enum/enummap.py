#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Value maps** (i.e., immutable bidirectional mappings between the symbolic
names and stored values of a definition table).
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from collections.abc import Mapping
from magicenum.exceptions import MagicEnumMappingException
from magicenum.util.type.mapping import maputil
from magicenum.util.type.types import (
    EnumName,
    EnumRawValue,
    EnumType,
    MappingOrEnumTypes,
)
from types import MappingProxyType

# ....................{ CLASSES                           }....................
class ValueMap(Mapping):
    '''
    **Value map** (i.e., immutable one-to-one dictionary from the symbolic
    names of a definition table to the raw values those names signify,
    supporting efficient reverse lookup of names by raw values).

    Iterating over a value map yields its names in **declaration order**
    (i.e., the order in which the definition table declared them). Since value
    maps are immutable, a single value map may be safely shared between
    multiple enumerated attributes (e.g., ``status`` and ``previous_status``
    over the same domain).

    Absent Values
    ----------
    Names may map to ``None``, the **absent value** signifying an empty storage
    slot. ``None`` is distinct from every other raw value *including* ``0``:

        >>> from magicenum.enum.enummap import ValueMap
        >>> value_map = ValueMap({'unknown': 0, 'simple': None})
        >>> value_map.backward(None)
        'simple'
        >>> value_map.backward(0)
        'unknown'

    Attributes
    ----------
    _name_to_value : MappingProxyType
        Immutable dictionary from each name to that name's raw value.
    _value_to_name : MappingProxyType
        Immutable dictionary from each raw value to that value's name.
    '''

    # ..................{ INITIALIZERS                      }..................
    @beartype
    def __init__(self, table: MappingOrEnumTypes) -> None:
        '''
        Initialize this value map from the passed definition table.

        Parameters
        ----------
        table : MappingOrEnumTypes
            Either:

            * A dictionary mapping each name (a string) to that name's raw
              value (a hashable, typically an integer or ``None``).
            * An :class:`enum.Enum` subclass, whose members are read as names
              mapping to their values.

        Raises
        ----------
        MagicEnumMappingException
            If either:

            * Any name is *not* a string.
            * Any raw value is unhashable.
            * Two or more names map to the same raw value, in which case this
              table is *not* invertible.
        '''

        # If this table is an enumeration type, convert its members into a
        # standard dictionary.
        if isinstance(table, EnumType):
            table = {member.name: member.value for member in table}

        # Validate this table *BEFORE* inverting it.
        _die_unless_table(table)

        # Freeze shallow copies of this table and its inverse, isolating this
        # value map from subsequent modifications of the caller's table.
        self._name_to_value = MappingProxyType(dict(table))
        self._value_to_name = MappingProxyType({
            value: name for name, value in table.items()})

    # ..................{ DUNDERS                           }..................
    def __getitem__(self, name: EnumName) -> EnumRawValue:
        return self._name_to_value[name]


    def __iter__(self):
        return iter(self._name_to_value)


    def __len__(self) -> int:
        return len(self._name_to_value)


    def __repr__(self) -> str:
        return '{}({!r})'.format(
            self.__class__.__name__, dict(self._name_to_value))

    # ..................{ PROPERTIES                        }..................
    @property
    def names(self) -> tuple:
        '''
        Tuple of all names of this value map in declaration order.
        '''

        return tuple(self._name_to_value)


    @property
    def values_raw(self) -> tuple:
        '''
        Tuple of all raw values of this value map in declaration order.
        '''

        return tuple(self._name_to_value.values())


    @property
    def inverse(self) -> MappingProxyType:
        '''
        Immutable dictionary from each raw value of this value map to that
        value's name.
        '''

        return self._value_to_name

    # ..................{ TESTERS                           }..................
    def has_name(self, name: object) -> bool:
        '''
        ``True`` only if this value map contains the passed name.

        Unhashable objects are never names and thus silently reduce to
        ``False`` rather than raising an exception.
        '''

        try:
            return name in self._name_to_value
        except TypeError:
            return False


    def has_value(self, value: object) -> bool:
        '''
        ``True`` only if some name of this value map maps to the passed raw
        value.

        Unhashable objects are never raw values and thus silently reduce to
        ``False`` rather than raising an exception.
        '''

        try:
            return value in self._value_to_name
        except TypeError:
            return False

    # ..................{ LOOKUPS                           }..................
    def forward(self, name: object) -> EnumRawValue:
        '''
        Raw value the passed name maps to if this value map contains this name
        *or* ``None`` otherwise.

        Since names may also map to ``None``, callers distinguishing missing
        names from names mapping to the absent value should call the
        :meth:`has_name` tester first.
        '''

        return self._name_to_value.get(name) if self.has_name(name) else None


    def backward(self, value: object) -> EnumName | None:
        '''
        Name the passed raw value maps back to if some name of this value map
        maps to this value *or* ``None`` otherwise.
        '''

        return self._value_to_name[value] if self.has_value(value) else None

# ....................{ PRIVATE ~ validators              }....................
def _die_unless_table(table: Mapping) -> None:
    '''
    Raise an exception unless the passed dictionary is a valid **definition
    table** (i.e., one-to-one mapping from string names to hashable raw
    values).
    '''

    for name, value in table.items():
        if not isinstance(name, str):
            raise MagicEnumMappingException(
                'Enum name {!r} not a string.'.format(name))

        # Containers of unhashable items (e.g., "([],)") satisfy the Hashable
        # interface and are only detectable by attempting to hash them.
        try:
            hash(value)
        except TypeError as exception:
            raise MagicEnumMappingException(
                'Enum "{}" value {!r} unhashable.'.format(
                    name, value)) from exception

    # Injectivity is a prerequisite for inversion. Note that the original
    # dictionary is preserved as is on failure.
    maputil.die_unless_values_unique(table)
