#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Definition table files** (i.e., YAML-formatted files persisting one or more
definition tables) facilities.

File Format
----------
Each such file is a top-level YAML mapping from an arbitrary **label** (e.g.,
``statuses``) to a definition table, itself a YAML mapping from each name to
that name's raw value. YAML ``~`` and ``null`` both signify the absent value
(i.e., ``None``):

.. code-block:: yaml

   statuses:
     unknown: 0
     draft: 1
     published: 2
   roles:
     user: u
     admin: a
     guest: ~

Raw values are restricted to integers, strings and ``null``, the only scalar
types commonly stored by persistence layers.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from magicenum.enum.enummap import ValueMap
from magicenum.exceptions import MagicEnumConfigException
from magicenum.lib.yaml import yamls
from magicenum.util.io.log import logs
from magicenum.util.type.types import EnumRawValue, EnumTable
from pathlib import Path

# ....................{ LOADERS                           }....................
@beartype
def load_tables(filename: str | Path) -> dict:
    '''
    Load all definition tables from the YAML-formatted file with the passed
    path into a dictionary mapping from the label of each such table to the
    :class:`ValueMap` of that table, in file order.

    Parameters
    ----------
    filename : str | Path
        Absolute or relative filename of the YAML-formatted file to be loaded.
        If this filename is suffixed by neither ``.yaml`` nor ``.yml``, a
        non-fatal warning is logged.

    Returns
    ----------
    dict
        Dictionary mapping from each table label to that table's value map.

    Raises
    ----------
    MagicEnumConfigException
        If either:

        * This file is *not* a top-level YAML mapping.
        * Any label is *not* a string.
        * Any table is *not* a YAML mapping.
        * Any raw value is neither an integer, string nor ``null``.
    MagicEnumMappingException
        If any table maps two or more names to the same raw value.
    '''

    # Object deserialized from this file.
    yaml_data = yamls.load(filename)

    # If this object is *NOT* a mapping, raise an exception.
    if not yamls.is_mapping(yaml_data):
        raise MagicEnumConfigException(
            'YAML file "{}" not a mapping of enum tables.'.format(filename))

    # Dictionary mapping from each table label to that table's value map.
    value_maps = {}

    for label, table in yaml_data.items():
        if not isinstance(label, str):
            raise MagicEnumConfigException(
                'YAML file "{}" enum table label {!r} not a string.'.format(
                    filename, label))

        value_maps[label] = ValueMap(_convert_table(
            filename=filename, label=label, table=table))

    logs.log_info(
        'Loaded %d enum table(s) from YAML file "%s".',
        len(value_maps), filename)

    return value_maps

# ....................{ PRIVATE ~ converters              }....................
def _convert_table(
    filename: str | Path, label: str, table: object) -> EnumTable:
    '''
    Convert the passed table deserialized from a YAML file into a standard
    dictionary of builtin scalars, validating this table in the process.
    '''

    # If this table is *NOT* a mapping, raise an exception.
    if not yamls.is_mapping(table):
        raise MagicEnumConfigException(
            'YAML file "{}" enum table "{}" not a mapping.'.format(
                filename, label))

    return {
        # Names are validated by the "ValueMap" class itself.
        name: _convert_value(
            filename=filename, label=label, name=name, value=value)
        for name, value in table.items()
    }


def _convert_value(
    filename: str | Path, label: str, name: object, value: object,
) -> EnumRawValue:
    '''
    Convert the passed raw value deserialized from a YAML file into a builtin
    integer, string or ``None``.

    The roundtripping YAML parser deserializes some scalars into subclasses of
    builtin types preserving their formatting (e.g., ``ScalarInt`` for
    hexadecimal integers), which this function reduces to their builtin types.
    '''

    if value is None:
        return None
    # YAML booleans are integers by Python's reckoning but not raw values.
    elif isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    elif isinstance(value, str):
        return str(value)

    raise MagicEnumConfigException(
        'YAML file "{}" enum table "{}" name "{}" value {!r} '
        'neither an integer, string nor null.'.format(
            filename, label, name, value))
