#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.enum.enumtable` submodule.
'''

# ....................{ IMPORTS                           }....................
import logging, pytest

# ....................{ GLOBALS                           }....................
TABLES_YAML = '''\
# Publication workflow.
statuses:
  unknown: 0
  draft: 1
  published: 0x2
roles:
  user: u
  admin: a
  guest: ~
'''
'''
Contents of a valid YAML file persisting two definition tables.
'''

# ....................{ TESTS                             }....................
def test_load_tables_pass(
    tmp_path: 'pathlib.Path',
    row_type: type,
    caplog: '_pytest.logging.LogCaptureFixture',
) -> None:
    '''
    Test the :func:`magicenum.enum.enumtable.load_tables` function against a
    valid YAML file.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Builtin fixture providing a temporary directory isolated to this test.
    row_type : type
        Host class isolated to this test.
    caplog : _pytest.logging.LogCaptureFixture
        Builtin fixture capturing log messages.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumdef import define_enum
    from magicenum.enum.enummap import ValueMap
    from magicenum.enum.enumtable import load_tables

    tables_file = tmp_path / 'tables.yaml'
    tables_file.write_text(TABLES_YAML, encoding='utf-8')

    tables = load_tables(tables_file)

    # Tables are loaded in file order as value maps of builtin scalars.
    assert list(tables) == ['statuses', 'roles']
    assert all(isinstance(table, ValueMap) for table in tables.values())
    assert dict(tables['statuses']) == {
        'unknown': 0, 'draft': 1, 'published': 2}
    assert type(tables['statuses']['published']) is int
    assert dict(tables['roles']) == {'user': 'u', 'admin': 'a', 'guest': None}

    # Filenames may also be strings.
    assert dict(load_tables(str(tables_file))['roles']) == dict(
        tables['roles'])

    # Loading is logged.
    assert any(
        record.levelno == logging.INFO and
        'Loaded 2 enum table(s)' in record.getMessage()
        for record in caplog.records
    )

    # Loaded tables are directly definable, defaulting to the absent value.
    define_enum(row_type, 'role', tables['roles'])
    assert row_type().role == 'guest'


def test_load_tables_fail(tmp_path: 'pathlib.Path') -> None:
    '''
    Test the :func:`magicenum.enum.enumtable.load_tables` function against
    invalid YAML files.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Builtin fixture providing a temporary directory isolated to this test.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumtable import load_tables
    from magicenum.exceptions import (
        MagicEnumConfigException, MagicEnumMappingException)

    def write_yaml(yaml_text: str) -> 'pathlib.Path':
        yaml_file = tmp_path / 'tables.yml'
        yaml_file.write_text(yaml_text, encoding='utf-8')
        return yaml_file

    # Top-level sequences and empty files are *NOT* mappings.
    with pytest.raises(MagicEnumConfigException, match=r'not a mapping'):
        load_tables(write_yaml('- unknown\n- draft\n'))
    with pytest.raises(MagicEnumConfigException, match=r'not a mapping'):
        load_tables(write_yaml(''))

    # Labels must be strings.
    with pytest.raises(MagicEnumConfigException, match=r'label 1'):
        load_tables(write_yaml('1:\n  draft: 1\n'))

    # Tables must be mappings.
    with pytest.raises(MagicEnumConfigException, match=r'"statuses"'):
        load_tables(write_yaml('statuses: [unknown, draft]\n'))

    # Raw values must be integers, strings or null.
    for value_yaml in ('1.5', 'true', '[1, 2]'):
        with pytest.raises(MagicEnumConfigException, match=r'"draft"'):
            load_tables(write_yaml(
                'statuses:\n  draft: {}\n'.format(value_yaml)))

    # Tables must be invertible.
    with pytest.raises(MagicEnumMappingException):
        load_tables(write_yaml('statuses:\n  draft: 1\n  pending: 1\n'))


def test_load_tables_filetype(
    tmp_path: 'pathlib.Path',
    caplog: '_pytest.logging.LogCaptureFixture',
) -> None:
    '''
    Test that the :func:`magicenum.enum.enumtable.load_tables` function warns
    on files suffixed by neither ``.yaml`` nor ``.yml``.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Builtin fixture providing a temporary directory isolated to this test.
    caplog : _pytest.logging.LogCaptureFixture
        Builtin fixture capturing log messages.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumtable import load_tables

    tables_file = tmp_path / 'tables.txt'
    tables_file.write_text(TABLES_YAML, encoding='utf-8')

    # Such files are still loaded.
    assert list(load_tables(tables_file)) == ['statuses', 'roles']

    assert any(
        record.levelno == logging.WARNING and
        'filetype "txt" neither "yaml" nor "yml"' in record.getMessage()
        for record in caplog.records
    )
