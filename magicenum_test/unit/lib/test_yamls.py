#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.lib.yaml.yamls` submodule.
'''

# ....................{ IMPORTS                           }....................
import logging

# ....................{ TESTS                             }....................
def test_yamls_load(tmp_path: 'pathlib.Path') -> None:
    '''
    Test the :func:`magicenum.lib.yaml.yamls.load` function.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Builtin fixture providing a temporary directory isolated to this test.
    '''

    # Defer heavyweight imports.
    from magicenum.lib.yaml import yamls

    yaml_file = tmp_path / 'moods.yaml'
    yaml_file.write_text(
        'moods:\n  sérénité: 3\n  colère: 1\n  ennui: 2\n', encoding='utf-8')

    yaml_data = yamls.load(yaml_file)

    # Mappings preserve key order, including non-ASCII keys.
    assert yamls.is_mapping(yaml_data) is True
    assert yamls.is_mapping(yaml_data['moods']) is True
    assert list(yaml_data['moods']) == ['sérénité', 'colère', 'ennui']
    assert yamls.is_mapping(['sérénité']) is False


def test_yamls_filetype(
    tmp_path: 'pathlib.Path',
    caplog: '_pytest.logging.LogCaptureFixture',
) -> None:
    '''
    Test that the :func:`magicenum.lib.yaml.yamls.load` function warns on
    files with no filetype.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Builtin fixture providing a temporary directory isolated to this test.
    caplog : _pytest.logging.LogCaptureFixture
        Builtin fixture capturing log messages.
    '''

    # Defer heavyweight imports.
    from magicenum.lib.yaml import yamls

    yaml_file = tmp_path / 'moods'
    yaml_file.write_text('- calm\n', encoding='utf-8')

    assert list(yamls.load(yaml_file)) == ['calm']
    assert [
        record.getMessage()
        for record in caplog.records
        if record.levelno == logging.WARNING
    ] == ['YAML file "{}" has no filetype.'.format(yaml_file)]
