#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.metadata` and
:mod:`magicenum.metadeps` submodules.
'''

# ....................{ TESTS                             }....................
def test_metadata() -> None:
    '''
    Test the :mod:`magicenum.metadata` submodule.
    '''

    # Defer heavyweight imports.
    import magicenum
    from magicenum import metadata

    assert magicenum.__version__ == metadata.VERSION
    assert magicenum.__version_info__ == metadata.VERSION_PARTS
    assert all(isinstance(part, int) for part in metadata.VERSION_PARTS)
    assert metadata.PYTHON_VERSION_MIN_PARTS[0] == 3


def test_metadeps() -> None:
    '''
    Test the :mod:`magicenum.metadeps` submodule.
    '''

    # Defer heavyweight imports.
    from magicenum import metadeps

    assert metadeps.get_runtime_mandatory_tuple() == (
        'beartype >= 0.16.0', 'ruamel.yaml >= 0.15.0')
    assert metadeps.get_testing_mandatory_tuple() == ('pytest >= 5.0.0',)
