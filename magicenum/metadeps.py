#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Metadata constants synopsizing high-level package dependencies.

Design
----------
Like the sibling :mod:`magicenum.metadata` submodule, this submodule imports
*only* from the standard library, as the top-level ``setup.py`` script imports
this submodule *before* any third-party dependencies are installed.
'''

# ....................{ IMPORTS                           }....................
from collections.abc import Mapping

# ....................{ LIBS ~ runtime : mandatory        }....................
RUNTIME_MANDATORY = {
    # Callables accepting arbitrary user-defined tables and options are
    # type-checked at call time by the @beartype decorator. Version 0.16.0
    # first stabilized the "beartype.typing" compatibility layer imported
    # throughout this codebase.
    'beartype': '>= 0.16.0',

    # Definition tables may be loaded from YAML files. Version 0.15.0 first
    # introduced the object-oriented "ruamel.yaml.YAML" API, which this package
    # exclusively uses.
    'ruamel.yaml': '>= 0.15.0',
}
'''
Dictionary mapping from the :mod:`setuptools`-specific project name of each
mandatory runtime dependency for this package to the suffix of a
:mod:`setuptools`-specific requirements string constraining this dependency.
'''

# ....................{ LIBS ~ testing : mandatory        }....................
TESTING_MANDATORY = {
    # The "tmp_path" fixture first appeared in pytest 3.9.0, while
    # "pytest.raises(match=...)" semantics stabilized in pytest 5.0.0.
    'pytest': '>= 5.0.0',
}
'''
Dictionary mapping from the :mod:`setuptools`-specific project name of each
mandatory testing dependency for this package to the suffix of a
:mod:`setuptools`-specific requirements string constraining this dependency.
'''

# ....................{ GETTERS                           }....................
def get_runtime_mandatory_tuple() -> tuple:
    '''
    Tuple listing the :mod:`setuptools`-specific requirement string containing
    the mandatory name and optional version constraints of each mandatory
    runtime dependency for this package, dynamically converted from the
    :data:`RUNTIME_MANDATORY` dictionary.
    '''

    return _get_requirements_str_from_dict(RUNTIME_MANDATORY)


def get_testing_mandatory_tuple() -> tuple:
    '''
    Tuple listing the :mod:`setuptools`-specific requirement string containing
    the mandatory name and optional version constraints of each mandatory
    testing dependency for this package, dynamically converted from the
    :data:`TESTING_MANDATORY` dictionary.
    '''

    return _get_requirements_str_from_dict(TESTING_MANDATORY)

# ....................{ PRIVATE ~ converters              }....................
def _get_requirements_str_from_dict(requirements: Mapping) -> tuple:
    '''
    Convert the passed dictionary of requirements into a tuple of
    :mod:`setuptools`-specific requirements strings (e.g.,
    ``('beartype >= 0.16.0',)``).
    '''

    return tuple(
        '{} {}'.format(project_name, constraint).strip()
        for project_name, constraint in requirements.items()
    )
