#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
:mod:`setuptools`-based makefile instrumenting all high-level administration
tasks (e.g., installation, test running) for this package.
'''

# ....................{ KLUDGES                           }....................
# Explicitly register the root directory containing this top-level "setup.py"
# script to be importable for the remainder of this Python process if this
# directory has yet to be registered.
#
# Technically, this should *NOT* be required. Unfortunately, "pip" >= 19.0.0
# does *NOT* guarantee this to be the case under build isolation. See also:
#     https://github.com/pypa/pip/issues/6163

# Isolate this kludge to a private function for safety.
def _register_dir() -> None:

    # Avert thy eyes, purist Pythonistas!
    import os, sys

    # Absolute dirname of this directory.
    setup_dirname = os.path.dirname(os.path.realpath(__file__))

    # If the current PYTHONPATH does *NOT* already contain this directory...
    if setup_dirname not in sys.path:
        # Print this registration.
        print(
            'WARNING: Registering "setup.py" directory for importation under '
            'broken installer (e.g., pip >= 19.0.0)...',
            file=sys.stderr)

        # Append this directory to the current PYTHONPATH.
        sys.path.append(setup_dirname)

# Kludge us up the bomb.
_register_dir()

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from packages guaranteed to exist at the start of
# installation. This includes all standard Python and package modules but
# *NOT* third-party dependencies, which if currently uninstalled will only be
# installed at some later time in the installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import setuptools
from magicenum import metadata, metadeps

# ....................{ METADATA ~ seo                    }....................
_KEYWORDS = [
    'enum',
    'enumeration',
    'model',
    'orm',
    'attribute',
]
'''
List of all lowercase alphabetic keywords synopsising this package.
'''


# All "Programming Language :: Python :: "-prefixed strings are dynamically
# appended to this list by the _sanitize_classifiers() function below.
_CLASSIFIERS = [
    # PyPI-specific version type. The number specified here is a magic constant
    # with no relation to this package's version numbering scheme. *sigh*
    'Development Status :: 4 - Beta',

    # Miscellaneous metadata.
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Natural Language :: English',
    'Operating System :: OS Independent',
    'Topic :: Database',
    'Topic :: Software Development :: Libraries :: Python Modules',
]
'''
List of all PyPI-specific trove classifier strings synopsizing this package.

See Also
----------
https://pypi.org/classifiers
    Plaintext list of all trove classifier strings recognized by PyPI.
'''

# ....................{ SANITIZERS                        }....................
def _sanitize_classifiers(
    classifiers: list,
    python_version_min_parts: tuple,
    python_version_minor_max: int,
) -> list:
    '''
    List of all PyPI-specific trove classifier strings synopsizing this
    package, manufactured by appending classifiers synopsizing this package's
    support for each Python 3.x minor version (e.g.,
    ``Programming Language :: Python :: 3.10``) to a copy of the passed list.
    '''

    # Major version of Python required by this package.
    python_version_major = python_version_min_parts[0]

    # List of classifiers to return, copied from the passed list for safety.
    classifiers_sane = classifiers[:]

    # For each minor version of Python 3.x supported by this package,
    # formally classify this version as such.
    for python_version_minor in range(
        python_version_min_parts[1], python_version_minor_max + 1):
        classifiers_sane.append(
            'Programming Language :: Python :: {}.{}'.format(
                python_version_major, python_version_minor))

    return classifiers_sane

# ....................{ OPTIONS                           }....................
# Setuptools-specific options.
_SETUP_OPTIONS = {
    # ..................{ CORE                              }..................
    # Self-explanatory metadata.
    'name':             metadata.PACKAGE_NAME,
    'version':          metadata.VERSION,
    'author':           metadata.AUTHORS,
    'maintainer':       metadata.AUTHORS,
    'description':      metadata.SYNOPSIS,
    'long_description': metadata.DESCRIPTION,

    # ..................{ PYPI                              }..................
    # PyPi-specific metadata.
    'classifiers': _sanitize_classifiers(
        classifiers=_CLASSIFIERS,
        python_version_min_parts=metadata.PYTHON_VERSION_MIN_PARTS,
        python_version_minor_max=metadata.PYTHON_VERSION_MINOR_MAX,
    ),
    'keywords': _KEYWORDS,
    'license': metadata.LICENSE,
    'python_requires': '>=' + metadata.PYTHON_VERSION_MIN,

    # ..................{ DEPENDENCIES                      }..................
    # Mandatory runtime dependencies.
    'install_requires': metadeps.get_runtime_mandatory_tuple(),

    # Optional dependencies, installable via "pip" by suffixing the name of
    # this project by the "["- and "]"-delimited key defined below (e.g.,
    # "pip3 install magicenum[test]").
    'extras_require': {
        # All mandatory testing dependencies, copied from the "tests_require"
        # key below into an arbitrarily named extra.
        'test': metadeps.get_testing_mandatory_tuple(),
    },

    # Mandatory testing dependencies.
    'tests_require': metadeps.get_testing_mandatory_tuple(),

    # ..................{ PACKAGES                          }..................
    # List of the fully-qualified names of all Python packages to be installed,
    # including the top-level package and all subpackages of that package.
    # This thus excludes the top-level test package and all subpackages of
    # that package, test functionality *NOT* intended to be installed.
    'packages': setuptools.find_packages(exclude=(
        metadata.PACKAGE_NAME + '_test',
        metadata.PACKAGE_NAME + '_test.*',
        'build',
    )),

    # Install to an uncompressed directory rather than a compressed archive.
    'zip_safe': False,
}
'''
Dictionary passed to the subsequent call to the :func:`setup` function.
'''

# ....................{ SETUP                             }....................
setuptools.setup(**_SETUP_OPTIONS)
