#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
High-level support facilities for Yet Another Markup Language (YAML), the file
format in which definition tables may be persisted.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from magicenum.util.io.log import logs
from magicenum.util.type.types import MappingType
from pathlib import Path
from ruamel import yaml as ruamel_yaml

# ....................{ GLOBALS                           }....................
YAML_FILETYPES = {'yaml', 'yml',}
'''
Set of all YAML-compliant filetypes.
'''

# ....................{ LOADERS                           }....................
@beartype
def load(filename: str | Path) -> object:
    '''
    Load (i.e., open and read, deserialize) and return the contents of the
    YAML-formatted file with the passed path via a safe roundtripping
    :mod:`ruamel.yaml` parser.

    Parameters
    ----------
    filename : str | Path
        Absolute or relative filename of the YAML-formatted file to be loaded.

    Returns
    ----------
    object
        Object corresponding to the contents of this file, typically a
        dictionary-like :class:`ruamel.yaml.comments.CommentedMap`.
    '''

    # If this filename has no YAML-compliant filetype, log a warning.
    _warn_unless_filetype_yaml(filename)

    # With this YAML file opened for character-oriented reading...
    with open(filename, 'r', encoding='utf-8') as yaml_file:
        # Safe roundtripping YAML parser.
        ruamel_parser = _make_ruamel_parser()

        # Load and return the contents of this file.
        return ruamel_parser.load(yaml_file)

# ....................{ TESTERS                           }....................
@beartype
def is_mapping(yaml_data: object) -> bool:
    '''
    ``True`` only if the passed object deserialized from a YAML file is a
    **YAML mapping** (i.e., dictionary-like block or flow collection).
    '''

    # "CommentedMap" subclasses "ordereddict" and hence the Mapping interface.
    return isinstance(yaml_data, MappingType)

# ....................{ MAKERS                            }....................
def _make_ruamel_parser() -> ruamel_yaml.YAML:
    '''
    Safe roundtripping :mod:`ruamel.yaml` parser, where:

    * "Safe" implies this parser ignores all pragmas in this YAML file
      instructing parsers to construct arbitrary Python objects, whose YAML
      syntax is of the form: ``!!python/object:module.name { ... state ... }``.
    * "Roundtripping" implies the object deserialized from this YAML file
      preserves the order of all keys of all mappings of this file, which
      definition tables require.
    '''

    # Safe roundtripping YAML parser. Note that, by design, the "rt" (i.e.,
    # roundtripping) parser is *ALWAYS* guaranteed to be safe.
    ruamel_parser = ruamel_yaml.YAML(typ='rt')

    # Permit this parser to roundtrip Unicode characters.
    ruamel_parser.allow_unicode = True

    return ruamel_parser

# ....................{ PRIVATE ~ warners                 }....................
def _warn_unless_filetype_yaml(filename: str | Path) -> None:
    '''
    Log a non-fatal warning unless the passed filename has a YAML-compliant
    filetype (i.e., is suffixed by either ``.yaml`` or ``.yml``).
    '''

    # Filetype of this file excluding the prefixing "." if any.
    filetype = Path(filename).suffix[1:] or None

    # If this filetype is *NOT* YAML-compliant...
    if filetype not in YAML_FILETYPES:
        # If this file has *NO* filetype, log an appropriate warning.
        if filetype is None:
            logs.log_warning('YAML file "%s" has no filetype.', filename)
        # Else, this file has a filetype. Log an appropriate warning.
        else:
            logs.log_warning(
                'YAML file "%s" filetype "%s" neither "yaml" nor "yml".',
                filename, filetype)
