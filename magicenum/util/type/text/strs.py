#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **string** facilities.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from keyword import iskeyword

# ....................{ GLOBALS                           }....................
_PLURAL_SUFFIXES_ES = ('s', 'x', 'z', 'ch', 'sh')
'''
Tuple of all suffixes of English nouns pluralized by appending ``es`` rather
than ``s`` (e.g., ``box`` to ``boxes``).
'''


_VOWELS = 'aeiou'
'''
String of all lowercase English vowels.
'''

# ....................{ TESTERS                           }....................
@beartype
def is_identifier(text: str) -> bool:
    '''
    ``True`` only if the passed string is a valid unqualified **Python
    identifier** (i.e., non-keyword name assignable as an attribute of a
    class).

    Parameters
    ----------
    text : str
        String to be tested.

    Returns
    ----------
    bool
        ``True`` only if this string is an unqualified Python identifier.
    '''

    return text.isidentifier() and not iskeyword(text)

# ....................{ JOINERS                           }....................
def join_as(
    *texts,
    delimiter_if_two: str,
    delimiter_if_three_or_more_nonlast: str,
    delimiter_if_three_or_more_last: str
) -> str:
    '''
    Join the passed strings in a human-readable manner.

    If:

    * No strings are passed, the empty string is returned.
    * One string is passed, this string is returned as is without modification.
    * Two strings are passed, these strings are joined with the passed
      ``delimiter_if_two`` separator.
    * Three or more strings are passed:

      * All such strings except the last two are joined with the passed
        ``delimiter_if_three_or_more_nonlast`` separator.
      * The last two such strings are joined with the passed
        ``delimiter_if_three_or_more_last`` separator.

    Examples
    ----------
    >>> join_as(
    ...     'unknown', 'draft', 'published',
    ...     delimiter_if_two=' and ',
    ...     delimiter_if_three_or_more_nonlast=', ',
    ...     delimiter_if_three_or_more_last=', and '
    ... )
    'unknown, draft, and published'
    '''

    # Number of passed strings.
    texts_count = len(texts)

    if texts_count == 0:
        return ''
    elif texts_count == 1:
        return texts[0]
    elif texts_count == 2:
        return '{}{}{}'.format(texts[0], delimiter_if_two, texts[1])

    # All such strings except the last two, joined appropriately.
    texts_nonlast = delimiter_if_three_or_more_nonlast.join(texts[0:-2])

    # The last two such strings, joined appropriately.
    texts_last = '{}{}{}'.format(
        texts[-2], delimiter_if_three_or_more_last, texts[-1])

    return '{}{}{}'.format(
        texts_nonlast, delimiter_if_three_or_more_nonlast, texts_last)


def join_as_conjunction_double_quoted(*texts: str) -> str:
    '''
    Conjunctively double-quote and join all passed strings in a human-readable
    manner.

    Specifically:

    * All passed strings are double-quoted.
    * All passed strings excluding the last two are joined with ``, ``.
    * The last two passed strings are joined with ``, and ``.
    '''

    # Tuple of all passed strings double-quoted.
    texts_quoted = tuple(double_quote(text) for text in texts)

    return join_as(
        *texts_quoted,
        delimiter_if_two=' and ',
        delimiter_if_three_or_more_nonlast=', ',
        delimiter_if_three_or_more_last=', and '
    )

# ....................{ QUOTERS                           }....................
def double_quote(text: str) -> str:
    '''
    Double-quote the passed string in a human-readable manner.

    Specifically (in order):

    #. All prefixing and suffixing whitespace is removed from this string.
    #. If this string is either double- or single-quoted, these quotes are
       removed.
    #. The resulting string is double-quoted and returned.
    '''

    # Remove all prefixing and suffixing whitespace from this string.
    text = text.strip()

    # If this string is already either double- or single-quoted, strip these
    # delimiting quotes for simplicity.
    if len(text) >= 2 and (
        (text[0] == '"' and text[-1] == '"') or
        (text[0] == "'" and text[-1] == "'")):
        text = text[1:-1]

    return '"{}"'.format(text)

# ....................{ INFLECTORS                        }....................
@beartype
def pluralize(noun: str) -> str:
    '''
    Plural form of the passed singular lowercase English noun, as inflected by
    a small set of regular English pluralization rules.

    Irregular nouns (e.g., ``child``) are pluralized by the default rule and
    hence incorrectly. Since this function only names generated query scopes,
    that imprecision is harmless; callers requiring a specific name may simply
    define that scope themselves.

    Parameters
    ----------
    noun : str
        Singular noun to be pluralized.

    Returns
    ----------
    str
        Plural form of this noun.

    Examples
    ----------
        >>> from magicenum.util.type.text.strs import pluralize
        >>> pluralize('draft')
        'drafts'
        >>> pluralize('process')
        'processes'
        >>> pluralize('category')
        'categories'
        >>> pluralize('day')
        'days'
    '''

    # If this noun is suffixed by a sibilant, append "es".
    if noun.endswith(_PLURAL_SUFFIXES_ES):
        return noun + 'es'
    # If this noun is suffixed by a consonant followed by "y", replace that
    # "y" by "ies".
    elif (
        len(noun) >= 2 and
        noun[-1] == 'y' and
        noun[-2] not in _VOWELS
    ):
        return noun[:-1] + 'ies'

    # Else, append "s".
    return noun + 's'
