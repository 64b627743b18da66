#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.util.type.text.strs` submodule.
'''

# ....................{ TESTS ~ tester                    }....................
def test_is_identifier() -> None:
    '''
    Test the :func:`magicenum.util.type.text.strs.is_identifier` tester.
    '''

    # Defer heavyweight imports.
    from magicenum.util.type.text.strs import is_identifier

    assert is_identifier('is_draft') is True
    assert is_identifier('_status') is True

    # Whitespace, leading digits and keywords are all prohibited.
    assert is_identifier('is_in progress') is False
    assert is_identifier('2fa') is False
    assert is_identifier('class') is False
    assert is_identifier('') is False

# ....................{ TESTS ~ inflector                 }....................
def test_pluralize() -> None:
    '''
    Test the :func:`magicenum.util.type.text.strs.pluralize` inflector.
    '''

    # Defer heavyweight imports.
    from magicenum.util.type.text.strs import pluralize

    assert pluralize('draft') == 'drafts'
    assert pluralize('status') == 'statuses'
    assert pluralize('box') == 'boxes'
    assert pluralize('batch') == 'batches'
    assert pluralize('wish') == 'wishes'
    assert pluralize('category') == 'categories'

    # Vowels preceding "y" take the default rule.
    assert pluralize('day') == 'days'
    assert pluralize('y') == 'ys'

# ....................{ TESTS ~ joiner                    }....................
def test_join_as_conjunction_double_quoted() -> None:
    '''
    Test the
    :func:`magicenum.util.type.text.strs.join_as_conjunction_double_quoted`
    joiner.
    '''

    # Defer heavyweight imports.
    from magicenum.util.type.text.strs import (
        join_as_conjunction_double_quoted)

    assert join_as_conjunction_double_quoted() == ''
    assert join_as_conjunction_double_quoted('draft') == '"draft"'
    assert join_as_conjunction_double_quoted('draft', 'published') == (
        '"draft" and "published"')
    assert join_as_conjunction_double_quoted(
        'unknown', 'draft', 'published') == (
        '"unknown", "draft", and "published"')

    # Single-quoted strings are requoted rather than quoted twice.
    assert join_as_conjunction_double_quoted("'draft'") == '"draft"'
