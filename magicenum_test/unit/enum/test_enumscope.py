#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.enum.enumscope` submodule and the
query scopes attached by the ``named_scopes`` option.
'''

# ....................{ IMPORTS                           }....................
import pytest

# ....................{ TESTS                             }....................
def test_named_scopes(row_type: type, statuses: dict) -> None:
    '''
    Test the query scopes attached by the
    :func:`magicenum.enum.enumdef.define_enum` function with the
    ``named_scopes`` option enabled.

    Parameters
    ----------
    row_type : type
        Host class isolated to this test.
    statuses : dict
        Definition table of integer raw values.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumdef import define_enum
    from magicenum.enum.enumscope import EnumScope

    define_enum(row_type, 'status', statuses, named_scopes=True)

    # One scope per name, named by that name's plural.
    drafts = row_type.drafts
    assert isinstance(drafts, EnumScope)
    assert isinstance(row_type.unknowns, EnumScope)
    assert isinstance(row_type.publisheds, EnumScope)
    assert drafts.scope_name == 'drafts'
    assert drafts.value_raw == 1
    assert drafts.criteria == {'status': 1}
    assert repr(drafts) == "EnumScope('drafts', {'status': 1})"

    # Hosts storing the raw value of this scope's name match this scope.
    widgets = [row_type(status=1), row_type(status=2), row_type()]
    assert drafts.matches(widgets[0]) is True
    assert drafts.matches(widgets[1]) is False
    assert list(drafts.filter(widgets)) == [widgets[0]]

    # Empty slots only match the absent value, *NOT* the default.
    assert row_type.unknowns.matches(widgets[2]) is False

    # The parametrized scope accepts names.
    published = row_type.of_status('published')
    assert published.scope_name == 'of_status'
    assert published.criteria == {'status': 2}
    assert list(published.filter(widgets)) == [widgets[1]]

    # Unknown names select the absent value.
    archived = row_type.of_status('archived')
    assert archived.value_raw is None
    assert list(archived.filter(widgets)) == [widgets[2]]


def test_named_scopes_plural(row_type: type) -> None:
    '''
    Test that query scopes are named by the regular English plural of each
    name.

    Parameters
    ----------
    row_type : type
        Host class isolated to this test.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumaccess import SlotStorage
    from magicenum.enum.enumdef import define_enum

    define_enum(
        row_type, 'kind', {'process': 1, 'category': 2, 'day': 3},
        named_scopes=True, storage=SlotStorage.ITEM, slot_name='kind_code',
    )

    assert row_type.processes.value_raw == 1
    assert row_type.categories.value_raw == 2
    assert row_type.days.value_raw == 3

    # Criteria are keyed by the slot name rather than the attribute name.
    assert row_type.days.criteria == {'kind_code': 3}


def test_scope_extensions(row_type: type, statuses: dict) -> None:
    '''
    Test that scope extensions are bound to each query scope as methods.

    Parameters
    ----------
    row_type : type
        Host class isolated to this test.
    statuses : dict
        Definition table of integer raw values.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumdef import define_enum
    from magicenum.exceptions import MagicEnumAttrException

    def count_in(scope, hosts) -> int:
        return sum(1 for _ in scope.filter(hosts))

    def describe(scope) -> str:
        return '{} where {}'.format(scope.scope_name, scope.criteria)

    define_enum(
        row_type, 'status', statuses,
        named_scopes=True,
        scope_extensions={'count_in': count_in, 'describe': describe},
    )
    widgets = [row_type(status=1), row_type(status=1), row_type(status=2)]

    assert row_type.drafts.count_in(widgets) == 2
    assert row_type.of_status('published').count_in(widgets) == 1
    assert row_type.drafts.describe() == "drafts where {'status': 1}"

    # Undefined extensions are undefined attributes.
    with pytest.raises(MagicEnumAttrException, match=r'"drafts".*"paginate"'):
        row_type.drafts.paginate
    assert not hasattr(row_type.drafts, 'paginate')


def test_named_scopes_fail(row_type: type) -> None:
    '''
    Test that names whose plurals are *not* Python identifiers prohibit query
    scopes.

    Parameters
    ----------
    row_type : type
        Host class isolated to this test.
    '''

    # Defer heavyweight imports.
    from magicenum.enum.enumdef import define_enum
    from magicenum.exceptions import MagicEnumConfigException

    with pytest.raises(MagicEnumConfigException, match=r'"in progresses"'):
        define_enum(
            row_type, 'status', {'new': 0, 'in progress': 1},
            named_scopes=True,
        )

    assert not hasattr(row_type, 'news')

    # Query scopes may *not* replace other members of the same attribute.
    with pytest.raises(MagicEnumConfigException, match=r'"drafts".*twice'):
        define_enum(
            row_type, 'drafts', {'draft': 1, 'other': 2},
            named_scopes=True,
        )
    with pytest.raises(MagicEnumConfigException, match=r'"of_status".*twice'):
        define_enum(
            row_type, 'status', {'of_statu': 1, 'other': 2},
            named_scopes=True,
        )

    # Failed definitions leave this class unmodified.
    assert 'drafts' not in row_type.__dict__
    assert 'status' not in row_type.__dict__
