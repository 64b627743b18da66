#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Fixtures creating **host classes** (i.e., model classes to which enumerated
attributes are attached) and the definition tables attached to them.
'''

# ....................{ IMPORTS                           }....................
from pytest import fixture

# ....................{ CLASSES                           }....................
class Row(dict):
    '''
    Minimal object-relational mapper (ORM) row, storing the raw value of each
    column by subscription (e.g., ``row['status']``).

    Unlike most ORM rows, reading a never-assigned column raises
    :class:`KeyError` rather than returning ``None``.
    '''

    pass

# ....................{ FIXTURES ~ table                  }....................
# Test-scope fixtures creating and returning a new object for each test, which
# tests are thus free to modify.
@fixture
def statuses() -> dict:
    '''
    Definition table of integer raw values, whose smallest raw value ``0`` and
    hence default name is ``unknown``.
    '''

    return {'unknown': 0, 'draft': 1, 'published': 2}


@fixture
def roles() -> dict:
    '''
    Definition table of string raw values, whose smallest raw value ``'a'``
    and hence default name is ``admin``.
    '''

    return {'user': 'u', 'admin': 'a'}

# ....................{ FIXTURES ~ type                   }....................
@fixture
def row_type() -> type:
    '''
    New host class named ``Widget`` subclassing :class:`Row`, isolated to the
    test requesting this fixture.

    Since defining enumerated attributes modifies the host class, each test
    requires its own class.
    '''

    class Widget(Row):
        pass

    return Widget
