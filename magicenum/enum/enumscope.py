#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Enumeration scopes** (i.e., query filters selecting all host objects whose
enumerated attribute stores the raw value of a given name).

Scopes do *not* query anything themselves. Each scope merely encodes the filter
predicate ``attribute == forward(name)`` in two interchangeable forms:

* :attr:`EnumScope.criteria`, a dictionary suitable for the keyword-based
  filters of most persistence layers (e.g., ``query.filter_by(**criteria)``).
* :meth:`EnumScope.matches`, a predicate testing in-memory host objects.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from beartype.typing import Callable, Iterable, Iterator, Mapping
from magicenum.enum.enumaccess import EnumAccessor
from magicenum.exceptions import MagicEnumAttrException
from magicenum.util.type.types import EnumRawValue
from types import MappingProxyType, MethodType

# ....................{ CLASSES                           }....................
class EnumScope(object):
    '''
    **Enumeration scope** (i.e., query filter selecting all host objects whose
    enumerated attribute stores a given raw value).

    Scope Extensions
    ----------
    Each callable of the ``extensions`` dictionary passed at initialization is
    bound to this scope as a method of the same name. Each such callable is
    passed this scope as its first parameter::

        scope = Post.drafts
        scope.count_in(posts)  # calls extensions['count_in'](scope, posts)

    Attributes
    ----------
    scope_name : str
        Name of this scope (e.g., ``drafts``).
    value_raw : EnumRawValue
        Raw value selected by this scope.
    _accessor : EnumAccessor
        Accessor of the enumerated attribute filtered by this scope.
    _extensions : MappingProxyType
        Immutable dictionary mapping from the name to the implementation of
        each method bound to this scope.
    '''

    # ..................{ INITIALIZERS                      }..................
    @beartype
    def __init__(
        self,
        scope_name: str,
        accessor: EnumAccessor,
        value_raw: EnumRawValue,
        extensions: Mapping[str, Callable],
    ) -> None:
        '''
        Initialize this enumeration scope.

        Parameters
        ----------
        scope_name : str
            Name of this scope.
        accessor : EnumAccessor
            Accessor of the enumerated attribute filtered by this scope.
        value_raw : EnumRawValue
            Raw value selected by this scope.
        extensions : Mapping[str, Callable]
            Dictionary mapping from the name to the implementation of each
            method bound to this scope.
        '''

        # Classify all passed parameters.
        self.scope_name = scope_name
        self.value_raw = value_raw
        self._accessor = accessor
        self._extensions = MappingProxyType(dict(extensions))

    # ..................{ DUNDERS                           }..................
    def __getattr__(self, attr_name: str) -> MethodType:
        '''
        Method bound to this scope with the passed name if this scope was
        initialized with an extension of this name.

        This special method is only called for attributes *not* found by
        standard attribute lookup.
        '''

        # Avoid infinite recursion on partially initialized scopes (e.g., while
        # unpickling), which have yet to define this dictionary.
        extensions = self.__dict__.get('_extensions', {})

        if attr_name not in extensions:
            raise MagicEnumAttrException(
                'Enum scope "{}" attribute "{}" undefined.'.format(
                    self.__dict__.get('scope_name'), attr_name))

        return MethodType(extensions[attr_name], self)


    def __repr__(self) -> str:
        return '{}({!r}, {!r})'.format(
            self.__class__.__name__, self.scope_name, self.criteria)

    # ..................{ PROPERTIES                        }..................
    @property
    def criteria(self) -> dict:
        '''
        Dictionary mapping from the slot name storing the enumerated attribute
        filtered by this scope to the raw value selected by this scope.
        '''

        return {self._accessor.slot_name: self.value_raw}

    # ..................{ FILTERS                           }..................
    def matches(self, host: object) -> bool:
        '''
        ``True`` only if the passed host object's slot stores exactly the raw
        value selected by this scope.

        This predicate compares stored raw values as is and hence does *not*
        apply the default. Empty slots only match scopes selecting ``None``.
        '''

        return self._accessor.get_slot(host) == self.value_raw


    def filter(self, hosts: Iterable) -> Iterator:
        '''
        Generator yielding each of the passed host objects matched by this
        scope in iteration order.
        '''

        return (host for host in hosts if self.matches(host))

# ....................{ MAKERS                            }....................
@beartype
def make_scope(
    accessor: EnumAccessor,
    name: str,
    scope_name: str,
) -> EnumScope:
    '''
    Enumeration scope named the passed scope name selecting all host objects
    whose enumerated attribute accessed by the passed accessor stores the raw
    value of the passed name.

    The raw value selected by this scope is resolved *without* defaulting.
    Names unknown to this attribute thus select the absent value (i.e.,
    ``None``).
    '''

    # Descriptor of this attribute.
    descriptor = accessor.descriptor

    return EnumScope(
        scope_name=scope_name,
        accessor=accessor,
        value_raw=descriptor.value_of(name),
        extensions=descriptor.scope_extensions,
    )
