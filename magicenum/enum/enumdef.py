#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
High-level **enumerated attribute definition** (i.e., attachment of the
accessors of an enumerated attribute to a host class) facilities.

Usage
----------
Host classes opt in explicitly, either by calling :func:`define_enum` after
declaring the class *or* by decorating the class with :func:`enum_attr`:

    >>> from magicenum.enum.enumdef import enum_attr
    >>> STATUSES = {'unknown': 0, 'draft': 1, 'published': 2}
    >>> @enum_attr('status', STATUSES, simple_accessors=True)
    ... class Post(dict):
    ...     pass
    >>> post = Post()
    >>> post.status
    'unknown'
    >>> post.status = 'draft'
    >>> post['status']
    1
    >>> post.is_draft()
    True
    >>> Post.status_value('published')
    2
    >>> Post.status_by_value(2)
    'published'

Generated Members
----------
For an enumerated attribute named ``{attr}``, the following members are
attached to the host class:

* ``{attr}``, a data descriptor reading and writing names.
* ``{attr}_name()``, returning the string form of the current name.
* ``{attr}_value()``, returning the current raw value when called on an
  instance *or* the raw value of the passed name when called on the class.
* ``{attr}_by_value(value)``, a static method returning the name of the passed
  raw value.
* ``is_{name}()`` for each name of the table, if ``simple_accessors``.
* ``{names}`` (i.e., the plural of each name) and ``of_{attr}(name)``,
  returning :class:`EnumScope` query filters, if ``named_scopes``.

The host class also records the :class:`EnumAccessor` of each of its
enumerated attributes, retrievable with :func:`get_accessors`.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from beartype.typing import Callable, Mapping, Optional
from magicenum.enum.enumaccess import EnumAccessor, SlotStorage
from magicenum.enum.enumdesc import EnumDescriptor
from magicenum.enum.enummap import ValueMap
from magicenum.enum.enumscope import EnumScope, make_scope
from magicenum.exceptions import (
    MagicEnumAttrException, MagicEnumConfigException)
from magicenum.util.io.log import logs
from magicenum.util.type.descriptor.descs import MethodClassOrInstance
from magicenum.util.type.obj.sentinels import UNSET
from magicenum.util.type.text import strs
from magicenum.util.type.types import (
    ClassOrNoneTypes,
    ClassType,
    EnumName,
    EnumType,
    MappingOrEnumTypes,
    SlotGetter,
    SlotSetter,
)

# ....................{ GLOBALS                           }....................
_ACCESSORS_ATTR_NAME = '__magicenum_accessors__'
'''
Name of the class variable of each host class mapping from the name of each
enumerated attribute of that class to that attribute's accessor.
'''


_VALUE_MAPS_ATTR_NAME = '__magicenum_value_maps__'
'''
Name of the class variable of each host class mapping from the object
identifier of each definition table passed to :func:`define_enum` for that
class to a 2-tuple ``(table, value_map)`` of that table and the value map built
from that table.
'''

# ....................{ CLASSES                           }....................
class EnumAttribute(object):
    '''
    **Enumerated attribute** (i.e., data descriptor reading and writing the
    names of an enumerated attribute of host objects).

    Accessing this descriptor from a host object returns the name of the raw
    value that object currently stores; assigning to this descriptor from a
    host object stores the raw value of the assigned value. Accessing this
    descriptor from the host class returns this descriptor itself.

    Attributes
    ----------
    accessor : EnumAccessor
        Accessor of the enumerated attribute exposed by this descriptor.
    '''

    # ..................{ INITIALIZERS                      }..................
    def __init__(self, accessor: EnumAccessor) -> None:
        '''
        Initialize this data descriptor.

        Parameters
        ----------
        accessor : EnumAccessor
            Accessor of the enumerated attribute to be exposed.
        '''

        # Classify all passed parameters.
        self.accessor = accessor

        # Document this descriptor, as displayed by the builtin help().
        self.__doc__ = 'Enumerated attribute over names {}.'.format(
            strs.join_as_conjunction_double_quoted(
                *accessor.descriptor.names))

    # ..................{ DESCRIPTORS                       }..................
    def __get__(self, obj: object, cls: ClassOrNoneTypes = None) -> object:

        # If accessed from the host class, return this descriptor.
        if obj is None:
            return self

        return self.accessor.get(obj)


    def __set__(self, obj: object, value: object) -> None:
        self.accessor.set(obj, value)


    def __repr__(self) -> str:
        return '<{} {!r}>'.format(
            self.__class__.__name__, self.accessor.descriptor.name)

# ....................{ DEFINERS                          }....................
@beartype
def define_enum(
    # Mandatory parameters.
    cls: ClassType,
    name: str,
    table: MappingOrEnumTypes,

    # Optional parameters.
    default: object = UNSET,
    raise_on_invalid: bool = False,
    simple_accessors: bool = False,
    named_scopes: bool = False,
    scope_extensions: Optional[Mapping[str, Callable]] = None,
    storage: SlotStorage = SlotStorage.ITEM,
    slot_name: Optional[str] = None,
    slot_getter: Optional[SlotGetter] = None,
    slot_setter: Optional[SlotSetter] = None,
) -> EnumDescriptor:
    '''
    Define an enumerated attribute with the passed name on the passed host
    class, whose values are the names of the passed definition table.

    See the docstring of this submodule for the members attached to this
    class.

    Parameters
    ----------
    cls : ClassType
        Host class to attach this attribute to.
    name : str
        Name of this attribute.
    table : MappingOrEnumTypes
        Definition table of this attribute (i.e., dictionary mapping from each
        name to that name's raw value, :class:`enum.Enum` subclass, or
        :class:`ValueMap`). Passing the same table object for several
        attributes of the same class shares a single value map between them.
    default : object
        Name or raw value resolving invalid reads and writes. Defaults to the
        smallest raw value of this table. See :class:`EnumDescriptor`.
    raise_on_invalid : bool
        ``True`` only if writing invalid values raises an exception. Defaults
        to ``False``.
    simple_accessors : bool
        ``True`` only if one ``is_{name}()`` predicate per name is attached.
        Defaults to ``False``.
    named_scopes : bool
        ``True`` only if one query scope per name is attached. Defaults to
        ``False``.
    scope_extensions : Optional[Mapping[str, Callable]]
        Dictionary mapping from the name to the implementation of each method
        bound to each attached query scope. Defaults to ``None``.
    storage : SlotStorage
        Slot storage strategy of instances of this class. Defaults to
        :attr:`SlotStorage.ITEM` (i.e., ``self[slot_name]``).
    slot_name : Optional[str]
        Name of the storage slot of instances of this class storing the raw
        value of this attribute. Defaults to ``None``, in which case the
        default slot name of this storage strategy is used.
    slot_getter : Optional[SlotGetter]
        Callable returning the raw value stored in a slot of an instance of
        this class, overriding the getter of this storage strategy. Defaults
        to ``None``.
    slot_setter : Optional[SlotSetter]
        Callable storing a raw value in a slot of an instance of this class,
        overriding the setter of this storage strategy. Defaults to ``None``.

    Returns
    ----------
    EnumDescriptor
        Descriptor of this attribute.

    Raises
    ----------
    MagicEnumConfigException
        If either:

        * Any option is invalid. See :class:`EnumDescriptor`.
        * This table was previously passed for another attribute of this class
          and has since been modified.
        * Any generated member name is *not* a Python identifier (e.g., a
          table name ``in progress`` with ``simple_accessors`` enabled).
        * Any two generated members share the same name (e.g., an attribute
          ``drafts`` whose table name ``draft`` names a query scope
          ``drafts`` with ``named_scopes`` enabled).
        * The slot name of the :attr:`SlotStorage.ATTR` strategy is this
          attribute's name, which the attribute itself occupies.
    '''

    # Value map of this table, shared with prior attributes of this class
    # defined over the same table.
    value_map = _get_value_map(cls=cls, name=name, table=table)

    # Descriptor of this attribute.
    descriptor = EnumDescriptor(
        name=name,
        table=value_map,
        default=default,
        raise_on_invalid=raise_on_invalid,
        simple_accessors=simple_accessors,
        named_scopes=named_scopes,
        scope_extensions=scope_extensions,
    )

    # Accessor of this attribute.
    accessor = EnumAccessor(
        descriptor=descriptor,
        storage=storage,
        slot_name=slot_name,
        slot_getter=slot_getter,
        slot_setter=slot_setter,
    )

    # If instances store raw values under this attribute's name, the
    # attribute descriptor would shadow these values.
    if storage is SlotStorage.ATTR and accessor.slot_name == name:
        raise MagicEnumConfigException(
            'Enum attribute "{}.{}" slot name "{}" '
            'shadowed by this attribute.'.format(
                cls.__name__, name, accessor.slot_name))

    # Dictionary mapping from the name to the value of each class member to be
    # attached to this class.
    members = _make_members(cls=cls, accessor=accessor)

    # Attach these members *AFTER* successfully creating all of them, ensuring
    # that a failed definition leaves this class unmodified.
    for member_name, member in members.items():
        # If this class already defines or inherits this member, log a
        # non-fatal warning.
        if any(member_name in base.__dict__ for base in cls.__mro__):
            logs.log_warning(
                'Enum attribute "%s.%s" redefining member "%s".',
                cls.__name__, name, member_name)

        setattr(cls, member_name, member)

    # Register this accessor with this class. Copy the inherited registry
    # rather than modifying it, isolating superclasses from subclasses.
    accessors = dict(getattr(cls, _ACCESSORS_ATTR_NAME, {}))
    accessors[name] = accessor
    setattr(cls, _ACCESSORS_ATTR_NAME, accessors)

    # Share this value map with subsequent attributes over this table.
    _set_value_map(cls=cls, table=table, value_map=value_map)

    logs.log_debug(
        'Defined enum attribute "%s.%s" over %d names (default: %r).',
        cls.__name__, name, len(value_map), descriptor.default_raw)

    return descriptor


def enum_attr(name: str, table: MappingOrEnumTypes, **kwargs) -> Callable:
    '''
    Class decorator defining an enumerated attribute with the passed name on
    the decorated class, whose values are the names of the passed definition
    table.

    Decorators may be stacked to define multiple enumerated attributes.

    Parameters
    ----------
    name : str
        Name of this attribute.
    table : MappingOrEnumTypes
        Definition table of this attribute.

    All remaining keyword arguments are passed as is to :func:`define_enum`.

    Returns
    ----------
    Callable
        Class decorator returning the decorated class unmodified except for the
        addition of this attribute.
    '''

    def _enum_attr_decorator(cls: ClassType) -> ClassType:
        define_enum(cls, name, table, **kwargs)
        return cls

    return _enum_attr_decorator

# ....................{ GETTERS                           }....................
@beartype
def get_accessors(cls: ClassType) -> dict:
    '''
    Dictionary mapping from the name of each enumerated attribute of the passed
    class (including attributes inherited from superclasses) to that
    attribute's accessor, in definition order.
    '''

    return dict(getattr(cls, _ACCESSORS_ATTR_NAME, {}))


@beartype
def get_descriptors(cls: ClassType) -> dict:
    '''
    Dictionary mapping from the name of each enumerated attribute of the passed
    class (including attributes inherited from superclasses) to that
    attribute's descriptor, in definition order.
    '''

    return {
        name: accessor.descriptor
        for name, accessor in getattr(cls, _ACCESSORS_ATTR_NAME, {}).items()
    }


@beartype
def get_accessor(cls: ClassType, name: str) -> EnumAccessor:
    '''
    Accessor of the enumerated attribute with the passed name of the passed
    class.

    Raises
    ----------
    MagicEnumAttrException
        If this class defines no enumerated attribute with this name.
    '''

    accessors = getattr(cls, _ACCESSORS_ATTR_NAME, {})

    if name not in accessors:
        raise MagicEnumAttrException(
            'Enum attribute "{}.{}" undefined.'.format(cls.__name__, name))

    return accessors[name]


@beartype
def get_descriptor(cls: ClassType, name: str) -> EnumDescriptor:
    '''
    Descriptor of the enumerated attribute with the passed name of the passed
    class.

    Raises
    ----------
    MagicEnumAttrException
        If this class defines no enumerated attribute with this name.
    '''

    return get_accessor(cls, name).descriptor

# ....................{ PRIVATE ~ getters                 }....................
def _get_value_map(
    cls: ClassType, name: str, table: MappingOrEnumTypes) -> ValueMap:
    '''
    Value map of the passed definition table for the enumerated attribute with
    the passed name of the passed class.

    If this table was previously passed for another attribute of this class
    (or a superclass of this class), the value map built for that attribute is
    reused, provided this table has *not* been modified since.
    '''

    # If this table is already a value map, share it as is.
    if isinstance(table, ValueMap):
        return table

    # If this table was previously passed...
    table_and_value_map = getattr(cls, _VALUE_MAPS_ATTR_NAME, {}).get(
        id(table))
    if table_and_value_map is not None:
        value_map = table_and_value_map[1]

        # If this table has since been modified, the names and values of the
        # earlier attribute no longer agree with those of this attribute.
        # Enumeration types are immutable and need no such check.
        if not isinstance(table, EnumType) and dict(table) != dict(value_map):
            raise MagicEnumConfigException(
                'Enum attribute "{}.{}" table {!r} modified since '
                'shared as {!r}.'.format(
                    cls.__name__, name, dict(table), value_map))

        return value_map

    # Else, build a new value map.
    return ValueMap(table)

# ....................{ PRIVATE ~ setters                 }....................
def _set_value_map(
    cls: ClassType, table: MappingOrEnumTypes, value_map: ValueMap) -> None:
    '''
    Cache the passed value map built from the passed definition table with the
    passed class, unless this table is itself a value map or already cached.
    '''

    # Dictionary caching value maps by table identifier, copied rather than
    # modified in place for the same reason as the accessor registry.
    value_maps = dict(getattr(cls, _VALUE_MAPS_ATTR_NAME, {}))

    if isinstance(table, ValueMap) or id(table) in value_maps:
        return

    # Caching this table alongside its value map keeps this table alive and
    # hence its identifier unique.
    value_maps[id(table)] = (table, value_map)
    setattr(cls, _VALUE_MAPS_ATTR_NAME, value_maps)

# ....................{ PRIVATE ~ makers                  }....................
def _make_members(cls: ClassType, accessor: EnumAccessor) -> dict:
    '''
    Dictionary mapping from the name to the value of each class member to be
    attached to the passed host class for the enumerated attribute accessed by
    the passed accessor.
    '''

    # Descriptor and name of this attribute.
    descriptor = accessor.descriptor
    name = descriptor.name

    # Members unconditionally attached.
    members = {
        name: EnumAttribute(accessor),
        name + '_name': _make_method(
            func=accessor.get_name,
            func_name=name + '_name',
            cls=cls,
            doc='String form of the current name of "{}".'.format(name),
        ),
        name + '_value': MethodClassOrInstance(
            class_func=descriptor.value_of,
            instance_func=accessor.get_raw,
        ),
        name + '_by_value': staticmethod(descriptor.name_of),
    }

    # If attaching one predicate per name, do so.
    if descriptor.simple_accessors:
        for enum_name in descriptor.names:
            predicate_name = _die_unless_member_name(
                cls, name, 'is_' + enum_name, members)
            members[predicate_name] = _make_predicate(
                cls=cls,
                accessor=accessor,
                enum_name=enum_name,
                predicate_name=predicate_name,
            )

    # If attaching one query scope per name, do so.
    if descriptor.named_scopes:
        for enum_name in descriptor.names:
            scope_name = _die_unless_member_name(
                cls, name, strs.pluralize(enum_name), members)
            members[scope_name] = make_scope(
                accessor=accessor, name=enum_name, scope_name=scope_name)

        # Name of the parametrized query scope.
        scope_name_of = _die_unless_member_name(
            cls, name, 'of_' + name, members)

        def scope_of(enum_name: EnumName) -> EnumScope:
            return make_scope(
                accessor=accessor, name=enum_name, scope_name=scope_name_of)

        scope_of.__name__ = scope_name_of
        scope_of.__qualname__ = '{}.{}'.format(cls.__qualname__, scope_name_of)
        scope_of.__doc__ = (
            'Query scope selecting instances whose "{}" is the passed '
            'name.'.format(name))
        members[scope_name_of] = staticmethod(scope_of)

    return members


def _make_method(
    func: Callable, func_name: str, cls: ClassType, doc: str) -> Callable:
    '''
    Unbound method named the passed name of the passed class, passing the
    instance it is bound to to the passed callable.
    '''

    def method(self) -> object:
        return func(self)

    method.__name__ = func_name
    method.__qualname__ = '{}.{}'.format(cls.__qualname__, func_name)
    method.__doc__ = doc
    return method


def _make_predicate(
    cls: ClassType,
    accessor: EnumAccessor,
    enum_name: EnumName,
    predicate_name: str,
) -> Callable:
    '''
    Unbound method named the passed predicate name of the passed class,
    returning ``True`` only if the enumerated attribute accessed by the passed
    accessor of the instance it is bound to is the passed name.
    '''

    def predicate(self) -> bool:
        return accessor.is_name(self, enum_name)

    predicate.__name__ = predicate_name
    predicate.__qualname__ = '{}.{}'.format(cls.__qualname__, predicate_name)
    predicate.__doc__ = '``True`` only if "{}" is "{}".'.format(
        accessor.descriptor.name, enum_name)
    return predicate

# ....................{ PRIVATE ~ validators              }....................
def _die_unless_member_name(
    cls: ClassType, name: str, member_name: str, members: dict) -> str:
    '''
    Passed member name if this name is a Python identifier *not* already
    generated for the same attribute (i.e., *not* a key of the passed
    dictionary of members) *or* raise an exception otherwise.
    '''

    if not strs.is_identifier(member_name):
        raise MagicEnumConfigException(
            'Enum attribute "{}.{}" member name "{}" '
            'not a Python identifier.'.format(cls.__name__, name, member_name))
    elif member_name in members:
        raise MagicEnumConfigException(
            'Enum attribute "{}.{}" member name "{}" '
            'generated twice.'.format(cls.__name__, name, member_name))

    return member_name
