#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Enumeration descriptors** (i.e., objects encapsulating the configuration and
value resolution policy of a single enumerated attribute).

Resolution Policy
----------
An enumerated attribute stores **raw values** (e.g., ``1``) but exposes
**names** (e.g., ``'draft'``). Resolution between the two is lenient by
default:

* **Reads** never fail. Stored raw values absent from the definition table
  (e.g., legacy or corrupt rows) resolve to the name of the default raw value.
* **Writes** of names absent from the definition table silently store the
  default raw value instead, unless ``raise_on_invalid`` is enabled.
* **Writes** of integers store those integers verbatim, even when absent from
  the definition table, unless ``raise_on_invalid`` is enabled. This permits
  rows to carry raw codes defined by newer versions of the table.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from beartype.typing import Callable, Mapping, Optional
from enum import Enum
from magicenum.enum.enummap import ValueMap
from magicenum.exceptions import (
    MagicEnumConfigException, MagicEnumValueException)
from magicenum.util.io.log import logs
from magicenum.util.type.obj.sentinels import UNSET
from magicenum.util.type.text import strs
from magicenum.util.type.types import (
    EnumName,
    EnumRawValue,
    MappingOrEnumTypes,
)

# ....................{ CLASSES                           }....................
class EnumDescriptor(object):
    '''
    **Enumeration descriptor** (i.e., immutable object encapsulating the
    configuration and value resolution policy of a single enumerated
    attribute).

    Each descriptor references exactly one :class:`ValueMap`, which may be
    shared with other descriptors (e.g., two attributes of the same model over
    the same domain). Descriptors are immutable; the :meth:`replace` method
    creates a modified copy sharing the same value map instead.

    Attributes
    ----------
    _name : str
        Name of the enumerated attribute this descriptor describes.
    _value_map : ValueMap
        Value map this attribute resolves names and raw values against.
    _default_raw : EnumRawValue
        Raw value resolving invalid reads and writes.
    _raise_on_invalid : bool
        ``True`` only if writing invalid values raises an exception.
    _simple_accessors : bool
        ``True`` only if one predicate method per name is to be generated.
    _named_scopes : bool
        ``True`` only if one query scope per name is to be generated.
    _scope_extensions : Mapping[str, Callable]
        Dictionary mapping from the name to the implementation of each method
        bound to each generated query scope.
    '''

    # ..................{ INITIALIZERS                      }..................
    @beartype
    def __init__(
        self,

        # Mandatory parameters.
        name: str,
        table: MappingOrEnumTypes,

        # Optional parameters.
        default: object = UNSET,
        raise_on_invalid: bool = False,
        simple_accessors: bool = False,
        named_scopes: bool = False,
        scope_extensions: Optional[Mapping[str, Callable]] = None,
    ) -> None:
        '''
        Initialize this enumeration descriptor.

        Parameters
        ----------
        name : str
            Name of the enumerated attribute this descriptor describes. This
            name *must* be a valid Python identifier.
        table : MappingOrEnumTypes
            Either a :class:`ValueMap` to be shared as is *or* a definition
            table (i.e., dictionary or :class:`enum.Enum` subclass) from which
            a new value map is built.
        default : object
            Either a name or a raw value of this table, resolving invalid reads
            and writes. Defaults to :data:`UNSET`, in which case the smallest
            raw value of this table is used, where ``None`` (the absent value)
            is smaller than every other raw value. Names take precedence over
            raw values equal to other names.
        raise_on_invalid : bool
            ``True`` only if writing a value absent from this table raises a
            :class:`MagicEnumValueException`. Defaults to ``False``, in which
            case invalid names are silently replaced by the default and
            invalid integers are stored verbatim.
        simple_accessors : bool
            ``True`` only if one ``is_{name}()`` predicate per name is to be
            generated. Defaults to ``False``.
        named_scopes : bool
            ``True`` only if one query scope per name is to be generated.
            Defaults to ``False``.
        scope_extensions : Optional[Mapping[str, Callable]]
            Dictionary mapping from the name to the implementation of each
            method bound to each generated query scope. Defaults to ``None``,
            in which case no such methods are bound.

        Raises
        ----------
        MagicEnumConfigException
            If either:

            * This name is *not* a Python identifier.
            * This table is empty.
            * This default is neither a name nor a raw value of this table.
            * No default was passed and the raw values of this table are *not*
              mutually orderable (e.g., both integers and strings).
        MagicEnumMappingException
            If this table is *not* a valid definition table.
        '''

        # If this name is *NOT* an identifier, raise an exception.
        if not strs.is_identifier(name):
            raise MagicEnumConfigException(
                'Enum attribute name "{}" not a Python identifier.'.format(
                    name))

        # If this table is *NOT* already a value map, build one from it.
        value_map = table if isinstance(table, ValueMap) else ValueMap(table)

        # If this table is empty, no name exists to resolve reads to.
        if not value_map:
            raise MagicEnumConfigException(
                'Enum attribute "{}" table empty.'.format(name))

        # Classify all passed parameters.
        self._name = name
        self._value_map = value_map
        self._raise_on_invalid = raise_on_invalid
        self._simple_accessors = simple_accessors
        self._named_scopes = named_scopes
        self._scope_extensions = dict(scope_extensions or {})

        # Resolve the default raw value *AFTER* classifying the value map.
        self._default_raw = self._resolve_default(default)

    # ..................{ PROPERTIES                        }..................
    @property
    def name(self) -> str:
        '''
        Name of the enumerated attribute this descriptor describes.
        '''

        return self._name


    @property
    def value_map(self) -> ValueMap:
        '''
        Value map this attribute resolves names and raw values against.
        '''

        return self._value_map


    @property
    def names(self) -> tuple:
        '''
        Tuple of all names this attribute may expose in declaration order.
        '''

        return self._value_map.names


    @property
    def default_raw(self) -> EnumRawValue:
        '''
        Raw value resolving invalid reads and writes of this attribute,
        guaranteed to be a raw value of this attribute's value map.
        '''

        return self._default_raw


    @property
    def default_name(self) -> EnumName:
        '''
        Name of the raw value resolving invalid reads and writes.
        '''

        return self._value_map.backward(self._default_raw)


    @property
    def raise_on_invalid(self) -> bool:
        '''
        ``True`` only if writing invalid values raises an exception.
        '''

        return self._raise_on_invalid


    @property
    def simple_accessors(self) -> bool:
        '''
        ``True`` only if one predicate method per name is generated.
        '''

        return self._simple_accessors


    @property
    def named_scopes(self) -> bool:
        '''
        ``True`` only if one query scope per name is generated.
        '''

        return self._named_scopes


    @property
    def scope_extensions(self) -> dict:
        '''
        Dictionary mapping from the name to the implementation of each method
        bound to each generated query scope.
        '''

        return dict(self._scope_extensions)

    # ..................{ LOOKUPS                           }..................
    def value_of(self, name: object) -> EnumRawValue:
        '''
        Raw value of the passed name if this name is a name of this attribute
        *or* ``None`` otherwise.

        Enumeration members are coerced to their names first.
        '''

        return self._value_map.forward(_coerce_name(name))


    def name_of(self, value: object) -> EnumName | None:
        '''
        Name of the passed raw value if this value is a raw value of this
        attribute *or* ``None`` otherwise.
        '''

        return self._value_map.backward(value)

    # ..................{ RESOLVERS                         }..................
    def resolve_for_read(self, value: object) -> EnumName:
        '''
        Name of the passed raw value if this value is a raw value of this
        attribute *or* the name of the default raw value otherwise.

        This method never raises exceptions. Stored values unknown to this
        attribute's table (e.g., legacy or corrupt data) silently degrade to the
        default name.

        Parameters
        ----------
        value : object
            Raw value currently stored by some host object.

        Returns
        ----------
        EnumName
            Name resolving this raw value.
        '''

        # Name of this raw value if any *OR* "None" otherwise. Since names are
        # strings, "None" unambiguously signifies a missing name.
        name = self._value_map.backward(value)

        # If this raw value is unknown, fallback to the default.
        if name is None:
            logs.log_debug(
                'Enum attribute "%s" raw value %r unknown; '
                'defaulting to "%s".', self._name, value, self.default_name)
            name = self.default_name

        return name


    def resolve_for_write(
        self, value: object, host_type_name: str) -> EnumRawValue:
        '''
        Raw value to be stored by a host object when the passed value is
        assigned to this attribute of that object.

        Specifically, if this value is:

        * An :class:`enum.Enum` member, this member is coerced to its name.
        * A name of this attribute, that name's raw value is returned.
        * An integer (excluding booleans), this integer is returned verbatim
          unless ``raise_on_invalid`` is enabled *and* this integer is not a
          raw value of this attribute.
        * Anything else (e.g., an unknown name, ``None``), the default raw
          value is returned unless ``raise_on_invalid`` is enabled.

        Parameters
        ----------
        value : object
            Value assigned to this attribute.
        host_type_name : str
            Unqualified name of the host object's class, embedded in the
            message of the exception raised on invalid values.

        Returns
        ----------
        EnumRawValue
            Raw value to be stored.

        Raises
        ----------
        MagicEnumValueException
            If ``raise_on_invalid`` is enabled *and* this value is invalid.
        '''

        # Coerce enumeration members into names.
        value = _coerce_name(value)

        # If this value is an integer, pass this integer through as is.
        if isinstance(value, int) and not isinstance(value, bool):
            if self._raise_on_invalid and not self._value_map.has_value(value):
                raise MagicEnumValueException(
                    value=value,
                    attr_name=self._name,
                    host_type_name=host_type_name,
                )

            return value
        # Else if this value is a name, return that name's raw value.
        elif self._value_map.has_name(value):
            return self._value_map.forward(value)
        # Else, this value is invalid.
        elif self._raise_on_invalid:
            raise MagicEnumValueException(
                value=value,
                attr_name=self._name,
                host_type_name=host_type_name,
            )

        logs.log_debug(
            'Enum attribute "%s.%s" value %r invalid; defaulting to %r.',
            host_type_name, self._name, value, self._default_raw)
        return self._default_raw

    # ..................{ COPIERS                           }..................
    @beartype
    def replace(self, **kwargs) -> 'EnumDescriptor':
        '''
        New enumeration descriptor sharing this descriptor's value map, whose
        options are those of this descriptor overridden by the passed keyword
        arguments.

        Since descriptors are immutable, this is the only means of "modifying"
        a descriptor. This descriptor itself remains unmodified.

        Parameters
        ----------
        All passed keyword arguments are passed as is to the
        :meth:`__init__` method, overriding the corresponding options of this
        descriptor. The ``table`` parameter may *not* be passed.

        Returns
        ----------
        EnumDescriptor
            New descriptor as described above.
        '''

        # Options of this descriptor, overridden by the passed options. The
        # default is preserved by name, as names take precedence over raw
        # values on resolution and a raw value may also be another name.
        options = dict(
            name=self._name,
            default=self.default_name,
            raise_on_invalid=self._raise_on_invalid,
            simple_accessors=self._simple_accessors,
            named_scopes=self._named_scopes,
            scope_extensions=self._scope_extensions,
        )
        options.update(kwargs)

        return EnumDescriptor(table=self._value_map, **options)

    # ..................{ PRIVATE ~ resolvers               }..................
    def _resolve_default(self, default: object) -> EnumRawValue:
        '''
        Raw value resolving invalid reads and writes of this attribute, given
        the ``default`` parameter passed to the :meth:`__init__` method.
        '''

        # If no default was passed, compute the smallest raw value.
        if default is UNSET:
            return get_value_min(self._value_map)

        # Coerce enumeration members into names.
        default = _coerce_name(default)

        # If this default is a name, return that name's raw value.
        if self._value_map.has_name(default):
            return self._value_map.forward(default)
        # Else if this default is a raw value, return this value as is.
        elif self._value_map.has_value(default):
            return default

        # Else, this default is unresolvable.
        raise MagicEnumConfigException(
            'Enum attribute "{}" default {!r} '
            'neither a name nor a value of {!r}.'.format(
                self._name, default, self._value_map))

# ....................{ GETTERS                           }....................
@beartype
def get_value_min(value_map: ValueMap) -> EnumRawValue:
    '''
    Smallest raw value of the passed value map, where ``None`` (the absent
    value) is smaller than every other raw value.

    Parameters
    ----------
    value_map : ValueMap
        Value map to be inspected.

    Returns
    ----------
    EnumRawValue
        Smallest raw value of this value map.

    Raises
    ----------
    MagicEnumConfigException
        If the raw values of this value map are *not* mutually orderable.

    Examples
    ----------
        >>> from magicenum.enum.enumdesc import get_value_min
        >>> from magicenum.enum.enummap import ValueMap
        >>> get_value_min(ValueMap({'draft': 1, 'unknown': 0}))
        0
        >>> get_value_min(ValueMap({'unknown': 0, 'simple': None})) is None
        True
    '''

    # Sort all "None" values before all other values. Tuples compare
    # lexicographically; comparing the second items of two such tuples reduces
    # to comparing two non-"None" values, as value maps contain at most one
    # "None" value.
    try:
        return min(
            value_map.values_raw,
            key=lambda value: (value is not None, value),
        )
    except TypeError as exception:
        raise MagicEnumConfigException(
            'Enum values of {!r} unorderable; '
            'pass an explicit default instead.'.format(
                value_map)) from exception

# ....................{ PRIVATE ~ coercers                }....................
def _coerce_name(value: object) -> object:
    '''
    Name of the passed enumeration member if this value is an enumeration
    member *or* this value as is otherwise.
    '''

    return value.name if isinstance(value, Enum) else value
