#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Enumeration accessors** (i.e., objects reading and writing a single
enumerated attribute of arbitrary host objects through those objects' raw
storage slots).
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from beartype.typing import Optional
from enum import Enum
from magicenum.enum.enumdesc import EnumDescriptor
from magicenum.util.type.types import (
    EnumName,
    EnumRawValue,
    SlotGetter,
    SlotSetter,
)

# ....................{ ENUMS                             }....................
class SlotStorage(Enum):
    '''
    Enumeration of all **slot storage strategies** (i.e., protocols by which
    the raw value of an enumerated attribute is stored by host objects).

    Attributes
    ----------
    ITEM : enum
        Raw values are stored by **subscription** (i.e., ``host[slot_name]``
        and ``host[slot_name] = value``), as is the case for rows of most
        object-relational mappers. Empty slots are signified by ``None``.
        The slot name defaults to the attribute name.
    ATTR : enum
        Raw values are stored as **instance variables** (i.e.,
        ``getattr(host, slot_name)`` and ``setattr(host, slot_name, value)``).
        Undefined variables are treated as empty slots. The slot name defaults
        to the attribute name prefixed by ``_``, as the attribute name itself
        is occupied by the enumerated attribute.
    '''

    ITEM = 'item'
    ATTR = 'attr'

# ....................{ STORAGE ~ item                    }....................
def get_item_slot(host: object, slot_name: str) -> object:
    '''
    Raw value stored by subscription in the passed host object under the
    passed slot name if any *or* ``None`` otherwise.
    '''

    # Dictionary-like hosts raise "KeyError" on never-assigned slots, which
    # are empty slots by another name.
    try:
        return host[slot_name]
    except KeyError:
        return None


def set_item_slot(host: object, slot_name: str, value: object) -> None:
    '''
    Store the passed raw value by subscription in the passed host object under
    the passed slot name.
    '''

    host[slot_name] = value

# ....................{ STORAGE ~ attr                    }....................
def get_attr_slot(host: object, slot_name: str) -> object:
    '''
    Raw value stored as the instance variable of the passed host object with
    the passed name if defined *or* ``None`` otherwise.
    '''

    return getattr(host, slot_name, None)


def set_attr_slot(host: object, slot_name: str, value: object) -> None:
    '''
    Store the passed raw value as the instance variable of the passed host
    object with the passed name.
    '''

    setattr(host, slot_name, value)

# ....................{ GLOBALS                           }....................
SLOT_STORAGE_TO_ACCESSORS = {
    SlotStorage.ITEM: (get_item_slot, set_item_slot),
    SlotStorage.ATTR: (get_attr_slot, set_attr_slot),
}
'''
Dictionary mapping from each slot storage strategy to a 2-tuple
``(slot_getter, slot_setter)`` of the callables implementing that strategy.
'''

# ....................{ CLASSES                           }....................
class EnumAccessor(object):
    '''
    **Enumeration accessor** (i.e., object reading and writing a single
    enumerated attribute of arbitrary host objects through those objects' raw
    storage slots).

    Accessors are stateless beyond the descriptor and storage strategy they
    are initialized with. In particular, accessors cache nothing; each read
    reads the host's slot and each write writes that slot.

    Attributes
    ----------
    descriptor : EnumDescriptor
        Descriptor of the enumerated attribute accessed by this accessor.
    slot_name : str
        Name of the storage slot of each host object storing the raw value of
        this attribute.
    _slot_getter : SlotGetter
        Callable returning the raw value stored in a slot of a host object.
    _slot_setter : SlotSetter
        Callable storing a raw value in a slot of a host object.
    '''

    # ..................{ INITIALIZERS                      }..................
    @beartype
    def __init__(
        self,

        # Mandatory parameters.
        descriptor: EnumDescriptor,

        # Optional parameters.
        storage: SlotStorage = SlotStorage.ITEM,
        slot_name: Optional[str] = None,
        slot_getter: Optional[SlotGetter] = None,
        slot_setter: Optional[SlotSetter] = None,
    ) -> None:
        '''
        Initialize this enumeration accessor.

        Parameters
        ----------
        descriptor : EnumDescriptor
            Descriptor of the enumerated attribute to be accessed.
        storage : SlotStorage
            Slot storage strategy of host objects. Defaults to
            :attr:`SlotStorage.ITEM`.
        slot_name : Optional[str]
            Name of the storage slot of each host object storing the raw value
            of this attribute. Defaults to ``None``, in which case the default
            slot name of this storage strategy is used.
        slot_getter : Optional[SlotGetter]
            Callable returning the raw value stored in a slot of a host object,
            overriding the getter of this storage strategy. Defaults to
            ``None``.
        slot_setter : Optional[SlotSetter]
            Callable storing a raw value in a slot of a host object, overriding
            the setter of this storage strategy. Defaults to ``None``.
        '''

        # Default slot getter and setter of this storage strategy.
        slot_getter_default, slot_setter_default = (
            SLOT_STORAGE_TO_ACCESSORS[storage])

        # If no slot name was passed, default to that of this strategy.
        if slot_name is None:
            slot_name = (
                descriptor.name if storage is SlotStorage.ITEM else
                '_' + descriptor.name)

        # Classify all passed parameters.
        self.descriptor = descriptor
        self.slot_name = slot_name
        self._slot_getter = slot_getter or slot_getter_default
        self._slot_setter = slot_setter or slot_setter_default

    # ..................{ GETTERS                           }..................
    def get(self, host: object) -> EnumName:
        '''
        Name of the raw value currently stored by the passed host object,
        defaulting to the name of the default raw value if this value is
        unknown.
        '''

        return self.descriptor.resolve_for_read(self.get_slot(host))


    def get_raw(self, host: object) -> EnumRawValue:
        '''
        Raw value currently stored by the passed host object if this object's
        slot is non-empty *or* the default raw value otherwise.

        Unlike :meth:`get`, this getter does *not* validate stored values.
        Unknown raw values (e.g., integers stored verbatim by :meth:`set`) are
        returned as is; only empty slots default.
        '''

        value = self.get_slot(host)
        return self.descriptor.default_raw if value is None else value


    def get_name(self, host: object) -> str:
        '''
        String form of the name of the raw value currently stored by the passed
        host object.
        '''

        return str(self.get(host))


    def get_slot(self, host: object) -> object:
        '''
        Raw value currently stored in the slot of the passed host object as is,
        possibly ``None`` if this slot is empty.
        '''

        return self._slot_getter(host, self.slot_name)

    # ..................{ TESTERS                           }..................
    def is_name(self, host: object, name: EnumName) -> bool:
        '''
        ``True`` only if the name of the raw value currently stored by the
        passed host object is the passed name.
        '''

        return self.get(host) == name

    # ..................{ SETTERS                           }..................
    def set(self, host: object, value: object) -> None:
        '''
        Store the raw value resolving the passed value in the slot of the
        passed host object.

        If this value is invalid *and* the ``raise_on_invalid`` option of this
        attribute is enabled, an exception is raised *before* this slot is
        modified. This slot thus retains its prior raw value.

        Raises
        ----------
        MagicEnumValueException
            If this value is invalid *and* ``raise_on_invalid`` is enabled.
        '''

        value_raw = self.descriptor.resolve_for_write(
            value, host_type_name=type(host).__name__)
        self._slot_setter(host, self.slot_name, value_raw)
