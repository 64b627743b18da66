#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **types** (i.e., classes, tuples of classes and PEP-compliant type
hints) of general-purpose interest throughout the codebase.

Annotations
----------
Callables decorated by :func:`beartype.beartype` may be annotated by either the
PEP-compliant type hints or the tuples of classes defined below, both of which
:mod:`beartype` supports.
'''

# ....................{ IMPORTS                           }....................
from beartype.typing import (
    Callable,
    Hashable,
    Mapping,
    Optional,
)
from collections.abc import Mapping as MappingABC
from enum import EnumMeta

# ....................{ TYPES                             }....................
ClassType = type
'''
Type of all types.
'''


NoneType = type(None)
'''
Type of the ``None`` singleton.
'''


MappingType = MappingABC
'''
Abstract interface implemented by all dictionary-like objects, both mutable and
immutable.
'''

# ....................{ TYPES ~ enum                      }....................
EnumType = EnumMeta
'''
Metaclass of all **enumeration types** (i.e., :class:`Enum` subclasses).
'''

# ....................{ TUPLES                            }....................
ClassOrNoneTypes = (ClassType, NoneType)
'''
Tuple of both the type of all types *and* the type of the ``None`` singleton.
'''


MappingOrEnumTypes = (MappingType, EnumType)
'''
Tuple of both the dictionary-like interface *and* the metaclass of all
enumeration types, matching every object from which a definition table is
constructible.
'''

# ....................{ HINTS ~ enum                      }....................
EnumName = str
'''
PEP-compliant type hint matching a **symbolic name** (i.e., key of a
definition table naming one of the values an enumerated attribute may store).
'''


EnumRawValue = Optional[Hashable]
'''
PEP-compliant type hint matching a **raw value** (i.e., value of a definition
table as physically stored by the host object, commonly an integer but possibly
any hashable scalar or ``None``, the absent sentinel).
'''


EnumTable = Mapping[str, EnumRawValue]
'''
PEP-compliant type hint matching a **definition table** (i.e., ordered mapping
from symbolic names to raw values).
'''

# ....................{ HINTS ~ storage                   }....................
SlotGetter = Callable[[object, str], object]
'''
PEP-compliant type hint matching a **slot getter** (i.e., callable accepting a
host object and the name of a storage slot of that object and returning the raw
value stored in that slot or ``None`` if that slot is empty).
'''


SlotSetter = Callable[[object, str, object], None]
'''
PEP-compliant type hint matching a **slot setter** (i.e., callable accepting a
host object, the name of a storage slot of that object and a raw value to be
stored in that slot).
'''
