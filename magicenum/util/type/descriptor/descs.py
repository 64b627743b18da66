#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **non-data descriptor** (i.e., objects satisfying the non-data
descriptor protocol, typically defined at class scope) facilities.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from beartype.typing import Callable
from functools import partial
from magicenum.util.type.types import ClassOrNoneTypes

# ....................{ CLASSES                           }....................
class MethodClassOrInstance(object):
    '''
    **Class-or-instance method** (i.e., method whose implementation depends on
    whether it is accessed from a class or from an instance of that class)
    descriptor.

    Python otherwise prohibits a class and its instances from binding different
    callables to the same name. This descriptor permits, for example, a class
    method ``Model.status_value(name)`` returning the stored value of a name to
    share its name with an instance method ``model.status_value()`` returning
    the stored value of that instance.

    Attributes
    ----------
    _class_func : Callable
        Callable called when this method is accessed from a class, passed
        *only* the parameters passed by the caller.
    _instance_func : Callable
        Callable called when this method is accessed from an instance, passed
        that instance followed by the parameters passed by the caller.
    '''

    # ..................{ INITIALIZERS                      }..................
    @beartype
    def __init__(
        self, class_func: Callable, instance_func: Callable) -> None:
        '''
        Initialize this class-or-instance method.

        Parameters
        ----------
        class_func : Callable
            Callable called when this method is accessed from a class.
        instance_func : Callable
            Callable called when this method is accessed from an instance.
        '''

        # Classify all passed parameters.
        self._class_func = class_func
        self._instance_func = instance_func

    # ..................{ GETTERS                           }..................
    def __get__(self, obj: object, cls: ClassOrNoneTypes = None) -> Callable:
        '''
        Callable implementing this method for the passed object or class.
        '''

        # If this descriptor is accessed as a class variable, return the class
        # callable as is.
        if obj is None:
            return self._class_func

        # Else, return the instance callable bound to this instance.
        return partial(self._instance_func, obj)
