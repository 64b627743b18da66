#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Package-specific exception hierarchy.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular imports, this module may import *ONLY* from the
# standard library.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from abc import ABCMeta

# ....................{ EXCEPTIONS                        }....................
class MagicEnumException(Exception, metaclass=ABCMeta):
    '''
    Abstract base class of all package-specific exceptions.
    '''

    pass


class MagicEnumAttrException(MagicEnumException, AttributeError):
    '''
    **Attribute** (i.e., variable or method bound to an object)-specific
    exception.

    Since this exception also subclasses the builtin :class:`AttributeError`,
    the builtin :func:`hasattr` and :func:`getattr` functions treat this
    exception as a missing attribute.
    '''

    pass

# ....................{ EXCEPTIONS ~ config               }....................
class MagicEnumConfigException(MagicEnumException):
    '''
    **Enumeration configuration** (i.e., definition-time options and tables
    passed to :func:`magicenum.enum.enumdef.define_enum`)-specific exception.

    Exceptions of this type are raised only while defining an enumerated
    attribute and are never recovered from: a class with a broken enumerated
    attribute is a programming error.
    '''

    pass


class MagicEnumMappingException(MagicEnumConfigException):
    '''
    **Definition table** (i.e., mapping from symbolic names to stored values)
    -specific exception.

    This exception is typically raised on tables mapping two or more names to
    the same stored value and hence *not* invertible.
    '''

    pass

# ....................{ EXCEPTIONS ~ value                }....................
class MagicEnumValueException(MagicEnumException, ValueError):
    '''
    **Invalid enumeration value** (i.e., value assigned to an enumerated
    attribute that is neither a name nor a stored value of that attribute's
    definition table)-specific exception.

    This exception is raised only by attributes defined with the
    ``raise_on_invalid`` option enabled. Since this exception also subclasses
    the builtin :class:`ValueError`, callers catching the latter transparently
    catch this exception as well.

    Attributes
    ----------
    value : object
        Offending value.
    attr_name : str
        Name of the enumerated attribute this value was assigned to.
    host_type_name : str
        Unqualified name of the class declaring this attribute.
    '''

    # ..................{ INITIALIZERS                      }..................
    def __init__(
        self, value: object, attr_name: str, host_type_name: str) -> None:
        '''
        Initialize this exception.

        Parameters
        ----------
        value : object
            Offending value.
        attr_name : str
            Name of the enumerated attribute this value was assigned to.
        host_type_name : str
            Unqualified name of the class declaring this attribute.
        '''

        # Classify all passed parameters.
        self.value = value
        self.attr_name = attr_name
        self.host_type_name = host_type_name

        # Initialize our superclass with a message embedding these parameters.
        super().__init__(
            'Invalid value "{}" for :{} attribute of the {} model'.format(
                value, attr_name, host_type_name))
