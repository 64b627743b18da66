#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Sentinel** (i.e., objects of arbitrary unique value, typically used to
distinguish edge-case results from the standard ``None`` singleton) facilities.
'''

# ....................{ CLASSES                           }....................
class Sentinel(object):
    '''
    Class encapsulating sentinel objects of arbitrary (albeit unique) value.

    Instances of this class are intended to be used as placeholder objects,
    typically to distinguish unpassed optional parameters from parameters
    explicitly passed as ``None``.

    Attributes
    ----------
    _name : str
        Human-readable name of this sentinel, embedded in its representation.
    '''

    def __init__(self, name: str) -> None:
        '''
        Initialize this sentinel.

        Parameters
        ----------
        name : str
            Human-readable name of this sentinel.
        '''

        self._name = name


    def __repr__(self) -> str:
        '''
        Human- and machine-readable representation of this sentinel.

        This method has been overridden purely to improve the debuggability of
        algorithms requiring instances of this class.
        '''

        return 'Sentinel({!r})'.format(self._name)


    def __bool__(self) -> bool:
        # Sentinels are "unset" values and hence falsy.
        return False

# ....................{ SENTINELS                         }....................
UNSET = Sentinel('UNSET')
'''
Sentinel signifying an optional parameter to have *not* been passed.

This sentinel is distinct from ``None``, which :mod:`magicenum` reserves as the
absent stored value of definition tables (e.g., ``{'simple': None}``). Callers
may thus explicitly pass ``default=None`` to select the entry whose stored
value is absent, while omitting ``default`` entirely selects the computed
default instead.
'''
