#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`magicenum.util.type.descriptor.descs`
submodule.
'''

# ....................{ TESTS                             }....................
def test_method_class_or_instance() -> None:
    '''
    Test the :class:`magicenum.util.type.descriptor.descs.MethodClassOrInstance`
    descriptor.
    '''

    # Defer heavyweight imports.
    from magicenum.util.type.descriptor.descs import MethodClassOrInstance

    class Lamp(object):
        def __init__(self, watts: int) -> None:
            self.watts = watts

        # Class access doubles the passed wattage; instance access reports the
        # instance's own wattage scaled by the passed factor.
        power = MethodClassOrInstance(
            class_func=lambda watts: watts * 2,
            instance_func=lambda lamp, factor=1: lamp.watts * factor,
        )

    assert Lamp.power(30) == 60

    lamp = Lamp(watts=40)
    assert lamp.power() == 40
    assert lamp.power(3) == 120


def test_sentinel() -> None:
    '''
    Test the :data:`magicenum.util.type.obj.sentinels.UNSET` sentinel.
    '''

    # Defer heavyweight imports.
    from magicenum.util.type.obj.sentinels import UNSET, Sentinel

    assert repr(UNSET) == "Sentinel('UNSET')"
    assert not UNSET
    assert UNSET is not None
    assert Sentinel('UNSET') is not UNSET
