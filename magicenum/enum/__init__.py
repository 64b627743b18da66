#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2025 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Enumerated attribute** (i.e., model attribute whose stored values map
to symbolic names) facilities.
'''
