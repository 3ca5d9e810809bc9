## shared floating-point tolerance policy for yapspace

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""tolerance policy for **yapspace**

====================
OVERVIEW
====================

Every equality and boundary comparison in **yapspace** goes through
the functions in this module, so that there is exactly one notion of
"close enough" in the kernel.

``epsilon`` is an *absolute* tolerance.  The default of 1E-9 assumes
coordinates roughly in the range of 1 to 1000 model units; at that
scale double-precision arithmetic keeps about six spare digits below
``epsilon``.  If you work with much larger or much smaller geometry,
change the tolerance with ``setepsilon()`` or temporarily with the
``using()`` context manager: ::

   with tolerance.using(1e-4):
       box.contains(p)

Redefine ``epsilon`` directly at your peril; other modules read it
through ``getepsilon()`` at call time.

"""

import logging
from contextlib import contextmanager
from math import isfinite

logger = logging.getLogger(__name__)

## constants
DEFAULT_EPSILON = 1e-9
epsilon = DEFAULT_EPSILON


def isgoodnum(n):
    """ determine if an argument is actually a finite scalar number,
    and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float)) \
        and isfinite(n)


def getepsilon():
    return epsilon


def setepsilon(e):
    """set the process-wide absolute tolerance, returning the old value"""
    global epsilon
    if not isgoodnum(e) or e <= 0:
        raise ValueError('bad tolerance passed to setepsilon: {}'.format(e))
    old = epsilon
    epsilon = float(e)
    logger.debug("tolerance changed from %g to %g", old, epsilon)
    return old


@contextmanager
def using(e):
    """temporarily work with a different tolerance"""
    old = setepsilon(e)
    try:
        yield epsilon
    finally:
        setepsilon(old)


## utilty function to determine if scalars a and b are the same to
## within epsilon
def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def iszero(a):
    return abs(a) < epsilon

## boundary comparisons: a value within epsilon of the bound is on
## the bound, and bounds are inclusive

def lessequal(a,b):
    """ is ``a <= b`` allowing for epsilon """
    return a < b + epsilon

def greaterequal(a,b):
    """ is ``a >= b`` allowing for epsilon """
    return a > b - epsilon

def within(a,lo,hi):
    return lessequal(lo,a) and lessequal(a,hi)
