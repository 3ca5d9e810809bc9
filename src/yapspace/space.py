## capability contracts shared by all yapspace shapes

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

"""capability contracts for **yapspace** shapes

``Space`` is anything that occupies a region: it has a volume, a
surface area, a center, and can say whether a point lies inside it.

``Transformable`` is anything that can be translated and scaled.  A
subclass provides ``translate()`` and ``scale()``; the scaling about
an arbitrary point and about the shape's own center are derived from
those two.

Both contracts mutate the shape in place.  Mutators return ``self`` so
they can be chained.
"""

from abc import ABC, abstractmethod

import yapspace.tolerance as tol
from yapspace.vector import Vector, vect


def _delta(dx,dy,dz):
    if dy is None and dz is None:
        return vect(dx)
    return Vector(dx,dy,dz)


class Space(ABC):

    @abstractmethod
    def volume(self):
        pass

    @abstractmethod
    def surfacearea(self):
        pass

    @abstractmethod
    def center(self):
        pass

    @abstractmethod
    def contains(self,p):
        """ is point ``p`` inside the shape, boundary included """
        pass


class Transformable(ABC):

    @abstractmethod
    def translate(self,dx,dy=None,dz=None):
        """ move by a ``Vector`` or by ``dx, dy, dz`` """
        pass

    @abstractmethod
    def scale(self,factor):
        """ scale about the origin """
        pass

    def scalearound(self,p,factor):
        if not tol.isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        p = vect(p)
        self.translate(-p)
        try:
            self.scale(factor)
        finally:
            self.translate(p)
        return self

    def scalecentric(self,factor):
        return self.scalearound(self.center(),factor)
