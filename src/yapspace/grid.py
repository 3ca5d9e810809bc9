## conversions between integer grid cells and continuous space

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

## A grid cell is a tuple of three ints naming the unit cube whose
## minimum corner is at those coordinates.  Continuous points map to
## cells by flooring each coordinate, so (-0.5, 0, 1.9) is in cell
## (-1, 0, 1).

from math import floor

from yapspace.box import AxisAlignedBox
from yapspace.vector import Vector, vect


def iscell(c):
    return isinstance(c,tuple) and len(c) == 3 and \
        all(isinstance(i,int) and not isinstance(i,bool) for i in c)

def _checkcell(c):
    if not iscell(c):
        raise ValueError('bad grid cell: {}'.format(c))
    return c

def cell(p):
    """ the cell containing point ``p`` """
    p = vect(p)
    return (floor(p.x),floor(p.y),floor(p.z))

def point(c):
    """ minimum corner of cell ``c`` """
    x, y, z = _checkcell(c)
    return Vector(x,y,z)

def cellcenter(c):
    return point(c).add(Vector(0.5,0.5,0.5))

def cellbox(c):
    """ the unit box occupied by cell ``c`` """
    return AxisAlignedBox(cellcenter(c),Vector(0.5,0.5,0.5))

def rangebox(a,b):
    """ box covering every cell in the inclusive range ``a`` .. ``b`` """
    a = _checkcell(a)
    b = _checkcell(b)
    lo = tuple(min(a[i],b[i]) for i in range(3))
    hi = tuple(max(a[i],b[i])+1 for i in range(3))
    return AxisAlignedBox.frompoints(Vector(*lo),Vector(*hi))

def boxcells(box):
    """ inclusive cell range ``(lo, hi)`` touched by ``box`` """
    return (cell(box.min()),cell(box.max()))
