## general matrix operations and transformation matrices for yapspace

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

from math import *
import yapspace.tolerance as tol
import yapspace.vector as vector
from yapspace.errors import (DegenerateGeometryError, MatrixDimensionsError,
                             MatrixIndexError)

## a matrix is a rows x cols list of row lists of floats.  Matrix
## sizes are fixed at construction.

## Vectors are row vectors: Vector.transform(m) computes v x M, which
## is also what OrientedBox uses, since the rows of its matrix are the
## box axes.  Matrix.mul(v) computes the column product M v.  The
## rotation factories below build the usual right-handed rotation
## matrices, so M v rotates v counterclockwise about the axis while
## v x M rotates it by the same angle clockwise.  Composition is
## left to right for row vectors: v x A x B applies A first.


class Matrix:
    """rows x cols matrix of floats"""

    def __init__(self,rows,cols=None,values=None):
        if cols is None:
            cols = rows
        if not (isinstance(rows,int) and isinstance(cols,int)) \
           or rows < 1 or cols < 1:
            raise MatrixDimensionsError('bad matrix dimensions: {}x{}'.format(rows,cols))
        self.rows = rows
        self.cols = cols
        self.m = [[0.0]*cols for i in range(rows)]
        if values is None:
            return
        if len(values) == rows and \
           all(isinstance(r,(tuple,list)) and len(r) == cols for r in values):
            for i in range(rows):
                for j in range(cols):
                    self.set(i,j,values[i][j])
        elif len(values) == rows*cols:
            for i in range(rows):
                for j in range(cols):
                    self.set(i,j,values[i*cols+j])
        else:
            raise MatrixDimensionsError('bad initialization values for {}x{} matrix: {}'.format(rows,cols,values))

    def __repr__(self):
        return "Matrix({},{},{})".format(self.rows,self.cols,self.m)

    def __eq__(self,other):
        if not isinstance(other,Matrix):
            return NotImplemented
        return self.close(other)

    __hash__ = None

    def copy(self):
        return Matrix(self.rows,self.cols,self.m)

    def issquare(self):
        return self.rows == self.cols

    def _checksquare(self,op):
        if not self.issquare():
            raise MatrixDimensionsError('{} requires a square matrix, not {}x{}'.format(op,self.rows,self.cols))

    def _checkrow(self,i):
        if not isinstance(i,int) or i < 0 or i >= self.rows:
            raise MatrixIndexError('bad row index: {}'.format(i))

    def _checkcol(self,j):
        if not isinstance(j,int) or j < 0 or j >= self.cols:
            raise MatrixIndexError('bad column index: {}'.format(j))

    #return value indexed by i,j
    def get(self,i,j):
        self._checkrow(i)
        self._checkcol(j)
        return self.m[i][j]

    #set value indexed by i,j
    def set(self,i,j,x):
        self._checkrow(i)
        self._checkcol(j)
        if not tol.isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        self.m[i][j] = float(x)

    def getrow(self,i):
        self._checkrow(i)
        return list(self.m[i])

    def getcol(self,j):
        self._checkcol(j)
        return [self.m[i][j] for i in range(self.rows)]

    def setrow(self,i,x):
        self._checkrow(i)
        x = list(x)
        if len(x) != self.cols:
            raise MatrixDimensionsError('bad row passed to setrow: {}'.format(x))
        for j in range(self.cols):
            self.set(i,j,x[j])

    def setcol(self,j,x):
        self._checkcol(j)
        x = list(x)
        if len(x) != self.rows:
            raise MatrixDimensionsError('bad column passed to setcol: {}'.format(x))
        for i in range(self.rows):
            self.set(i,j,x[i])

    ## structural operations, all returning new matrices
    ## -------------------------------------------------

    def transpose(self):
        return Matrix(self.cols,self.rows,
                      [self.getcol(j) for j in range(self.cols)])

    def swaprows(self,i,k):
        self._checkrow(i)
        self._checkrow(k)
        result = self.copy()
        result.m[i], result.m[k] = result.m[k], result.m[i]
        return result

    def swapcols(self,j,k):
        self._checkcol(j)
        self._checkcol(k)
        result = self.copy()
        for row in result.m:
            row[j], row[k] = row[k], row[j]
        return result

    def scale(self,k):
        if not tol.isgoodnum(k):
            raise ValueError('bad scale factor: {}'.format(k))
        return Matrix(self.rows,self.cols,
                      [[x*k for x in row] for row in self.m])

    def minor(self,i,j):
        """ the matrix with row ``i`` and column ``j`` removed """
        self._checksquare('minor')
        self._checkrow(i)
        self._checkcol(j)
        if self.rows == 1:
            raise MatrixDimensionsError('1x1 matrix has no minor')
        vals = [[self.m[r][c] for c in range(self.cols) if c != j]
                for r in range(self.rows) if r != i]
        return Matrix(self.rows-1,self.cols-1,vals)

    ## arithmetic
    ## ----------

    def _checksame(self,x,op):
        if not isinstance(x,Matrix):
            raise ValueError('bad thing passed to {}(): {}'.format(op,x))
        if x.rows != self.rows or x.cols != self.cols:
            raise MatrixDimensionsError('{} of {}x{} and {}x{} matrices'.format(
                op,self.rows,self.cols,x.rows,x.cols))

    def add(self,x):
        self._checksame(x,'add')
        return Matrix(self.rows,self.cols,
                      [[self.m[i][j]+x.m[i][j] for j in range(self.cols)]
                       for i in range(self.rows)])

    def sub(self,x):
        self._checksame(x,'sub')
        return Matrix(self.rows,self.cols,
                      [[self.m[i][j]-x.m[i][j] for j in range(self.cols)]
                       for i in range(self.rows)])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # Vector, compute Mx (column vector).  If x is a scalar, compute
    # xM.  Anything else is an error.
    def mul(self,x):
        if isinstance(x,Matrix):
            if self.cols != x.rows:
                raise MatrixDimensionsError('product of {}x{} and {}x{} matrices'.format(
                    self.rows,self.cols,x.rows,x.cols))
            vals = [[sum(self.m[i][k]*x.m[k][j] for k in range(self.cols))
                     for j in range(x.cols)]
                    for i in range(self.rows)]
            return Matrix(self.rows,x.cols,vals)
        elif isinstance(x,vector.Vector):
            if self.rows != 3 or self.cols != 3:
                raise MatrixDimensionsError('vector product requires 3x3 matrix')
            return vector.Vector(*[self.m[i][0]*x.x + self.m[i][1]*x.y + self.m[i][2]*x.z
                                   for i in range(3)])
        elif tol.isgoodnum(x):
            return self.scale(x)

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def pow(self,n):
        """ ``n``-th power of a square matrix, ``n >= 0`` """
        self._checksquare('pow')
        if not isinstance(n,int) or n < 0:
            raise ValueError('bad exponent passed to pow: {}'.format(n))
        result = Identity(self.rows)
        base = self
        while n:
            if n & 1:
                result = result.mul(base)
            base = base.mul(base)
            n >>= 1
        return result

    def trace(self):
        self._checksquare('trace')
        return sum(self.m[i][i] for i in range(self.rows))

    ## square matrix operations
    ## ------------------------

    def determinant(self):
        self._checksquare('determinant')
        m = self.m
        n = self.rows
        if n == 1:
            return m[0][0]
        if n == 2:
            return m[0][0]*m[1][1] - m[0][1]*m[1][0]
        if n == 3:
            return (m[0][0]*(m[1][1]*m[2][2] - m[1][2]*m[2][1])
                    - m[0][1]*(m[1][0]*m[2][2] - m[1][2]*m[2][0])
                    + m[0][2]*(m[1][0]*m[2][1] - m[1][1]*m[2][0]))
        # Laplace expansion along the first row
        return sum(self.cofactor(0,j)*m[0][j] for j in range(n))

    def cofactor(self,i,j):
        self._checksquare('cofactor')
        if self.rows == 1:
            self._checkrow(i)
            self._checkcol(j)
            return 1.0
        sign = -1.0 if (i+j) % 2 else 1.0
        return sign*self.minor(i,j).determinant()

    def cofactors(self):
        self._checksquare('cofactors')
        return Matrix(self.rows,self.cols,
                      [[self.cofactor(i,j) for j in range(self.cols)]
                       for i in range(self.rows)])

    def adjugate(self):
        return self.cofactors().transpose()

    def inverse(self):
        """ inverse as adjugate / determinant; a singular matrix raises
        ``DegenerateGeometryError`` """
        self._checksquare('inverse')
        d = self.determinant()
        if tol.iszero(d):
            raise DegenerateGeometryError('cannot invert singular matrix: {}'.format(self))
        return self.adjugate().scale(1.0/d)

    def close(self,x):
        if not isinstance(x,Matrix) or x.rows != self.rows or x.cols != self.cols:
            return False
        return all(tol.close(self.m[i][j],x.m[i][j])
                   for i in range(self.rows) for j in range(self.cols))


## factories
## ---------

def fromrows(rows):
    if not rows:
        raise MatrixDimensionsError('empty row list')
    return Matrix(len(rows),len(rows[0]),rows)

def Identity(n=3):
    return Matrix(n,n,[[1.0 if i == j else 0.0 for j in range(n)]
                       for i in range(n)])

def Scale(x,y=None,z=None):
    """ 3x3 diagonal scaling matrix, uniform if only ``x`` is given """
    if y is None and z is None:
        y = z = x
    return Matrix(3,3,[[x,0,0],
                       [0,y,0],
                       [0,0,z]])

## rotations, angles in radians

def RotationX(angle):
    c = cos(angle)
    s = sin(angle)
    return Matrix(3,3,[[1,0,0],
                       [0,c,-s],
                       [0,s,c]])

def RotationY(angle):
    c = cos(angle)
    s = sin(angle)
    return Matrix(3,3,[[c,0,s],
                       [0,1,0],
                       [-s,0,c]])

def RotationZ(angle):
    c = cos(angle)
    s = sin(angle)
    return Matrix(3,3,[[c,-s,0],
                       [s,c,0],
                       [0,0,1]])

# return the arbitrary axis rotation matrix, I + sin(a) K + (1-cos(a)) K^2
# where K is the cross product matrix of the unit axis
def Rotation(axis,angle,inverse=False):
    axis = vector.vect(axis)
    m = axis.length()
    if tol.iszero(m):
        raise DegenerateGeometryError('zero-length rotation axis not allowed')
    u = axis.scale(1.0/m)
    if inverse:
        angle = -angle

    ux = u.x
    uy = u.y
    uz = u.z

    cang = cos(angle)
    cmin = 1.0-cang
    sang = sin(angle)

    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin]]

    return Matrix(3,3,R)

def product(*ms):
    """ left-to-right product of one or more matrices """
    if not ms:
        raise ValueError('product of no matrices')
    result = ms[0]
    for m in ms[1:]:
        result = result.mul(m)
    return result
