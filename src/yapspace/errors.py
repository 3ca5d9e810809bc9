## exception types raised by yapspace

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

"""Exceptions raised by yapspace.

All of them derive from ``ValueError`` (index errors additionally
from ``IndexError``), so callers that already catch the built-in
exceptions keep working.
"""


class GeometryError(ValueError):
    """Base class for geometry kernel errors."""


class ConstructionError(GeometryError):
    """Raised when a shape would be built from invalid parameters."""


class DegenerateGeometryError(GeometryError):
    """Raised when an operation has no defined result for degenerate
    input, such as normalizing a zero-length vector."""


class VertexIndexError(GeometryError, IndexError):
    """Raised for an out-of-range vertex, face or control point index."""


class MatrixError(GeometryError):
    pass


class MatrixDimensionsError(MatrixError):
    """Raised when matrix shapes do not fit the requested operation."""


class MatrixIndexError(MatrixError, IndexError):
    pass
