"""
ndvector: n-dimensional Vector Arithmetic
=========================================

One type, chainable operations:

    from ndvector import Vector
    v = Vector.of(1, 2).add(Vector.of(3, 4)).dot(Vector.of(5, 6))   # 56.0

    Vector(n)                   zero vector of dimension n
    Vector.of(*values)          vector from literal components
    add / sub / mul / dot       element-wise arithmetic and inner product
    cross                       3-D cross product (right-handed)
    norm                        Euclidean length

Dimension mismatches raise ndvector.DimensionMismatchError.
Tolerance comparison lives in ndvector.testing, settings in ndvector.config.
"""

__version__ = '0.1.0'

from ndvector.errors import DimensionMismatchError
from ndvector.vector import Vector
from ndvector import config
from ndvector import testing

__all__ = [
    'Vector',
    'DimensionMismatchError',
    'config',
    'testing',
]
