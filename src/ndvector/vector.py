"""
n-dimensional float64 vector with chainable arithmetic.

Every operation returns a new Vector; nothing is modified in place:
    a.add(b).mul(5.0).sub(c).cross(d).dot(e)

Binary operations check dimensions up front and raise DimensionMismatchError
rather than letting numpy broadcast or fail on an index. Cross product is
defined in a right-handed orthonormal basis.
"""

import logging
import numbers
import operator
from typing import Iterable, Iterator, List, Union

import numpy as np

from ndvector.config import get_setting
from ndvector.errors import DimensionMismatchError, cross_mismatch

logger = logging.getLogger(__name__)


class Vector:
    """
    Immutable sequence of float64 components.

    Parameters
    ----------
    n : int
        Dimension. The vector starts zero-filled; n=0 is a valid empty vector.

    Use Vector.of(1, 2, 3) or Vector.from_iterable(values) to build from
    known values.
    """

    __slots__ = ('_data',)

    # Keep numpy scalars from turning `np.float64(2) * v` into an array.
    __array_ufunc__ = None

    def __init__(self, n: int):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Vector dimension must be >= 0, got {n}")
        data = np.zeros(n, dtype=np.float64)
        data.flags.writeable = False
        self._data = data

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, n: int) -> 'Vector':
        """Zero vector of dimension n."""
        return cls(n)

    @classmethod
    def of(cls, *values: float) -> 'Vector':
        """Vector from literal components: Vector.of(1, 2, 3)."""
        return cls.from_iterable(values)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> 'Vector':
        """
        Vector from any iterable of real numbers (list, tuple, 1-D array, generator).

        The values are copied, so later changes to the source do not leak in.
        """
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.asarray(values)

        if arr.dtype.kind == 'c':
            raise TypeError("Vector components must be real numbers, got complex")
        if arr.dtype.kind not in 'biufO':
            raise TypeError(f"Vector components must be real numbers, got dtype {arr.dtype}")
        if arr.ndim != 1:
            raise ValueError(f"Vector components must be one-dimensional, got shape {arr.shape}")
        if arr.dtype.kind == 'O':
            for x in arr:
                if not isinstance(x, numbers.Real):
                    raise TypeError(
                        f"Vector components must be real numbers, got {type(x).__name__}"
                    )

        return cls._wrap(np.array(arr, dtype=np.float64))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> 'Vector':
        """Take ownership of a freshly computed float64 array."""
        obj = cls.__new__(cls)
        data.flags.writeable = False
        obj._data = data
        return obj

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return len(self._data)

    @property
    def components(self) -> np.ndarray:
        """Read-only view of the components."""
        return self._data.view()

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def tolist(self) -> List[float]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Writable copy of the components."""
        return self._data.copy()

    def __repr__(self) -> str:
        precision = get_setting('display.precision', 6)
        limit = get_setting('display.max_components', 10)
        values = [f"{x:.{precision}g}" for x in self._data.tolist()]
        if len(values) > limit:
            head = (limit + 1) // 2
            tail = limit // 2
            values = values[:head] + ['...'] + (values[-tail:] if tail else [])
        return f"Vector([{', '.join(values)}])"

    def __eq__(self, other):
        """Exact component equality. Use ndvector.testing for tolerances."""
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash(tuple(self._data.tolist()))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_same_dimension(self, other: 'Vector', operation: str) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"{operation}: expected Vector, got {type(other).__name__}")
        if len(self._data) != len(other._data):
            logger.debug(
                f"{operation} called with dimensions {len(self._data)} and {len(other._data)}"
            )
            raise DimensionMismatchError(operation, len(self._data), len(other._data))

    def add(self, other: 'Vector') -> 'Vector':
        """Element-wise sum."""
        self._check_same_dimension(other, 'add')
        return Vector._wrap(self._data + other._data)

    def sub(self, other: 'Vector') -> 'Vector':
        """Element-wise difference self[i] - other[i]."""
        self._check_same_dimension(other, 'sub')
        return Vector._wrap(self._data - other._data)

    def mul(self, factor: float) -> 'Vector':
        """Multiply every component by a scalar."""
        if not isinstance(factor, numbers.Real):
            raise TypeError(f"mul: expected real scalar, got {type(factor).__name__}")
        return Vector._wrap(self._data * float(factor))

    def dot(self, other: 'Vector') -> float:
        """Sum of pairwise component products. 0.0 for empty vectors."""
        self._check_same_dimension(other, 'dot')
        return float(np.dot(self._data, other._data))

    def cross(self, other: 'Vector') -> 'Vector':
        """
        Cross product in a right-handed orthonormal basis.

        Both vectors must be 3-dimensional:
            [a1*b2 - a2*b1, a2*b0 - a0*b2, a0*b1 - a1*b0]
        """
        if not isinstance(other, Vector):
            raise TypeError(f"cross: expected Vector, got {type(other).__name__}")
        if len(self._data) != 3 or len(other._data) != 3:
            logger.debug(
                f"cross called with dimensions {len(self._data)} and {len(other._data)}"
            )
            raise cross_mismatch(len(self._data), len(other._data))

        a0, a1, a2 = self._data
        b0, b1, b2 = other._data
        return Vector._wrap(np.array([
            a1 * b2 - a2 * b1,
            a2 * b0 - a0 * b2,
            a0 * b1 - a1 * b0,
        ], dtype=np.float64))

    def norm(self) -> float:
        """Euclidean (L2) norm. 0.0 for an empty vector."""
        return float(np.sqrt(np.dot(self._data, self._data)))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor):
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return self.mul(factor)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __neg__(self):
        return self.mul(-1.0)


VectorLike = Union[Vector, Iterable[float]]
