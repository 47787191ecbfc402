"""
Vector arithmetic failures.

One failure class: operands whose dimensions break an operation's contract.
A mismatch is a caller bug, so nothing in ndvector catches it.
"""

from typing import Optional


class DimensionMismatchError(ValueError):
    """
    Raised when operand dimensions are incompatible with an operation.

    Subclasses ValueError, so a broad `except ValueError` in caller code will
    also catch it. Keep such handlers narrow around vector arithmetic: a
    mismatch means the caller has a bug, and nothing should recover from it.
    """

    def __init__(
        self,
        operation: str,
        expected: int,
        actual: int,
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.expected = expected
        self.actual = actual

        if message is None:
            message = f"{operation}: dimensions don't match ({expected} != {actual})"

        super().__init__(message)


def cross_mismatch(left: int, right: int) -> DimensionMismatchError:
    """Build the cross product error (both operands must be 3-dimensional)."""
    actual = left if left != 3 else right
    return DimensionMismatchError(
        'cross',
        expected=3,
        actual=actual,
        message=(
            "cross product: both vectors must be 3-dimensional "
            f"(got {left} and {right})"
        ),
    )
