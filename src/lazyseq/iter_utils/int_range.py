"""
Lazy integer ranges with begin/end cursors.

usage:
    for i in int_range(10): ...
    for i in iter_range("Hello"): ...  # indices 0..4

    it, last = r.begin(), r.end()
    while it != last:
        use(it.get())
        it += 1
"""

import operator
from collections.abc import Iterator
from logging import warning
from typing import Any, Self, final, override

import numpy as np

from lazyseq.iter_utils.traverse import distance, traverse, traverse_back
from lazyseq.utils.refs import ValueRef
from lazyseq.utils.types import SizedIterable, Traversable


def _scalar_type(dtype: Any) -> Any:
    """the callable scalar type behind any integer dtype spelling; int stays int"""
    if dtype is int:
        return int

    if not np.issubdtype(np.dtype(dtype), np.integer):
        raise ValueError(f"dtype must be an integer type, got {dtype!r}")

    return np.dtype(dtype).type


@final
class RangeCursor:
    """
    Integer cursor. Moves by whole steps; compares by current value only.

    Two cursors with different steps but the same value are equal. This is
    what lets a cursor recognise the end position, and it also means a single
    traversal must not mix cursors of different steps.
    """

    __slots__ = ("value", "step", "dtype")

    def __init__(self, value: int = 0, step: int = 1, dtype: Any = int):
        self.value = value
        self.step = step
        self.dtype = dtype

    def get(self):
        return self.dtype(self.value)

    def ref(self) -> ValueRef:
        return ValueRef(self.get())

    def copy(self) -> Self:
        return type(self)(self.value, self.step, self.dtype)

    def next(self) -> Self:
        self.value += self.step
        return self

    def prev(self) -> Self:
        self.value -= self.step
        return self

    def __iadd__(self, n: int) -> Self:
        self.value += n * self.step
        return self

    def __isub__(self, n: int) -> Self:
        self.value -= n * self.step
        return self

    def __add__(self, n: int) -> Self:
        it = self.copy()
        it += n
        return it

    def __sub__(self, n: int) -> Self:
        it = self.copy()
        it -= n
        return it

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value == other.value

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value != other.value

    def __lt__(self, other: "RangeCursor") -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other: "RangeCursor") -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value > other.value

    def __le__(self, other: "RangeCursor") -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value <= other.value

    def __ge__(self, other: "RangeCursor") -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self.value >= other.value

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        return f"RangeCursor(value={self.value}, step={self.step})"


@final
class IntRange:
    """
    The integers start, start + step, ... up to but excluding stop, produced
    on demand.

    The end cursor sits on the first value of the step grid at or past
    `stop`, so IntRange(2, 10, 3) yields 2, 5, 8 and then meets end() at 11.

    If `step` points away from `stop` (IntRange(5, 0), IntRange(0, 5, -1))
    the end cursor is placed on `stop` itself, which iteration never lands
    on: such a range does not terminate. Avoiding it is up to the caller;
    a warning is logged when one is built.
    """

    def __init__(self, start: int, stop: int, step: int = 1, dtype: Any = int):
        start, stop, step = (operator.index(x) for x in (start, stop, step))

        if step == 0:
            raise ValueError("step must be non-zero")

        self.start = start
        self.stop = stop
        self.step = step
        self.dtype = _scalar_type(dtype)

        span = stop - start

        if span == 0:
            self._terminal = start
        elif (span > 0) == (step > 0):
            count = -(-span // step)
            self._terminal = start + count * step
        else:
            warning(
                f"IntRange({start}, {stop}, {step}): step moves away from the "
                "bound, iteration will not terminate"
            )
            self._terminal = stop

    def begin(self) -> RangeCursor:
        return RangeCursor(self.start, self.step, self.dtype)

    def end(self) -> RangeCursor:
        """
        Sits on the step grid, not on `stop`: IntRange(2, 10, 3).end() is at 11.
        Compare cursors against end(), never against stop.
        """
        return RangeCursor(self._terminal, self.step, self.dtype)

    def rbegin(self) -> RangeCursor:
        return self.end() - 1

    def rend(self) -> RangeCursor:
        return self.begin() - 1

    def __iter__(self) -> Iterator:
        return traverse(self.begin(), self.end())

    def __reversed__(self) -> Iterator:
        return traverse_back(self.rbegin(), self.rend())

    @override
    def __repr__(self) -> str:
        return f"IntRange({self.start}, {self.stop}, {self.step})"


def int_range(start: int, stop: int | None = None, step: int = 1, dtype: Any = int) -> IntRange:
    """
    int_range(stop[, step=]) is int_range(0, stop, step);
    int_range(start, stop[, step]) mirrors IntRange.
    """
    if stop is None:
        return IntRange(0, start, step, dtype)

    return IntRange(start, stop, step, dtype)


def iter_range(seq: SizedIterable | Traversable, dtype: Any = int) -> IntRange:
    """
    The indices [0, length) of an existing sequence.

    Sized objects are measured with len(); begin/end traversables are
    measured by walking from begin() to end().
    """
    if hasattr(seq, "begin") and hasattr(seq, "end"):
        length = distance(seq)  # pyright: ignore[reportArgumentType]
    elif hasattr(seq, "__len__"):
        length = len(seq)  # pyright: ignore[reportArgumentType]
    else:
        raise TypeError(f"cannot measure the length of {type(seq).__name__}")

    return IntRange(0, length, 1, dtype)
