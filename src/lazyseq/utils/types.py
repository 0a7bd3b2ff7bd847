from collections.abc import Iterable, Sized
from typing import Any, Protocol, Self

from lazyseq.utils.refs import Ref


class ListLike[T](Protocol):
    def __getitem__(self, idx: int) -> T: ...
    def __len__(self) -> int: ...


class SizedIterable[T](Sized, Iterable[T], Protocol):
    pass


class Cursor[T](Protocol):
    """
    A position inside a traversable, in the begin/end style.

    A cursor is moved in place by `+=`/`-=` (by whole steps) and copied by
    `+`/`-`. Reaching the end is detected by comparing against the cursor
    returned from the owner's `end()`, never by an exception.
    """

    def get(self) -> T: ...
    def ref(self) -> Any: ...
    def copy(self) -> Self: ...
    def __iadd__(self, n: int) -> Self: ...
    def __isub__(self, n: int) -> Self: ...
    def __add__(self, n: int) -> Self: ...
    def __sub__(self, n: int) -> Self: ...
    def __eq__(self, other: object) -> bool: ...


class Traversable[T](Protocol):
    """Anything that hands out a begin and an end cursor."""

    def begin(self) -> Cursor[T]: ...
    def end(self) -> Cursor[T]: ...


# a single element reference or, for zipped cursors, a tuple of them
RefLike = Ref | tuple[Any, ...]
