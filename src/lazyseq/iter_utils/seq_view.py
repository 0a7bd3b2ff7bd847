from collections.abc import Iterator, Mapping
from typing import Any, Self, final, override

from lazyseq.iter_utils.traverse import traverse
from lazyseq.utils.refs import AccessMode, ItemRef
from lazyseq.utils.types import ListLike, Traversable


@final
class SeqCursor[T]:
    """An index into a borrowed sequence. Equal iff the indices are equal."""

    __slots__ = ("seq", "index", "mode")

    def __init__(self, seq: ListLike[T], index: int, mode: AccessMode):
        self.seq = seq
        self.index = index
        self.mode = mode

    def get(self) -> T:
        return self.seq[self.index]

    def ref(self) -> ItemRef[T]:
        return ItemRef(self.seq, self.index, self.mode)

    def copy(self) -> Self:
        return type(self)(self.seq, self.index, self.mode)

    def __iadd__(self, n: int) -> Self:
        self.index += n
        return self

    def __isub__(self, n: int) -> Self:
        self.index -= n
        return self

    def __add__(self, n: int) -> Self:
        return type(self)(self.seq, self.index + n, self.mode)

    def __sub__(self, n: int) -> Self:
        return type(self)(self.seq, self.index - n, self.mode)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeqCursor):
            return NotImplemented
        return self.index == other.index

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SeqCursor):
            return NotImplemented
        return self.index != other.index

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        return f"SeqCursor(index={self.index}, mode={self.mode.name})"


@final
class SeqView[T]:
    """
    Borrowing begin/end adapter over an indexable, sized sequence
    (list, str, tuple, numpy array, ...).

    Nothing is copied: cursors and references read and write the wrapped
    sequence directly. The length is read when a cursor is requested, so
    resizing the sequence while a cursor is live is unsupported.

    Args:
        seq: the sequence to borrow
        mode: READ_ONLY or READ_WRITE. Left as None it is READ_WRITE when the
            sequence supports item assignment (and, for numpy arrays, is
            writeable) and READ_ONLY otherwise.
    """

    def __init__(self, seq: ListLike[T], mode: AccessMode | None = None):
        # numpy arrays carry their own write lock (broadcast views, frozen arrays)
        flags = getattr(seq, "flags", None)
        writable = hasattr(seq, "__setitem__") and getattr(flags, "writeable", True)

        if mode is None:
            mode = AccessMode.READ_WRITE if writable else AccessMode.READ_ONLY
        elif mode is AccessMode.READ_WRITE and not writable:
            raise TypeError(f"{type(seq).__name__} does not support item assignment")

        self.seq = seq
        self.mode = mode

    def begin(self) -> SeqCursor[T]:
        return SeqCursor(self.seq, 0, self.mode)

    def end(self) -> SeqCursor[T]:
        return SeqCursor(self.seq, len(self.seq), self.mode)

    def rbegin(self) -> SeqCursor[T]:
        return self.end() - 1

    def rend(self) -> SeqCursor[T]:
        return self.begin() - 1

    def __len__(self) -> int:
        return len(self.seq)

    def __iter__(self) -> Iterator[T]:
        return traverse(self.begin(), self.end())

    @override
    def __repr__(self) -> str:
        return f"SeqView({type(self.seq).__name__}, mode={self.mode.name})"


def readonly[T](seq: ListLike[T]) -> SeqView[T]:
    """wrap a sequence so that references into it cannot be written through"""
    return SeqView(seq, AccessMode.READ_ONLY)


def as_traversable(obj: Any) -> Traversable:
    """
    Pass begin/end traversables through, wrap indexable sized sequences in a
    SeqView. Anything else (generators, sets, ...) cannot be walked in both
    directions and is rejected.
    """
    if hasattr(obj, "begin") and hasattr(obj, "end"):
        return obj

    if hasattr(obj, "__getitem__") and hasattr(obj, "__len__") and not isinstance(obj, Mapping):
        return SeqView(obj)

    raise TypeError(f"{type(obj).__name__} is neither a sequence nor a begin/end traversable")
