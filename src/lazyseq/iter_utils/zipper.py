from collections.abc import Iterator
from typing import Any, Self, final, override

from lazyseq.iter_utils.seq_view import as_traversable
from lazyseq.iter_utils.traverse import traverse, traverse_back, traverse_refs
from lazyseq.utils.types import Cursor, RefLike, Traversable


@final
class ZipCursor:
    """
    One cursor per zipped sequence, moved in lockstep.

    Every movement is applied to every component, including components that
    have already reached their own end. Dereferencing such a component is
    delegated to it unchecked.

    Two zip cursors are equal as soon as ANY pair of components is equal, so
    a traversal against `end()` stops at the shortest sequence. Comparing two
    arbitrary mid-traversal zip cursors is therefore not meaningful.
    """

    __slots__ = ("cursors",)

    def __init__(self, cursors: tuple[Cursor, ...]):
        self.cursors = cursors

    def get(self) -> tuple[Any, ...]:
        return tuple(it.get() for it in self.cursors)

    def ref(self) -> tuple[RefLike, ...]:
        return tuple(it.ref() for it in self.cursors)

    def copy(self) -> Self:
        return type(self)(tuple(it.copy() for it in self.cursors))

    def __iadd__(self, n: int) -> Self:
        for it in self.cursors:
            it += n
        return self

    def __isub__(self, n: int) -> Self:
        for it in self.cursors:
            it -= n
        return self

    def __add__(self, n: int) -> Self:
        return type(self)(tuple(it + n for it in self.cursors))

    def __sub__(self, n: int) -> Self:
        return type(self)(tuple(it - n for it in self.cursors))

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZipCursor):
            return NotImplemented

        # nothing zipped: begin and end coincide
        if not self.cursors:
            return True

        return any(a == b for a, b in zip(self.cursors, other.cursors))

    @override
    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        return f"ZipCursor({', '.join(map(repr, self.cursors))})"


@final
class Zipper:
    """
    streaming [...T1], [...T2], ..., [...TN] -> [... (T1, T2, ..., TN) ]

    The wrapped sequences are borrowed, never copied. Plain sequences are
    viewed through a SeqView; begin/end traversables (IntRange, another
    Zipper, ...) are used as they are. Iteration stops at the shortest.
    """

    def __init__(self, *seqs: Any):
        self.seqs: tuple[Traversable, ...] = tuple(as_traversable(seq) for seq in seqs)

    @property
    def arity(self) -> int:
        return len(self.seqs)

    def begin(self) -> ZipCursor:
        return ZipCursor(tuple(seq.begin() for seq in self.seqs))

    def end(self) -> ZipCursor:
        return ZipCursor(tuple(seq.end() for seq in self.seqs))

    def refs(self) -> Iterator[RefLike]:
        """
        Like iterating, but yields tuples of references. Writing through a
        reference writes into the wrapped sequence.
        """
        return traverse_refs(self.begin(), self.end())

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return traverse(self.begin(), self.end())

    def __reversed__(self) -> Iterator[tuple[Any, ...]]:
        """only lines up element-wise when all sequences have the same length"""
        return traverse_back(self.end() - 1, self.begin() - 1)

    @override
    def __repr__(self) -> str:
        return f"Zipper(arity={self.arity})"


def zip_(*seqs: Any) -> Zipper:
    """
    usage:
        names = ["a", "b", "c"]
        scores = [1, 2, 3]
        for name, score in zip_(names, scores): ...

        for _, score in zip_(names, scores).refs():
            score.set(score.get() * 10)  # scores is now [10, 20, 30]
    """
    return Zipper(*seqs)
