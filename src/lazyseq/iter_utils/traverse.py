from collections.abc import Iterator

from lazyseq.utils.types import Cursor, RefLike, Traversable


def traverse[T](first: Cursor[T], last: Cursor[T]) -> Iterator[T]:
    """
    Yields the value under each position of [first, last).

    Termination is by equality with `last` only. `first` itself is left
    untouched; a copy does the walking.
    """
    it = first.copy()

    while it != last:
        yield it.get()
        it += 1


def traverse_refs(first: Cursor, last: Cursor) -> Iterator[RefLike]:
    """like traverse, but yields references so callers can write through them"""
    it = first.copy()

    while it != last:
        yield it.ref()
        it += 1


def traverse_back[T](rfirst: Cursor[T], rlast: Cursor[T]) -> Iterator[T]:
    """
    Walks backward from `rfirst` (the last element, usually `end() - 1`)
    down to, but excluding, `rlast` (usually `begin() - 1`).
    """
    it = rfirst.copy()

    while it != rlast:
        yield it.get()
        it -= 1


def distance(seq: Traversable) -> int:
    """number of unit steps from seq.begin() to seq.end()"""
    it = seq.begin()
    last = seq.end()
    steps = 0

    while it != last:
        it += 1
        steps += 1

    return steps
