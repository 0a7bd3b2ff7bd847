from .int_range import IntRange, RangeCursor, int_range, iter_range
from .seq_view import SeqCursor, SeqView, as_traversable, readonly
from .traverse import distance, traverse, traverse_back, traverse_refs
from .zipper import ZipCursor, Zipper, zip_

__all__ = [
    "IntRange",
    "RangeCursor",
    "SeqCursor",
    "SeqView",
    "ZipCursor",
    "Zipper",
    "as_traversable",
    "distance",
    "int_range",
    "iter_range",
    "readonly",
    "traverse",
    "traverse_back",
    "traverse_refs",
    "zip_",
]
