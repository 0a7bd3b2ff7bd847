import math

import numpy as np
import pytest

from lazyseq.iter_utils import IntRange, RangeCursor, int_range, iter_range, zip_


def walk(r: IntRange) -> list[int]:
    it, last = r.begin(), r.end()
    values = []
    while it != last:
        values.append(it.get())
        it += 1
    return values


def test_stepped_range():
    assert list(IntRange(2, 10, 3)) == [2, 5, 8]
    assert walk(IntRange(2, 10, 3)) == [2, 5, 8]
    assert list(IntRange(0, 9, 3)) == [0, 3, 6]


def test_forward_values_and_count():
    for a, b, step in [(0, 1, 1), (-4, 7, 2), (3, 100, 7), (5, 6, 10), (-10, -1, 4)]:
        values = list(IntRange(a, b, step))
        assert values == list(range(a, b, step))
        assert len(values) == math.ceil((b - a) / step)
        assert all(v < b for v in values)


def test_single_argument_form():
    for n in [0, 1, 7]:
        assert list(int_range(n)) == list(IntRange(0, n, 1))
        assert list(int_range(n)) == list(range(n))

    r = int_range(4)
    assert (r.start, r.stop, r.step) == (0, 4, 1)
    assert list(int_range(1, 6, 2)) == [1, 3, 5]


def test_empty():
    assert list(IntRange(3, 3)) == []
    assert list(int_range(0)) == []
    assert IntRange(3, 3).begin() == IntRange(3, 3).end()


def test_negative_step():
    assert list(IntRange(10, 0, -3)) == [10, 7, 4, 1]
    assert list(IntRange(5, 0, -1)) == [5, 4, 3, 2, 1]


def test_reverse_traversal():
    for a, b, step in [(0, 5, 1), (2, 10, 3), (-3, 8, 2), (10, 0, -3)]:
        r = IntRange(a, b, step)
        assert list(reversed(r)) == list(r)[::-1]

        it, last = r.rbegin(), r.rend()
        back = []
        while it != last:
            back.append(it.get())
            it -= 1
        assert back == list(r)[::-1]


def test_rbegin_rend():
    r = IntRange(0, 5)
    assert r.rbegin().get() == 4
    assert r.rend().get() == -1


def test_reiterable():
    r = IntRange(1, 9, 2)
    assert r.begin() == r.begin()
    assert r.end() == r.end()
    assert r.begin() == RangeCursor(1, 2)
    assert r.end() == RangeCursor(9, 2)
    assert list(r) == list(r) == [1, 3, 5, 7]


def test_cursor_arithmetic():
    it = RangeCursor(0, 3)
    it += 2
    assert it.get() == 6
    it -= 1
    assert it.get() == 3
    assert (it + 4).get() == 15
    assert (it - 2).get() == -3
    # + and - leave the original where it was
    assert it.get() == 3

    assert it.next().get() == 6
    assert it.prev().prev().get() == 0

    before = it.copy()
    it += 1
    assert before.get() == 0
    assert it.get() == 3


def test_cursor_comparisons_ignore_step():
    assert RangeCursor(4, 1) == RangeCursor(4, 7)
    assert RangeCursor(3, 1) != RangeCursor(4, 1)
    assert RangeCursor(3, 1) < RangeCursor(4, 2)
    assert RangeCursor(5, 1) > RangeCursor(4, 2)
    assert RangeCursor(4, 1) <= RangeCursor(4, 2)
    assert RangeCursor(4, 1) >= RangeCursor(4, 2)
    assert not RangeCursor(4, 1) < RangeCursor(4, 2)
    assert RangeCursor(1) != 1


def test_no_bounds_checks():
    r = IntRange(0, 3)
    it = r.end() + 5
    assert it.get() == 8
    assert it > r.end()


def test_const_dereference():
    ref = RangeCursor(7).ref()
    assert ref.readonly
    assert ref.get() == 7


def test_zero_step_rejected():
    with pytest.raises(ValueError):
        IntRange(0, 5, 0)


def test_non_integer_bounds_rejected():
    with pytest.raises(TypeError):
        IntRange(0, 2.5)  # pyright: ignore[reportArgumentType]


def test_diverging_step_warns(caplog):
    with caplog.at_level("WARNING"):
        r = IntRange(0, 5, -1)

    assert "will not terminate" in caplog.text
    # the end cursor is the raw bound, which the walk never lands on
    assert r.end().get() == 5
    it = r.begin()
    for _ in range(100):
        assert it != r.end()
        it += 1


def test_numpy_dtype():
    r = IntRange(0, 4, dtype=np.int32)
    values = list(r)
    assert values == [0, 1, 2, 3]
    assert all(isinstance(v, np.int32) for v in values)

    with pytest.raises(ValueError):
        IntRange(0, 4, dtype=np.float64)


def test_numpy_bounds():
    r = IntRange(np.int64(1), np.int16(7), np.int8(2))
    assert list(r) == [1, 3, 5]
    assert type(r.start) is int


def test_iter_range():
    assert list(iter_range("Hello")) == [0, 1, 2, 3, 4]
    assert list(iter_range([])) == []
    assert list(iter_range(np.zeros(3))) == [0, 1, 2]

    # begin/end traversables are measured by walking them
    assert list(iter_range(IntRange(2, 10, 3))) == [0, 1, 2]
    assert list(iter_range(zip_("abcd", [1, 2]))) == [0, 1]

    with pytest.raises(TypeError):
        iter_range(x for x in "abc")  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize("dtype", ["int32", np.dtype("int32"), np.int32])
def test_numpy_dtype_spellings(dtype):
    values = list(IntRange(0, 3, dtype=dtype))
    assert values == [0, 1, 2]
    assert all(isinstance(v, np.int32) for v in values)
    assert IntRange(0, 3, dtype=dtype).end().ref().get() == 3


def test_single_argument_form_keeps_step():
    assert list(int_range(6, step=2)) == [0, 2, 4]
    assert list(int_range(6, step=4)) == [0, 4]


def test_end_sits_on_step_grid():
    r = IntRange(2, 10, 3)
    assert r.stop == 10
    assert r.end().get() == 11
