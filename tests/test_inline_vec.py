import pytest

from vdomhtml.inline_vec import InlineVec


def push_all(vec, values):
    for value in values:
        vec.push(value)
    return vec


def filled(capacity, values):
    return push_all(InlineVec(capacity), values)


@pytest.mark.parametrize(
    "values, heap",
    [
        ([0, 2, 4, 6], False),
        (["0", "1", "2", "3"], False),
        (["0", "1", "2"], False),
        ([str(i) for i in range(8)], True),
        ([1337, 42, 17], False),
        ([1337, 42, 17, 19, 34], True),
    ],
)
def test_contents_and_storage(values, heap):
    vec = filled(4, values)
    assert vec.to_list() == values
    assert len(vec) == len(values)
    assert vec.is_heap_allocated() == heap


@pytest.mark.parametrize(
    "values, extra",
    [
        ([0, 2, 4, 6], 42),
        (["0", "1", "2", "3"], "1337"),
    ],
)
def test_push_spills_to_heap(values, extra):
    vec = filled(4, values)
    assert not vec.is_heap_allocated()
    vec.push(extra)
    assert vec.is_heap_allocated()
    assert vec.get(4) == extra
    assert vec.to_list() == values + [extra]


def test_iter():
    it = iter(filled(2, [13, 42, 17, 19]))
    assert [next(it) for _ in range(4)] == [13, 42, 17, 19]
    assert next(it, None) is None


def test_remove():
    x = filled(4, [789])
    assert x.get(0) == 789
    assert x.remove(0) == 789
    assert len(x) == 0

    with pytest.raises(IndexError):
        x.copy().remove(0)

    push_all(x, [0, 2, 4, 6])
    assert not x.is_heap_allocated()
    assert x.to_list() == [0, 2, 4, 6]

    for index, value, remaining in [
        (2, 4, [0, 2, 6]),
        (2, 6, [0, 2]),
        (1, 2, [0]),
        (0, 0, []),
    ]:
        assert x.remove(index) == value
        assert x.to_list() == remaining
    assert not x.is_heap_allocated()

    push_all(x, [i * 2 for i in range(8)])
    assert x.is_heap_allocated()
    assert x.to_list() == [0, 2, 4, 6, 8, 10, 12, 14]
    assert x.remove(7) == 14
    assert x.remove(0) == 0


def test_remove_string():
    x = filled(4, ["test"])
    assert x.remove(0) == "test"
    assert len(x) == 0


def test_inlinevec():
    x = InlineVec(4)
    assert len(x) == 0
    assert x.get(0) is None
    assert not x.is_heap_allocated()

    x.push(1337)
    assert x.get(0) == 1337
    assert not x.is_heap_allocated()

    push_all(x, range(3))
    assert len(x) == 4

    x.push(42)
    assert len(x) == 5
    assert x.is_heap_allocated()
    assert x.get(0) == 1337

    push_all(x, range(500))
    assert len(x) == 505
    assert x.get(1337) is None

    x.set(0, 444)
    assert x.get(0) == 444
    with pytest.raises(IndexError):
        x.set(99999, 1)


def test_getitem_out_of_bounds_raises():
    x = filled(2, [1])
    assert x[0] == 1
    with pytest.raises(IndexError):
        x[1]
    with pytest.raises(IndexError):
        x[-1]


def test_copy_is_independent():
    x = filled(2, [1, 2, 3])
    y = x.copy()
    assert y == x
    assert y.is_heap_allocated() == x.is_heap_allocated()
    y.push(4)
    assert x.to_list() == [1, 2, 3]
    assert y.to_list() == [1, 2, 3, 4]


def test_to_list_is_a_copy():
    x = filled(2, [5])
    items = x.to_list()
    items.append(6)
    assert len(x) == 1