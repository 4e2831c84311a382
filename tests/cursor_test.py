import pytest

from arraylist import (
    ArrayList,
    ConcurrentModificationError,
    InvalidCursorStateError,
    ListCursor,
    OutOfRangeError,
)


def test_read_set_remove_scenario():
    lst = ArrayList([10, 20, 30])
    it = lst.iterator()
    assert it.next() == 10
    assert it.editable
    it.set(99)
    assert lst.to_array() == [99, 20, 30]
    assert it.next() == 20
    it.remove()
    assert lst.to_array() == [99, 30]
    assert not it.editable
    with pytest.raises(InvalidCursorStateError):
        it.set(0)


def test_set_and_remove_need_a_prior_read():
    it = ArrayList([1, 2]).list_iterator()
    with pytest.raises(InvalidCursorStateError):
        it.set(5)
    with pytest.raises(InvalidCursorStateError):
        it.remove()


def test_set_can_repeat_but_remove_cannot():
    lst = ArrayList(["a", "b"])
    it = lst.list_iterator()
    it.next()
    it.set("x")
    it.set("y")
    assert lst.to_array() == ["y", "b"]
    it.remove()
    with pytest.raises(InvalidCursorStateError):
        it.remove()
    assert lst.to_array() == ["b"]


def test_forward_and_backward_traversal():
    lst = ArrayList([1, 2, 3])
    it = lst.list_iterator()
    assert not it.has_previous()
    assert it.previous_index() == -1
    seen = []
    while it.has_next():
        seen.append(it.next())
    assert seen == [1, 2, 3]
    assert it.next_index() == 3
    back = []
    while it.has_previous():
        back.append(it.previous())
    assert back == [3, 2, 1]
    assert it.next_index() == 0


def test_exhausted_cursor_raises_stop_iteration():
    it = ArrayList([1]).list_iterator()
    it.next()
    with pytest.raises(StopIteration):
        it.next()
    it.previous()
    with pytest.raises(StopIteration):
        it.previous()


def test_list_iterator_start_index():
    lst = ArrayList(["a", "b", "c"])
    it = lst.list_iterator(1)
    assert it.next_index() == 1
    assert it.next() == "b"
    end = lst.list_iterator(3)
    assert not end.has_next()
    assert end.previous() == "c"


@pytest.mark.parametrize("idx", [-1, 4])
def test_list_iterator_bad_start(idx):
    with pytest.raises(OutOfRangeError):
        ArrayList([1, 2, 3]).list_iterator(idx)


def test_remove_after_previous_removes_returned_element():
    lst = ArrayList([1, 2, 3])
    it = lst.list_iterator(3)
    assert it.previous() == 3
    assert it.previous() == 2
    it.remove()
    assert lst.to_array() == [1, 3]
    assert it.next_index() == 1
    assert it.next() == 3


def test_set_after_previous_writes_returned_slot():
    lst = ArrayList([1, 2, 3])
    it = lst.list_iterator(2)
    assert it.previous() == 2
    it.set(20)
    assert lst.to_array() == [1, 20, 3]


def test_add_inserts_before_next_and_is_skipped():
    lst = ArrayList(["a", "c"])
    it = lst.list_iterator()
    it.next()
    it.add("b")
    assert lst.to_array() == ["a", "b", "c"]
    assert not it.editable
    with pytest.raises(InvalidCursorStateError):
        it.set("z")
    assert it.next() == "c"
    it.previous()
    assert it.previous() == "b"


def test_add_grows_full_buffer():
    lst = ArrayList([1, 2], capacity=2)
    it = lst.list_iterator(2)
    it.add(3)
    it.add(4)
    assert lst.to_array() == [1, 2, 3, 4]
    assert lst.capacity == 4


def test_add_on_empty_list():
    lst = ArrayList(capacity=0)
    it = lst.iterator()
    it.add("only")
    assert lst.to_array() == ["only"]
    assert it.previous() == "only"


def test_remove_every_odd_while_walking():
    lst = ArrayList(range(10))
    it = lst.iterator()
    while it.has_next():
        if it.next() % 2:
            it.remove()
    assert lst.to_array() == [0, 2, 4, 6, 8]


def test_cursor_is_a_python_iterator():
    lst = ArrayList("abc")
    it = iter(lst)
    assert isinstance(it, ListCursor)
    assert iter(it) is it
    assert list(it) == ["a", "b", "c"]
    assert [x for x in lst] == ["a", "b", "c"]


def test_out_of_band_change_is_detected():
    lst = ArrayList([1, 2, 3])
    it = lst.iterator()
    it.next()
    lst.add(4)
    with pytest.raises(ConcurrentModificationError):
        it.next()
    with pytest.raises(ConcurrentModificationError):
        it.remove()


def test_set_through_list_does_not_invalidate_cursor():
    lst = ArrayList([1, 2])
    it = lst.iterator()
    lst.set(0, 7)
    assert it.next() == 7


def test_edits_from_another_cursor_invalidate_this_one():
    lst = ArrayList([1, 2, 3])
    first = lst.iterator()
    second = lst.iterator()
    second.next()
    second.remove()
    with pytest.raises(ConcurrentModificationError):
        first.next()
