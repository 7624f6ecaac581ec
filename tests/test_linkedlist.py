import pytest

from solongmaze.linkedlist import LinkedList


def test_initial_items_and_length():
    items = LinkedList(["a", "b", "c"])
    assert len(items) == 3
    assert list(items) == ["a", "b", "c"]


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None


def test_push_front_and_back_order():
    items = LinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert items.last() == 3


def test_pop_front_calls_delete():
    deleted = []
    items = LinkedList(["x", "y"])
    removed = items.pop_front(deleted.append)
    assert removed == "x"
    assert deleted == ["x"]
    assert list(items) == ["y"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_for_each_visits_in_order():
    seen = []
    LinkedList([1, 2, 3]).for_each(seen.append)
    assert seen == [1, 2, 3]


def test_clear_deletes_from_tail():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [3, 2, 1]
    assert len(items) == 0


def test_mapped_builds_new_list_and_keeps_original():
    items = LinkedList(["a", "b"])
    upper = items.mapped(str.upper)
    assert list(upper) == ["A", "B"]
    assert list(items) == ["a", "b"]


def test_mapped_failure_clears_original():
    deleted = []
    items = LinkedList([1, 0, 2])

    def invert(value):
        return 1 / value

    with pytest.raises(ZeroDivisionError):
        items.mapped(invert, deleted.append)
    assert len(items) == 0
    assert sorted(deleted) == [0, 1, 2]


def test_length_matches_iteration():
    items = LinkedList(range(10))
    items.push_front(-1)
    assert len(items) == len(list(items))