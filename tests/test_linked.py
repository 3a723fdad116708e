import pytest

from fdfview.linked import LinkedList, Node


def test_init_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_push_front_prepends():
    items = LinkedList([2, 3])
    node = items.push_front(1)
    assert list(items) == [1, 2, 3]
    assert items.head is node


def test_push_back_appends():
    items = LinkedList()
    items.push_back("x")
    items.push_back("y")
    assert list(items) == ["x", "y"]
    assert items.last().content == "y"


def test_last_node_has_no_successor():
    items = LinkedList([10, 20, 30])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == 30
    assert tail.next is None


def test_pop_front_calls_delete():
    deleted = []
    items = LinkedList(["one", "two"])
    value = items.pop_front(deleted.append)
    assert value == "one"
    assert deleted == ["one"]
    assert list(items) == ["two"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_iterate_visits_all():
    seen = []
    LinkedList(["p", "q"]).iterate(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [101, 102]


def test_length_matches_iteration():
    items = LinkedList(range(7))
    items.push_front(-1)
    items.push_back(99)
    assert len(items) == len(list(items))