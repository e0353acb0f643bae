import pytest

from cstrkit.linked_list import LinkedList, Node


def test_build_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_add_front():
    lst = LinkedList([2, 3])
    node = Node(1)
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_add_front_to_empty():
    lst = LinkedList()
    node = Node("x")
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == ["x"]


def test_add_back():
    lst = LinkedList([1])
    node = Node(2)
    lst.add_back(node)
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_add_back_to_empty():
    lst = LinkedList()
    node = Node("only")
    lst.add_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_last_returns_final_node():
    lst = LinkedList(["first", "middle", "end"])
    assert lst.last().content == "end"
    assert lst.last().next is None


def test_iterate_visits_every_content_in_order():
    lst = LinkedList([3, 1, 2])
    seen = []
    lst.iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    lst = LinkedList(["a", "bb"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "BB"]
    assert list(lst) == ["a", "bb"]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(value):
        if value == "stop":
            raise RuntimeError("boom")
        return value * 2

    lst = LinkedList(["a", "b", "stop", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["aa", "bb"]


def test_clear_passes_contents_to_delete():
    deleted = []
    lst = LinkedList(["x", "y", "z"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete_empties_list():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []