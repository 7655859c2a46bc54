import pytest

from pushswap.linkedlist import LinkedList, Node


def test_construct_from_items_keeps_order():
    items = [3, 1, 2]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert isinstance(node, Node) and node.content == "a"
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_push_back_appends_and_updates_last():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert list(lst) == [1, 2]
    assert len(lst) == 2


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert lst.head is node


def test_prev_links_mirror_next_links():
    lst = LinkedList(range(5))
    backwards = []
    node = lst.last()
    while node is not None:
        backwards.append(node.content)
        node = node.prev
    assert backwards == list(reversed(list(lst)))


def test_clear_calls_delete_in_order_and_empties():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None and lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    lst = LinkedList([4, 5, 6])
    seen = []
    lst.for_each(seen.append)
    assert seen == [4, 5, 6]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped.head is not lst.head


def test_map_failure_deletes_produced_and_raises():
    lst = LinkedList([1, 2, 0, 3])
    deleted = []

    def invert(x):
        return 10 // x

    with pytest.raises(ZeroDivisionError):
        lst.map(invert, deleted.append)
    assert deleted == [10 // 1, 10 // 2]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0