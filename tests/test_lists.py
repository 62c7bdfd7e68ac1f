import pytest

from pushswap.lists import LinkedList, ListNode, TaggedList, TaggedNode


def test_add_back_keeps_order():
    lst = LinkedList()
    for item in ["Element 1", "Element 2", "Element 3"]:
        lst.add_back(item)
    assert list(lst) == ["Element 1", "Element 2", "Element 3"]
    assert len(lst) == 3


def test_add_front_reverses_insertion():
    lst = LinkedList()
    for item in ["Element 3", "Element 2", "Element 1"]:
        lst.add_front(item)
    assert list(lst) == ["Element 1", "Element 2", "Element 3"]


def test_init_from_items():
    lst = LinkedList(["Hola", "Mundo", "123"])
    assert list(lst) == ["Hola", "Mundo", "123"]
    assert len(lst) == 3


def test_last_node():
    lst = LinkedList(["a", "b", "c"])
    node = lst.last()
    assert isinstance(node, ListNode)
    assert node.content == "c"
    assert node.next is None


def test_last_of_empty_is_none():
    assert LinkedList().last() is None


def test_last_after_add_front_on_empty():
    lst = LinkedList()
    lst.add_front("x")
    assert lst.last().content == "x"
    lst.add_back("y")
    assert lst.last().content == "y"


def test_empty_size():
    assert len(LinkedList()) == 0
    assert list(LinkedList()) == []


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0


def test_apply_visits_every_content():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.apply(seen.append)
    assert seen == [1, 2, 3]
    assert list(lst) == [1, 2, 3]


def test_map_builds_new_list():
    lst = LinkedList(["Hola", "Mundo", "123"])
    mapped = lst.map(str.upper, None)
    assert list(mapped) == ["HOLA", "MUNDO", "123"]
    assert list(lst) == ["Hola", "Mundo", "123"]
    assert mapped is not lst


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper, None)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_map_requires_func():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None, None)


def test_tagged_append_links_both_ways():
    tl = TaggedList()
    first = tl.append(1, "one")
    second = tl.append(2, "two")
    assert first.next is second
    assert second.prev is first
    assert first.prev is None
    assert tl.last() is second
    assert len(tl) == 2


def test_tagged_iteration():
    tl = TaggedList()
    tl.append(7, "seven")
    tl.append(8, None)
    items = [(n.ident, n.text) for n in tl]
    assert items == [(7, "seven"), (8, None)]
    assert all(isinstance(n, TaggedNode) for n in tl)


def test_tagged_empty_and_clear():
    tl = TaggedList()
    assert tl.last() is None
    node = tl.append(1, "a")
    tl.append(2, "b")
    tl.clear()
    assert len(tl) == 0
    assert list(tl) == []
    assert tl.last() is None
    assert node.next is None