import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def test_creating_empty_list():
    assert DoublyLinkedList().is_empty()


@pytest.mark.parametrize("method", ["push_front", "push_back"])
def test_inserting_makes_non_empty(method):
    lst = DoublyLinkedList()
    getattr(lst, method)(1)
    assert not lst.is_empty()


@pytest.mark.parametrize("method", ["push_front", "push_back"])
def test_pushing_into_empty_list(method):
    lst = DoublyLinkedList()
    getattr(lst, method)(1)
    assert lst.peek_front() == 1
    assert lst.peek_back() == 1


def test_pushing_front_into_non_empty_list():
    lst = DoublyLinkedList([1])
    lst.push_front(2)
    assert lst.peek_front() == 2
    assert lst.peek_back() == 1


def test_pushing_back_into_non_empty_list():
    lst = DoublyLinkedList([1])
    lst.push_back(2)
    assert lst.peek_front() == 1
    assert lst.peek_back() == 2


def test_popping_from_empty_list():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.pop_back()
    with pytest.raises(IndexError):
        lst.pop_front()


def test_popping_front():
    lst = DoublyLinkedList([1, 2])
    lst.pop_front()
    assert lst.peek_front() == 2
    assert lst.peek_back() == 2


def test_popping_back():
    lst = DoublyLinkedList([1, 2])
    lst.pop_back()
    assert lst.peek_front() == 1
    assert lst.peek_back() == 1


def test_getting_from_empty_list():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.peek_front()
    with pytest.raises(IndexError):
        lst.peek_back()


def test_getting_from_non_empty_list():
    lst = DoublyLinkedList([1, 2])
    assert lst.peek_front() == 1
    assert lst.peek_back() == 2


def test_copy_size_and_elements_match():
    lst = DoublyLinkedList([1, 2, 3, 4, 5])
    clone = lst.copy()
    assert len(lst) == len(clone)
    while not lst.is_empty():
        assert lst.peek_front() == clone.peek_front()
        assert lst.peek_back() == clone.peek_back()
        lst.pop_front()
        clone.pop_front()
    assert clone.is_empty()


def test_removing_from_copy_does_not_affect_original():
    lst = DoublyLinkedList([1, 2, 3, 4, 5])
    clone = lst.copy()
    clone.pop_back()
    assert len(lst) == len(clone) + 1


def test_pop_returns_removed_values_in_order():
    values = [1, 2, 3, 4, 5]
    lst = DoublyLinkedList(values)
    assert [lst.pop_front() for _ in values] == values
    assert lst.is_empty()


def test_pop_back_to_empty_then_push_front():
    lst = DoublyLinkedList([1])
    lst.pop_back()
    assert lst.is_empty()
    lst.push_front(2)
    assert list(lst) == [2]
    assert list(reversed(lst)) == [2]


def test_forward_and_backward_iteration_agree():
    values = [5, 3, 8, 1]
    lst = DoublyLinkedList(values)
    assert list(lst) == values
    assert list(reversed(lst)) == values[::-1]


def test_str_lists_elements_each_followed_by_space():
    lst = DoublyLinkedList([1, 2, 3])
    assert str(lst) == "1 2 3 "
    assert str(DoublyLinkedList()) == ""