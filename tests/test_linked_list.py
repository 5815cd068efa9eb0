import pytest

from dsakit.linked_list import LinkedList


def test_creating_empty_list():
    assert LinkedList().empty()


@pytest.mark.parametrize("method", ["push_front", "push_back"])
def test_inserting_makes_non_empty(method):
    lst = LinkedList()
    getattr(lst, method)(1)
    assert not lst.empty()


def _pushed_list():
    lst = LinkedList([1])
    lst.push_front(0)
    lst.push_back(4)
    lst.push_at_pos(2, 2)
    lst.push_at_pos(3, 3)
    return lst


def test_pushing_elements():
    lst = _pushed_list()
    for i in range(5):
        assert lst.at(i) == i


def test_pushing_at_invalid_position():
    lst = _pushed_list()
    with pytest.raises(IndexError):
        lst.push_at_pos(-1, 0)
    with pytest.raises(IndexError):
        lst.push_at_pos(6, 0)


def test_popping_from_empty_list():
    with pytest.raises(IndexError):
        LinkedList().pop_at_pos(0)


def test_popping_at_invalid_position():
    with pytest.raises(IndexError):
        LinkedList().pop_at_pos(1)


def test_popping_at_valid_positions():
    lst = LinkedList()
    for i in range(100):
        lst.push_at_pos(i, i)
    for i in range(100):
        assert lst.pop_front() == i
    assert lst.empty()


def test_getting_at_invalid_position():
    with pytest.raises(IndexError):
        LinkedList().at(-1)


def test_getting_at_valid_positions():
    lst = LinkedList()
    for i in range(100):
        lst.push_at_pos(i, i)
    for i in range(100):
        assert lst.at(i) == i


def test_copy_size_and_elements_match():
    lst = LinkedList([1, 2, 3, 4, 5])
    clone = lst.copy()
    assert len(lst) == len(clone)
    for i in range(len(lst)):
        assert lst.at(i) == clone.at(i)


def test_removing_from_copy_does_not_affect_original():
    lst = LinkedList([1, 2, 3, 4, 5])
    clone = lst.copy()
    clone.pop_back()
    assert len(lst) == len(clone) + 1


def test_reversing_the_list():
    lst = LinkedList([0, 1, 2, 3, 4])
    lst.reverse()
    for i in range(5):
        assert lst.at(i) == 5 - 1 - i


def test_reverse_keeps_tail_consistent():
    lst = LinkedList([0, 1, 2])
    lst.reverse()
    lst.push_back(9)
    assert list(lst) == [2, 1, 0, 9]
    assert lst.back() == 9


def test_removing_repeating_elements():
    as_set = LinkedList([0, 1, 2, 3, 4])
    multiset = LinkedList([0, 0, 1, 2, 3, 4, 3, 1])
    multiset.to_set()
    assert len(as_set) == len(multiset)
    assert list(multiset) == list(as_set)
    assert multiset.back() == 4


def test_filtering_to_empty():
    lst = LinkedList([1])
    lst.filter(lambda x: x % 2 == 0)
    assert lst.empty()


def test_filtering_leaves_correct_elements():
    lst = LinkedList(range(10))
    evens = LinkedList([0, 2, 4, 6, 8])
    lst.filter(lambda x: x % 2 == 0)
    assert len(lst) == len(evens)
    for i in range(len(evens)):
        assert evens.at(i) == lst.at(i)


def test_filter_then_push_back_uses_tail():
    lst = LinkedList(range(10))
    lst.filter(lambda x: x < 3)
    lst.push_back(42)
    assert list(lst) == [0, 1, 2, 42]


def test_mapping_a_function():
    lst = LinkedList([1, 2, 3, 4, 5])
    less = LinkedList([0, 1, 2, 3, 4])
    lst.map(lambda x: x - 1)
    for i in range(len(lst)):
        assert less.at(i) == lst.at(i)


def test_pop_only_element_then_push():
    lst = LinkedList([7])
    assert lst.pop_back() == 7
    lst.push_back(8)
    assert lst.front() == 8
    assert lst.back() == 8


def test_front_and_back_of_empty_raise():
    with pytest.raises(IndexError):
        LinkedList().front()
    with pytest.raises(IndexError):
        LinkedList().back()


def test_iteration_round_trip():
    values = [3, 1, 4, 1, 5]
    assert list(LinkedList(values)) == values