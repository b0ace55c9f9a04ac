import math

import pytest

from algokit.linked import Deque, LinkedList, Underflow, factorial_digits


def test_deque_push_back_keeps_order():
    dq = Deque()
    for value in [3, 1, 4, 1, 5]:
        dq.push_back(value)
    assert list(dq) == [3, 1, 4, 1, 5]
    assert len(dq) == 5


def test_deque_push_front_reverses_order():
    dq = Deque()
    for value in [3, 1, 4]:
        dq.push_front(value)
    assert list(dq) == [4, 1, 3]


def test_deque_pops_from_both_ends():
    dq = Deque([10, 20, 30, 40])
    assert dq.pop_front() == 10
    assert dq.pop_back() == 40
    assert list(dq) == [20, 30]
    assert len(dq) == 2


def test_deque_single_item_pop_back_empties():
    dq = Deque()
    dq.push_front(7)
    assert dq.pop_back() == 7
    assert dq.is_empty()
    dq.push_back(8)
    assert list(dq) == [8]


def test_deque_underflow():
    dq = Deque()
    with pytest.raises(Underflow):
        dq.pop_front()
    with pytest.raises(Underflow):
        dq.pop_back()


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        Deque().pop_front()


def test_deque_drain_matches_input():
    values = list(range(20))
    dq = Deque(values)
    drained = [dq.pop_front() for _ in range(len(values))]
    assert drained == values
    assert dq.is_empty()


def test_linked_list_source_sequence():
    lst = LinkedList([7, 11, 41, 66])
    for value in (10, 30, 70):
        lst.insert_start(value)
    for value in (1, 2, 3, 4):
        lst.insert_last(value)
    assert list(lst) == [70, 30, 10, 7, 11, 41, 66, 1, 2, 3, 4]
    assert len(lst) == 11


def test_insert_after_position():
    lst = LinkedList([7, 11, 41])
    lst.insert_after(2, 99)
    assert list(lst) == [7, 11, 99, 41]
    lst.insert_after(4, 5)
    assert list(lst) == [7, 11, 99, 41, 5]


@pytest.mark.parametrize("position", [0, 4, -1])
def test_insert_after_invalid_position(position):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert_after(position, 9)
    assert list(lst) == [1, 2, 3]


def test_delete_start_and_end():
    lst = LinkedList([7, 11, 41, 66])
    assert lst.delete_start() == 7
    assert lst.delete_end() == 66
    assert list(lst) == [11, 41]


def test_delete_end_single_element():
    lst = LinkedList([5])
    assert lst.delete_end() == 5
    assert len(lst) == 0
    with pytest.raises(Underflow):
        lst.delete_end()


def test_delete_start_empty():
    with pytest.raises(Underflow):
        LinkedList().delete_start()


def test_delete_position():
    lst = LinkedList([7, 11, 41, 66])
    assert lst.delete_position(3) == 41
    assert lst.delete_position(1) == 7
    assert list(lst) == [11, 66]
    with pytest.raises(IndexError):
        lst.delete_position(3)


@pytest.mark.parametrize("n", [1, 2, 5, 10, 25, 100])
def test_factorial_digits_matches_math(n):
    assert factorial_digits(n) == str(math.factorial(n))


@pytest.mark.parametrize("n", [0, -3])
def test_factorial_digits_rejects_non_positive(n):
    with pytest.raises(ValueError):
        factorial_digits(n)