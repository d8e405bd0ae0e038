from dataclasses import dataclass

import pytest

from academia.linked_list import CircularList


@dataclass
class Box:
    value: int


def increment(box: Box) -> None:
    box.value += 1


def test_create_list_is_empty():
    lst = CircularList()
    assert lst.is_empty()
    assert len(lst) == 0


def test_init_from_items():
    lst = CircularList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert not lst.is_empty()


def test_prepend_and_append():
    lst = CircularList()
    lst.prepend(1)
    lst.append(2)
    lst.prepend(3)
    assert len(lst) == 3
    assert lst.first() == 3
    assert list(lst)[1] == 1
    assert lst.last() == 2


def test_remove_first_and_last():
    lst = CircularList()
    for value in (1, 2, 3):
        lst.append(value)
    lst.remove_first()
    assert len(lst) == 2
    assert lst.first() == 2
    lst.remove_last()
    assert len(lst) == 1
    assert lst.first() == 2
    lst.remove_first()
    assert lst.is_empty()


def test_remove_on_empty_is_noop():
    lst = CircularList()
    lst.remove_first()
    lst.remove_last()
    assert len(lst) == 0


def test_first_last_on_empty_raise():
    lst = CircularList()
    with pytest.raises(IndexError):
        lst.first()
    with pytest.raises(IndexError):
        lst.last()


def test_remove_data():
    lst = CircularList([10, 20, 30])
    assert lst.remove(20) is True
    assert len(lst) == 2
    assert lst.remove(20) is False
    assert list(lst) == [10, 30]


def test_remove_head_and_tail_keeps_order():
    lst = CircularList([1, 2, 3, 4])
    assert lst.remove(1)
    assert lst.remove(4)
    assert lst.first() == 2
    assert lst.last() == 3


def test_remove_with_custom_eq():
    lst = CircularList([Box(1), Box(2)])
    assert lst.remove(2, lambda item, key: item.value == key)
    assert [b.value for b in lst] == [1]


def test_find():
    lst = CircularList([5, 10, 15])
    result = lst.find(10)
    assert result == (1, 10)


def test_find_missing_returns_none():
    assert CircularList([5, 10]).find(99) is None
    assert CircularList().find(1) is None


def test_clear():
    lst = CircularList()
    for i in range(5):
        lst.append(i)
    assert len(lst) == 5
    lst.clear()
    assert lst.is_empty()


def test_for_each():
    lst = CircularList(Box(i) for i in range(3))
    lst.for_each(increment)
    assert [b.value for b in lst] == [1, 2, 3]


def test_to_string():
    lst = CircularList([7, 8])
    assert lst.to_string(str) == "List: -> 7 <-> 8 <-\n"


def test_to_string_single_and_empty():
    assert CircularList([7]).to_string() == "List: -> 7 <-\n"
    assert CircularList().to_string() == "List: (empty)\n"


def test_print(capsys):
    CircularList([7, 8]).print(str)
    assert capsys.readouterr().out == "List: -> 7 <-> 8 <-\n"