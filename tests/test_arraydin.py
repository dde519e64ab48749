import pytest

from konsolgame.arraydin import DynamicArray


def make(*items):
    array = DynamicArray()
    for item in items:
        array.insert_last(item)
    return array


def test_new_array_is_empty():
    array = DynamicArray()
    assert array.is_empty() is True
    assert len(array) == 0
    assert str(array) == "[]"


def test_driver_scenario():
    array = DynamicArray()
    array.insert_last("tes")
    assert len(array) == 1
    assert array.is_empty() is False
    assert str(array) == "[tes]"
    assert array.search("tes") == 0


def test_str_separator():
    assert str(make("a", "b", "c")) == "[a, b, c]"


def test_insert_positions():
    array = make("b")
    array.insert_first("a")
    array.insert_last("d")
    array.insert_at("c", 2)
    assert [array[i] for i in range(len(array))] == ["a", "b", "c", "d"]


def test_insert_out_of_range():
    array = make("a")
    with pytest.raises(IndexError):
        array.insert_at("x", 5)
    with pytest.raises(IndexError):
        array.insert_at("x", -1)


def test_grows_past_initial_size():
    array = DynamicArray()
    names = [f"item{n}" for n in range(25)]
    for name in names:
        array.insert_last(name)
    assert len(array) == len(names)
    assert array[len(names) - 1] == names[-1]


def test_delete_operations():
    array = make("a", "b", "c", "d")
    assert array.delete_first() == "a"
    assert array.delete_last() == "d"
    assert array.delete_at(1) == "c"
    assert str(array) == "[b]"
    array.delete_last()
    assert array.is_empty() is True


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().delete_last()
    with pytest.raises(IndexError):
        make("a").delete_at(3)


def test_reverse_twice_restores():
    array = make("a", "b", "c")
    array.reverse()
    assert str(array) == "[c, b, a]"
    array.reverse()
    assert str(array) == "[a, b, c]"


def test_copy_is_independent():
    original = make("a", "b")
    duplicate = original.copy()
    assert str(duplicate) == str(original)
    duplicate.insert_last("c")
    assert len(original) == 2
    assert len(duplicate) == 3


def test_search_missing_and_first_match():
    array = make("x", "y", "x")
    assert array.search("x") == 0
    assert array.search("y") == 1
    assert array.search("z") == -1