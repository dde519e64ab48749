import pytest

from konsolgame.stack import CAPACITY, Stack, StackFullError


def test_driver_scenario():
    stack = Stack()
    for value in ["a", "2", "3", "4"]:
        stack.push(value)
    assert stack.pop() == "4"
    assert len(stack) == 3
    assert stack.is_empty() is False


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0
    assert stack.is_full() is False


def test_lifo_order():
    stack = Stack()
    values = ["x", "y", "z"]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert stack.is_empty() is True


def test_top_does_not_remove():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    assert stack.top() == "b"
    assert len(stack) == 2


def test_empty_pop_and_top_raise():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_full_stack_rejects_push():
    stack = Stack()
    for n in range(CAPACITY):
        stack.push(str(n))
    assert stack.is_full() is True
    assert len(stack) == CAPACITY
    with pytest.raises(StackFullError):
        stack.push("extra")
    assert len(stack) == CAPACITY


def test_equality():
    first = Stack()
    second = Stack()
    assert first == second
    for value in ["a", "b"]:
        first.push(value)
        second.push(value)
    assert first == second
    second.push("c")
    assert not (first == second)
    second.pop()
    second.pop()
    second.push("z")
    assert not (first == second)


def test_equality_with_other_type():
    assert (Stack() == []) is False