import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stack import (
    ArrayStack,
    LinkedStack,
    ListStack,
    StackOverflow,
    StackUnderflow,
    drain,
)


def test_source_example():
    for s in (ArrayStack(100), ListStack(), LinkedStack()):
        s.push(5)
        s.push(10)
        s.push(20)
        assert s.pop() == 20
        assert len(s) == 2
        assert s.peek() == 10
        assert s.is_empty() is False


def test_new_stack_is_empty():
    for s in (ArrayStack(100), ListStack(), LinkedStack()):
        assert s.is_empty() is True
        assert len(s) == 0


def test_pop_empty_raises():
    with pytest.raises(StackUnderflow):
        ArrayStack(100).pop()
    with pytest.raises(StackUnderflow):
        ListStack().pop()
    with pytest.raises(StackUnderflow):
        LinkedStack().pop()


def test_peek_empty_raises():
    with pytest.raises(StackUnderflow):
        ArrayStack(100).peek()
    with pytest.raises(StackUnderflow):
        ListStack().peek()
    with pytest.raises(StackUnderflow):
        LinkedStack().peek()


@given(values=st.lists(st.integers(), max_size=50))
def test_drain_is_reverse_of_pushes(values):
    for s in (ArrayStack(100), ListStack(), LinkedStack()):
        for v in values:
            s.push(v)
        assert len(s) == len(values)
        assert list(drain(s)) == values[::-1]
        assert s.is_empty() is True


@given(values=st.lists(st.integers(), min_size=1, max_size=50))
def test_peek_does_not_remove(values):
    for s in (ArrayStack(100), ListStack(), LinkedStack()):
        for v in values:
            s.push(v)
        assert s.peek() == values[-1]
        assert len(s) == len(values)


def test_source_traversal_order():
    s = ListStack()
    for v in (10, 20, 30):
        s.push(v)
    assert list(drain(s)) == [30, 20, 10]


def test_array_stack_overflow():
    s = ArrayStack(2)
    s.push(1)
    s.push(2)
    with pytest.raises(StackOverflow):
        s.push(3)
    assert len(s) == 2
    assert s.peek() == 2


def test_array_stack_zero_capacity():
    with pytest.raises(StackOverflow):
        ArrayStack(0).push(1)


def test_array_stack_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_underflow_is_index_error():
    with pytest.raises(IndexError):
        LinkedStack().pop()