from hypothesis import given
from hypothesis import strategies as st

from dsakit import doubly

values_st = st.lists(st.integers(-50, 50), max_size=30)


def _values(head):
    return list(doubly.iter_values(head))


def _backward(head):
    """Values read from the tail back to the head through prev links."""
    if head is None:
        return []
    tail = head
    while tail.next is not None:
        tail = tail.next
    out = []
    while tail is not None:
        out.append(tail.data)
        tail = tail.prev
    return out


def _check(head, expected):
    assert _values(head) == expected
    assert _backward(head) == expected[::-1]
    if head is not None:
        assert head.prev is None


@given(values_st)
def test_round_trip_with_links(values):
    _check(doubly.from_iterable(values), values)


def test_empty_list():
    assert doubly.from_iterable([]) is None
    assert _values(None) == []


def test_source_insert_at_begin_example():
    head = doubly.insert_at_begin(doubly.from_iterable([10, 20, 30]), 5)
    _check(head, [5, 10, 20, 30])


@given(values_st, st.integers())
def test_insert_at_begin(values, x):
    _check(doubly.insert_at_begin(doubly.from_iterable(values), x), [x] + values)


def test_source_insert_at_end_example():
    head = doubly.insert_at_end(doubly.from_iterable([10, 20, 30]), 5)
    _check(head, [10, 20, 30, 5])


@given(values_st, st.integers())
def test_insert_at_end(values, x):
    _check(doubly.insert_at_end(doubly.from_iterable(values), x), values + [x])


def test_source_reverse_example():
    _check(doubly.reverse(doubly.from_iterable([10, 20, 30])), [30, 20, 10])


@given(values_st)
def test_reverse(values):
    _check(doubly.reverse(doubly.from_iterable(values)), values[::-1])


@given(values_st)
def test_reverse_twice_restores(values):
    head = doubly.reverse(doubly.reverse(doubly.from_iterable(values)))
    _check(head, values)


@given(values_st)
def test_delete_head(values):
    _check(doubly.delete_head(doubly.from_iterable(values)), values[1:])


@given(values_st)
def test_delete_tail(values):
    _check(doubly.delete_tail(doubly.from_iterable(values)), values[:-1])


def test_delete_single_node():
    assert doubly.delete_head(doubly.from_iterable([10])) is None
    assert doubly.delete_tail(doubly.from_iterable([10])) is None