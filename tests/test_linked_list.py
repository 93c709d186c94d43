import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.linked_list import (
    ListNode,
    build_list,
    is_palindrome_list,
    middle_node,
    remove_nth_from_end,
    reverse_list,
    rotate_right,
    to_list,
)

values_lists = st.lists(st.integers(-100, 100), max_size=30)
non_empty_lists = st.lists(st.integers(-100, 100), min_size=1, max_size=30)


@given(values_lists)
def test_build_and_to_list_round_trip(values):
    assert to_list(build_list(values)) == values


def test_build_empty_gives_none():
    assert build_list([]) is None
    assert to_list(None) == []


@given(non_empty_lists)
def test_node_iteration_yields_values(values):
    head = build_list(values)
    assert list(head) == values


def test_listnode_defaults():
    node = ListNode()
    assert node.val == 0
    assert node.next is None


@given(st.data(), non_empty_lists)
def test_remove_nth_from_end(data, values):
    n = data.draw(st.integers(1, len(values)))
    cut = len(values) - n
    result = remove_nth_from_end(build_list(values), n)
    assert to_list(result) == values[:cut] + values[cut + 1:]


def test_remove_only_node_gives_empty_list():
    assert remove_nth_from_end(build_list([7]), 1) is None


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_out_of_range_raises(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3]), n)


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)


@given(values_lists, st.integers(0, 100))
def test_rotate_right(values, k):
    result = to_list(rotate_right(build_list(values), k))
    if values:
        shift = k % len(values)
        expected = values[len(values) - shift:] + values[: len(values) - shift]
    else:
        expected = []
    assert result == expected


@given(non_empty_lists)
def test_rotate_by_length_is_identity(values):
    assert to_list(rotate_right(build_list(values), len(values))) == values


def test_rotate_negative_raises():
    with pytest.raises(ValueError):
        rotate_right(build_list([1, 2, 3]), -1)


@given(values_lists)
def test_reverse_list(values):
    assert to_list(reverse_list(build_list(values))) == values[::-1]


@given(values_lists)
def test_reverse_twice_is_identity(values):
    assert to_list(reverse_list(reverse_list(build_list(values)))) == values


@given(non_empty_lists, st.booleans())
def test_constructed_palindromes(values, odd):
    mirrored = values + values[-2::-1] if odd else values + values[::-1]
    assert is_palindrome_list(build_list(mirrored)) is True


def test_non_palindrome():
    assert is_palindrome_list(build_list([1, 2])) is False
    assert is_palindrome_list(build_list([1, 2, 3, 1])) is False


def test_single_node_is_palindrome():
    assert is_palindrome_list(build_list([5])) is True


@given(non_empty_lists)
def test_middle_node(values):
    middle = middle_node(build_list(values))
    assert to_list(middle) == values[len(values) // 2:]


def test_middle_of_empty_is_none():
    assert middle_node(None) is None