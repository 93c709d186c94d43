import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.parentheses import (
    generate_parentheses,
    is_valid,
    min_add_to_make_valid,
)

paren_text = st.text(alphabet="()", max_size=30)


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "", "([{}])"])
def test_valid_sequences(text):
    assert is_valid(text) is True


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "((", "]"])
def test_invalid_sequences(text):
    assert is_valid(text) is False


@given(st.integers(0, 7))
def test_generated_are_valid_and_distinct(n):
    result = generate_parentheses(n)
    assert all(is_valid(s) for s in result)
    assert all(len(s) == 2 * n for s in result)
    assert len(set(result)) == len(result)


@given(st.integers(0, 7))
def test_generated_in_sorted_order(n):
    result = generate_parentheses(n)
    assert result == sorted(result)


def test_generate_small_values():
    assert generate_parentheses(0) == [""]
    assert generate_parentheses(1) == ["()"]
    assert len(generate_parentheses(3)) == 5


def test_generate_negative_is_empty():
    assert generate_parentheses(-1) == []


def test_min_add_example():
    assert min_add_to_make_valid("())") == 1


@given(st.integers(0, 6), st.integers(0, 10))
def test_min_add_counts_trailing_opens(n, extra):
    for balanced in generate_parentheses(n)[:5]:
        assert min_add_to_make_valid(balanced + "(" * extra) == extra
        assert min_add_to_make_valid(")" * extra + balanced) == extra


@given(paren_text)
def test_min_add_zero_iff_valid(text):
    assert (min_add_to_make_valid(text) == 0) == is_valid(text)


@given(paren_text)
def test_min_add_parity(text):
    assert (len(text) + min_add_to_make_valid(text)) % 2 == 0