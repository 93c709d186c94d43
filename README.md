# algonotes

A small collection of classic algorithms and data structures in plain Python,
with no runtime dependencies. It is a library only: there is no command-line
tool.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `algonotes.linked_list`

- `ListNode(val=0, next=None)`: a singly linked node; iterating over a node
  yields the values from it to the end of the list.
- `build_list(values)` builds a list (empty input gives `None`);
  `to_list(head)` turns one back into a Python list.
- `remove_nth_from_end(head, n)` unlinks the `n`-th node from the end and
  returns the new head; raises `ValueError` when `n` is out of range.
- `rotate_right(head, k)` rotates `k` places to the right; raises
  `ValueError` for negative `k`.
- `reverse_list(head)` reverses in place and returns the new head.
- `is_palindrome_list(head)` tells whether the values read the same both ways.
- `middle_node(head)` returns the middle node (the second middle for an even
  length).

### `algonotes.parentheses`

- `is_valid(text)`: are `()`, `{}` and `[]` properly nested and closed?
- `generate_parentheses(n)`: every well-formed string of `n` round-bracket
  pairs.
- `min_add_to_make_valid(text)`: how many brackets must be added to balance
  the text; any character other than `(` counts as a closing bracket.

### `algonotes.numbers`

- `reverse_integer(x)`: reverses the decimal digits, returning 0 when the
  result falls outside the signed 32-bit range.
- `is_palindrome_number(x)`: negatives are never palindromes.
- `climb_stairs(n)`: ways to climb `n` steps one or two at a time.
- `fib(n)`: the `n`-th Fibonacci number.
- `find_the_winner(n, k)`: the 1-based survivor of the Josephus circle;
  raises `ValueError` for `n < 1`.

### `algonotes.combinatorics`

- `permute(nums)`: every ordering, in swap-backtracking order.
- `permute_unique(nums)`: every distinct ordering of input with repeats.
- `subsets(nums)`: every subset, leaving each element out before taking it.

### `algonotes.containers`

- `QueueStack`: a LIFO stack built from queue operations, with `push`, `pop`,
  `top`, `is_empty` and `len()`.
- `StackQueue`: a FIFO queue built from two stacks, with `push`, `pop`,
  `peek`, `is_empty` and `len()`.

Taking from an empty container raises `IndexError`.

### `algonotes.strings`

- `length_of_longest_substring(text)`: longest run with no repeated character.
- `prefix_table(pattern)`: the KMP failure table.
- `first_occurrence(haystack, needle)`: KMP search; index of the first match
  or -1 (0 for an empty needle).
- `reverse_string(chars)`: reverses a mutable sequence in place.
- `longest_palindrome(text)`: length of the longest palindrome buildable from
  the characters.
- `add_strings(num1, num2)`: adds two decimal-digit strings, keeping leading
  zeros; raises `ValueError` on non-digits.
- `repeated_string_match(a, b)`: fewest copies of `a` containing `b`, or -1.
- `backspace_compare(first, second)`: equality after each `#` erases the
  character before it.
- `sort_vowels(text)`: sorts the vowels by code point, leaving everything
  else in place.

### `algonotes.arrays`

- `spiral_order(matrix)`: elements in clockwise spiral order.
- `largest_rectangle_area(heights)`: largest rectangle under a histogram.
- `maximal_rectangle(matrix)`: largest filled rectangle; cells equal to `"0"`
  or `0` are empty.
- `max_sliding_window(nums, k)`: maximum of each window of size `k`.
- `merge_sort(nums)`: a new, stably sorted list.
- `min_k_bit_flips(nums, k)`: fewest `k`-wide flips making every bit 1, or -1.
- `min_days(bloom_day, m, k)`: first day on which `m` bouquets of `k` adjacent
  flowers can be made, or -1.
- `time_required_to_buy(tickets, k)`: seconds until person `k` in the ticket
  line is done; raises `IndexError` for a bad `k` and `ValueError` for
  negative counts.

## Examples

```python
from algonotes.linked_list import build_list, reverse_list, to_list
from algonotes.parentheses import generate_parentheses
from algonotes.strings import first_occurrence, add_strings
from algonotes.arrays import max_sliding_window

to_list(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
generate_parentheses(2)                         # ['(())', '()()']
first_occurrence("sadbutsad", "sad")            # 0
add_strings("456", "77")                        # '533'
max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)  # [3, 3, 5, 5, 6, 7]
```

```python
from algonotes.containers import QueueStack, StackQueue

stack = QueueStack()
stack.push(1)
stack.push(2)
stack.pop()        # 2

queue = StackQueue()
queue.push(1)
queue.push(2)
queue.pop()        # 1
```