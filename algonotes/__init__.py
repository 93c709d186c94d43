"""Classic algorithms and data structures: linked lists, brackets, numbers,
combinatorics, containers, strings and arrays."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "combinatorics",
    "containers",
    "linked_list",
    "numbers",
    "parentheses",
    "strings",
]