"""
Substring filtering over a sequence of strings.

Pure logic, no I/O. Matching is case-sensitive and code-point exact.
Results are new lists: strings are immutable, so nothing the caller later
does to the haystack can change what was returned.
"""

from collections.abc import Iterable


def filter_containing(haystack: Iterable[str], needle: str) -> list[str]:
    """
    Return every string in haystack that contains needle, in original order.

    An empty needle matches every element.
    """
    return [hay for hay in haystack if needle in hay]


def indices_containing(haystack: Iterable[str], needle: str) -> list[int]:
    """Positions in haystack of the strings filter_containing() would return."""
    return [i for i, hay in enumerate(haystack) if needle in hay]
