"""
Kernel Component: Comparison & Search

Equality, lexicographic ordering and substring search over byte sequences.
All functions take bytes-like views of the used region only.
"""

from typing import List


def equals(a, b) -> bool:
    """True iff both sequences have the same length and every byte matches."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def compare(a, b) -> int:
    """
    Lexicographic byte ordering.

    Returns:
        int: -1 if a sorts first, 1 if b sorts first, 0 if equal.
        A strict prefix sorts before the longer sequence.
    """
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


def _skip_table(pattern) -> List[int]:
    """Horspool bad-character shifts; bytes absent from pattern shift by m."""
    m = len(pattern)
    table = [m] * 0x100
    for i in range(m - 1):
        table[pattern[i]] = m - 1 - i
    return table


def index_of(haystack, pattern, offset: int = 0) -> int:
    """
    Lowest position >= offset where `pattern` occurs contiguously.

    Args:
        haystack: Bytes-like content to scan.
        pattern: Bytes-like needle (None is never found).
        offset: First candidate position.

    Returns:
        int: Match position, or -1 when not found. An empty pattern matches
        at `offset` whenever offset <= len(haystack).
    """
    n = len(haystack)
    if pattern is None or offset < 0 or offset > n:
        return -1

    m = len(pattern)
    if m == 0:
        return offset
    if m > n - offset:
        return -1

    table = _skip_table(pattern)
    last = m - 1
    pos = offset
    while pos <= n - m:
        j = last
        while j >= 0 and haystack[pos + j] == pattern[j]:
            j -= 1
        if j < 0:
            return pos
        pos += table[haystack[pos + last]]
    return -1
