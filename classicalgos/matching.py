"""Exact string matching: naive scan and Knuth-Morris-Pratt."""

from __future__ import annotations

__all__ = ["naive_search", "prefix_function", "kmp_search"]


def naive_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, overlaps included."""
    width = len(pattern)
    return [
        start
        for start in range(len(text) - width + 1)
        if text[start : start + width] == pattern
    ]


def prefix_function(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix length for each prefix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text`` using KMP."""
    if not pattern:
        raise ValueError("pattern must not be empty")

    lps = prefix_function(pattern)
    m = len(pattern)
    matches: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j and char != pattern[j]:
            j = lps[j - 1]
        if char == pattern[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            j = lps[j - 1]
    return matches