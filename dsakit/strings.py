"""String checks: character counts, palindromes, subsequences and anagrams."""

from __future__ import annotations

from collections import Counter


def char_frequency(text: str) -> dict[str, int]:
    """Count of each character in ``text``, ordered by character."""
    return dict(sorted(Counter(text).items()))


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def is_subsequence(text: str, sub: str) -> bool:
    """True when ``sub`` can be obtained from ``text`` by deleting characters."""
    remaining = iter(text)
    return all(ch in remaining for ch in sub)


def is_anagram(a: str, b: str) -> bool:
    """True when ``a`` and ``b`` hold the same characters with the same counts."""
    return len(a) == len(b) and Counter(a) == Counter(b)