"""String utilities: word handling, isomorphism, character counts and palindromes."""

from __future__ import annotations

from collections import Counter
from typing import Optional


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every word and lower-case everything else.

    A word starts after whitespace; characters before the first letter of a
    word are lower-cased and do not end the search for that letter.
    """
    result = []
    capitalize = True
    for ch in text:
        if ch.isspace():
            capitalize = True
            result.append(ch)
        elif capitalize and ch.isalpha():
            result.append(ch.upper())
            capitalize = False
        else:
            result.append(ch.lower())
    return "".join(result)


def count_words(text: str) -> int:
    """Number of whitespace separated words in ``text``."""
    return len(text.split())


def is_isomorphic(first: str, second: str) -> bool:
    """Tell whether the characters of ``first`` map one-to-one onto those of ``second``."""
    if len(first) != len(second):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(first, second):
        if forward.setdefault(a, b) != b:
            return False
        if backward.setdefault(b, a) != a:
            return False
    return True


def longest_word(sentence: str) -> str:
    """The first of the longest whitespace separated words; empty for no words."""
    return max(sentence.split(), key=len, default="")


def longest_word_by_spaces(sentence: str) -> str:
    """The first of the longest pieces between single space characters."""
    return max(sentence.split(" "), key=len)


def max_occurring_char(text: str) -> Optional[str]:
    """The most frequent character, the earliest seen winning ties; ``None`` if empty."""
    counts = Counter(text)
    best: Optional[str] = None
    best_count = 0
    for ch, count in counts.items():
        if count > best_count:
            best, best_count = ch, count
    return best


def _expand(text: str, low: int, high: int) -> str:
    while low >= 0 and high < len(text) and text[low] == text[high]:
        low -= 1
        high += 1
    return text[low + 1:high]


def longest_palindrome(text: str) -> str:
    """The first longest palindromic substring found by expanding around centres."""
    if len(text) <= 1:
        return text
    best = ""
    for centre in range(1, len(text)):
        for candidate in (
            _expand(text, centre - 1, centre),
            _expand(text, centre - 1, centre + 1),
        ):
            if len(candidate) > len(best):
                best = candidate
    return best


def distinct_palindromic_substrings(text: str) -> list[str]:
    """All distinct non-empty palindromic substrings, sorted."""
    found: set[str] = set()
    for centre in range(len(text)):
        for low, high in ((centre, centre), (centre, centre + 1)):
            while low >= 0 and high < len(text) and text[low] == text[high]:
                found.add(text[low:high + 1])
                low -= 1
                high += 1
    return sorted(found)