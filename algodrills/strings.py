"""String puzzles: parentheses, palindromes, numerals and binary arithmetic."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise, zip_longest
from typing import MutableSequence

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def remove_outer_parentheses(s: str) -> str:
    """Drop the outermost pair of every primitive group in a balanced string."""
    depth = 0
    kept: list[str] = []
    for ch in s:
        if ch == "(":
            depth += 1
        if depth > 1:
            kept.append(ch)
        if ch == ")":
            depth -= 1
    return "".join(kept)


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits read the same both ways, ignoring case."""
    chars = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return chars == chars[::-1]


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals count as zero."""
    values = [_ROMAN_VALUES.get(ch, 0) for ch in s]
    total = 0
    for value, following in pairwise([*values, 0]):
        total += -value if value < following else value
    return total


def max_depth(s: str) -> int:
    """Deepest nesting of parentheses reached anywhere in the string."""
    depth = deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def largest_odd_number(s: str) -> str:
    """Longest prefix of a string of decimal digits that ends in an odd digit."""
    return s.rstrip("02468")


def largest_good_integer(num: str) -> str:
    """Largest run of three equal digits in ``num``, or an empty string."""
    best = max((a for a, b, c in zip(num, num[1:], num[2:]) if a == b == c), default="")
    return best * 3


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the same letters as ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    if not haystack:
        return -1
    return haystack.find(needle)


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def fizz_buzz(n: int) -> list[str]:
    """The Fizz Buzz sequence for 1 through ``n``."""
    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 5 == 0:
            return "Buzz"
        if i % 3 == 0:
            return "Fizz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def add_binary(a: str, b: str) -> str:
    """Sum of two binary strings, as long as the longer input at least."""
    carry = 0
    bits: list[str] = []
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + int(x) + int(y)
        bits.append(str(total % 2))
        carry = total // 2
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether ``goal`` is some rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s