"""String problems: common divisors, merging, titles, windows and parsing."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import zip_longest

_COLOURS = {"R", "G", "B"}
_COMPLEX_PATTERN = re.compile(r"(-?)([0-9]+)\+(-?)([0-9]+)i")


def gcd_of_strings(str1: str, str2: str) -> str:
    """Longest string that divides both inputs, or an empty string if none does."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: math.gcd(len(str1), len(str2))]


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of both words; leftovers are appended."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def convert_to_title(column_number: int) -> str:
    """Spreadsheet column title for a 1-based column number (0 gives "")."""
    if column_number < 0:
        raise ValueError(f"column number must not be negative, got {column_number}")
    letters: list[str] = []
    while column_number:
        column_number, remainder = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def count_points(rings: str) -> int:
    """Number of rods (0-9) carrying rings of all three colours R, G and B.

    ``rings`` is a sequence of colour-rod pairs such as ``"B0R0G0"``.
    """
    if len(rings) % 2:
        raise ValueError("rings must consist of colour and rod pairs")
    colours_on_rod: dict[str, set[str]] = {}
    for colour, rod in zip(rings[::2], rings[1::2]):
        if rod not in "0123456789" or len(rod) != 1:
            raise ValueError(f"invalid rod {rod!r}")
        if colour in _COLOURS:
            colours_on_rod.setdefault(rod, set()).add(colour)
    return sum(1 for colours in colours_on_rod.values() if colours == _COLOURS)


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Start indices of substrings that concatenate every word exactly once.

    All words are taken to be as long as the first one.
    """
    if not words:
        raise ValueError("words must not be empty")
    width = len(words[0])
    total = width * len(words)
    wanted = Counter(words)
    return [
        start
        for start in range(len(s) - total + 1)
        if Counter(s[j : j + width] for j in range(start, start + total, width)) == wanted
    ]


def _anagram_starts(s: str, p: str) -> Iterator[int]:
    """Yield, in ascending order, each index where an anagram of ``p`` starts in ``s``."""
    width = len(p)
    if width > len(s):
        return
    target = Counter(p)
    window = Counter(s[:width])
    if window == target:
        yield 0
    for start in range(1, len(s) - width + 1):
        window[s[start - 1]] -= 1
        window[s[start + width - 1]] += 1
        if window == target:
            yield start


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every anagram of ``p`` in ``s``."""
    return list(_anagram_starts(s, p))


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of ``s1`` occurs in ``s2``."""
    return next(_anagram_starts(s2, s1), None) is not None


@dataclass(frozen=True)
class ComplexNumber:
    """A complex number with integer parts, written as ``"a+bi"``."""

    real: int
    imag: int

    @classmethod
    def parse(cls, text: str) -> ComplexNumber:
        """Read a number such as ``"1+-1i"`` or ``"-86+72i"``."""
        match = _COMPLEX_PATTERN.search(text)
        if match is None:
            raise ValueError(f"not a complex number: {text!r}")
        real_sign, real, imag_sign, imag = match.groups()
        real_value = -int(real) if real_sign else int(real)
        imag_value = -int(imag) if imag_sign else int(imag)
        return cls(real_value, imag_value)

    def multiply(self, other: ComplexNumber) -> ComplexNumber:
        """Product of this number and ``other``."""
        return ComplexNumber(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        return self.multiply(other)

    def __str__(self) -> str:
        return f"{self.real}+{self.imag}i"


def complex_number_multiply(num1: str, num2: str) -> str:
    """Multiply two complex numbers given as ``"a+bi"`` strings."""
    return str(ComplexNumber.parse(num1).multiply(ComplexNumber.parse(num2)))


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for char1 in text1:
        current = [0]
        for j, char2 in enumerate(text2):
            if char1 == char2:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]