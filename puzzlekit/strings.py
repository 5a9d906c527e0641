"""String puzzles: conversions, searching, parsing and comparisons."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain, cycle, groupby, zip_longest

_ROMAN_VALUES = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_DIGITS = {"M": 1000, "D": 500, "C": 100, "L": 50, "X": 10, "V": 5, "I": 1}

# A numeral is subtracted when it is followed by one of these.
_SUBTRACTIVE = {"C": "DM", "X": "LC", "I": "VX"}


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    row_of = cycle(chain(range(num_rows), range(num_rows - 2, 0, -1)))
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for ch, row in zip(s, row_of):
        rows[row].append(ch)
    return "".join(chain.from_iterable(rows))


def int_to_roman(num: int) -> str:
    """Return the Roman numeral for ``num``; non-positive numbers give ``""``."""
    parts: list[str] = []
    for value, numeral in _ROMAN_VALUES:
        if num <= 0:
            break
        count, num = divmod(num, value)
        parts.append(numeral * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral; unknown characters are ignored."""
    total = 0
    for ch, following in zip_longest(s, s[1:], fillvalue=""):
        value = _ROMAN_DIGITS.get(ch, 0)
        if following and following in _SUBTRACTIVE.get(ch, ""):
            total -= value
        else:
            total += value
    return total


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by all strings; no strings give ``""``."""
    words = list(strs)
    if not words:
        return ""
    prefix: list[str] = []
    for chars in zip(*words):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def kmp_prefix_table(pattern: str) -> list[int]:
    """Return, for each position, the length of the longest proper border ending there."""
    table = [0] * len(pattern)
    j = 0
    for i, ch in enumerate(pattern[1:], 1):
        while j and ch != pattern[j]:
            j = table[j - 1]
        if ch == pattern[j]:
            j += 1
        table[i] = j
    return table


def str_str(haystack: str, needle: str) -> int:
    """Return the first index of ``needle`` in ``haystack`` or -1, using KMP."""
    if not needle:
        return 0
    table = kmp_prefix_table(needle)
    j = 0
    for i, ch in enumerate(haystack):
        while j and ch != needle[j]:
            j = table[j - 1]
        if ch == needle[j]:
            j += 1
        if j == len(needle):
            return i + 1 - j
    return -1


def str_str_brute_force(haystack: str, needle: str) -> int:
    """Return the first index of ``needle`` in ``haystack`` or -1, trying every start."""
    width = len(needle)
    return next(
        (
            start
            for start in range(len(haystack) - width + 1)
            if haystack[start:start + width] == needle
        ),
        -1,
    )


def count_and_say(n: int) -> str:
    """Return the n-th term (1-based) of the count-and-say sequence."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").split(" ")[-1])


def is_number(s: str) -> bool:
    """Return whether ``s``, ignoring surrounding spaces, is a decimal number.

    Accepts an optional sign, digits with at most one dot, and an optional
    ``e`` exponent that may carry its own sign but no dot.
    """
    body = s.strip(" ")
    if not body:
        return False
    seen_dot = seen_exp = seen_digit = False
    previous = ""
    for position, ch in enumerate(body):
        if "0" <= ch <= "9":
            seen_digit = True
        elif ch == ".":
            if seen_exp or seen_dot:
                return False
            seen_dot = True
        elif ch == "e":
            if not seen_digit or seen_exp:
                return False
            seen_exp = True
            seen_digit = False
        elif ch in "+-":
            if position != 0 and previous != "e":
                return False
        else:
            return False
        previous = ch
    return seen_digit


def add_binary(a: str, b: str) -> str:
    """Add two binary strings.

    The result is as wide as the longer operand, plus one digit on overflow.
    """
    for operand in (a, b):
        if set(operand) - {"0", "1"}:
            raise ValueError(f"not a binary string: {operand!r}")
    width = max(len(a), len(b))
    if width == 0:
        return ""
    total = int(a or "0", 2) + int(b or "0", 2)
    return format(total, f"0{width}b")


def is_palindrome_text(s: str) -> bool:
    """Return whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words, collapsing extra spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings, returning 1, -1 or 0.

    Missing or empty components count as zero.
    """
    def parse(version: str) -> list[int]:
        return [int(part) if part else 0 for part in version.split(".")] if version else []

    for left, right in zip_longest(parse(version1), parse(version2), fillvalue=0):
        if left != right:
            return 1 if left > right else -1
    return 0


def convert_to_title(n: int) -> str:
    """Return the spreadsheet column title for ``n`` (1 is ``A``, 27 is ``AA``)."""
    letters: list[str] = []
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def title_to_number(s: str) -> int:
    """Return the column number of a spreadsheet column title."""
    number = 0
    for ch in s:
        if not "A" <= ch <= "Z":
            raise ValueError(f"invalid column letter: {ch!r}")
        number = number * 26 + ord(ch) - ord("A") + 1
    return number


def is_isomorphic(s: str, t: str) -> bool:
    """Return whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True