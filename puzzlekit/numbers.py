"""Number puzzles: powers, bit tricks, digit manipulation and counting."""

from __future__ import annotations

import re
from math import isqrt

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
_UINT32_LIMIT = 2**32

_LEADING_INTEGER = re.compile(r" *([+-]?)([0-9]*)")


def _check_uint32(n: int) -> None:
    if not 0 <= n < _UINT32_LIMIT:
        raise ValueError("n must be an unsigned 32-bit integer")


def my_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    if x == 1 or n == 0:
        return 1.0
    if n < 0:
        x = 1 / x
        n = -n
    result = 1.0
    while n:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


def reverse_bits(n: int) -> int:
    """Reverse the bit order of an unsigned 32-bit integer."""
    _check_uint32(n)
    return int(f"{n:032b}"[::-1], 2)


def hamming_weight(n: int) -> int:
    """Return the number of set bits of an unsigned 32-bit integer."""
    _check_uint32(n)
    return bin(n).count("1")


def range_bitwise_and(m: int, n: int) -> int:
    """Return the bitwise AND of every integer from ``m`` to ``n`` inclusive."""
    if not 0 <= m <= n:
        raise ValueError("bounds must satisfy 0 <= m <= n")
    shift = 0
    while m != n:
        m >>= 1
        n >>= 1
        shift += 1
    return m << shift


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Return whether repeatedly summing squared digits of ``n`` reaches 1.

    Every unhappy number falls into a cycle through 4; non-positive numbers
    are not happy.
    """
    if n <= 0:
        return False
    while n not in (1, 4):
        n = _digit_square_sum(n)
    return n == 1


def count_primes(n: int) -> int:
    """Return how many primes are less than ``n``."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def compute_area(
    ax1: int, ay1: int, ax2: int, ay2: int, bx1: int, by1: int, bx2: int, by2: int
) -> int:
    """Return the area covered by two axis-aligned rectangles together.

    Each rectangle is given by its lower-left and upper-right corners.
    """
    first = (ax2 - ax1) * (ay2 - ay1)
    second = (bx2 - bx1) * (by2 - by1)
    width = min(ax2, bx2) - max(ax1, bx1)
    height = min(ay2, by2) - max(ay1, by1)
    overlap = width * height if width > 0 and height > 0 else 0
    return first + second - overlap


def is_power_of_two(n: int) -> bool:
    """Return whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    while n > 0:
        n //= 5
        count += n
    return count


def num_trees(n: int) -> int:
    """Count the structurally distinct search trees holding the values 1..n.

    Values below 3 are returned unchanged, so ``num_trees(0)`` is 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 3:
        return n
    counts = [1, 1, 2]
    for size in range(3, n + 1):
        counts.append(sum(counts[j] * counts[size - 1 - j] for j in range(size)))
    return counts[n]


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when ``x`` or its reversal reaches the signed 32-bit limits.
    """
    magnitude = abs(x)
    if magnitude >= INT32_MAX:
        return 0
    reversed_magnitude = int(str(magnitude)[::-1])
    if reversed_magnitude >= INT32_MAX:
        return 0
    return -reversed_magnitude if x < 0 else reversed_magnitude


def my_atoi(s: str) -> int:
    """Parse a leading integer after spaces, clamped to the signed 32-bit range.

    Text without a leading integer gives 0.
    """
    match = _LEADING_INTEGER.match(s)
    assert match is not None
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return max(INT32_MIN, min(INT32_MAX, value))


def is_palindrome_number(x: int) -> bool:
    """Return whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def generate_pascal(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (0-based) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return row