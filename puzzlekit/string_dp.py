"""Dynamic programming over strings."""

from __future__ import annotations

from collections.abc import Iterable


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance (insertions, deletions, replacements) between two words."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        current = [i]
        for j, b in enumerate(word2, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(min(current[j - 1], previous[j], previous[j - 1]) + 1)
        previous = current
    return previous[-1]


def num_decodings(s: str) -> int:
    """Count the ways to decode a digit string with 1..26 mapped to letters.

    An empty string has no decodings.
    """
    if not s:
        return 0
    before, last = 1, int(s[0] != "0")
    for prev_ch, ch in zip(s, s[1:]):
        ways = last if ch != "0" else 0
        if prev_ch == "1" or (prev_ch == "2" and ch <= "6"):
            ways += before
        before, last = last, ways
    return last


def word_break(s: str, words: Iterable[str]) -> bool:
    """Return whether ``s`` splits into a sequence of words from ``words``."""
    vocabulary = set(words)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in vocabulary for start in range(end)
        )
    return reachable[-1]