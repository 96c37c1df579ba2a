"""Levenshtein edit distance."""

from __future__ import annotations

import numpy as np


def levenshtein(s: str, t: str) -> int:
    """Minimum number of single-character insertions, deletions and
    substitutions turning ``s`` into ``t``.

    Fills the full (m+1) x (n+1) table; row 0 and column 0 hold the
    distances to and from the empty string.
    """
    m, n = len(s), len(t)
    if m == 0:
        return n
    if n == 0:
        return m

    d = np.zeros((m + 1, n + 1), dtype=np.int64)
    d[:, 0] = np.arange(m + 1)
    d[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            d[i, j] = min(
                d[i - 1, j] + 1,         # deletion
                d[i, j - 1] + 1,         # insertion
                d[i - 1, j - 1] + cost,  # substitution
            )
    return int(d[m, n])
