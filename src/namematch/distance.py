"""Damerau-Levenshtein edit distance."""

from __future__ import annotations


def edit_distance(source: str, target: str) -> int:
    """
    Return the Damerau-Levenshtein distance between *source* and *target*.

    Insertions, deletions, substitutions and transpositions of adjacent
    characters each cost one. This is the unrestricted distance: a
    transposed pair may be edited further, so ``"ca" -> "abc"`` costs 2
    (optimal string alignment would give 3).
    """
    if not source:
        return len(target) if target else 0
    if not target:
        return len(source)

    m, n = len(source), len(target)
    inf = m + n

    # h[i + 1][j + 1] is the distance between source[:i] and target[:j];
    # row 0 and column 0 are an infinite border.
    h = [[0] * (n + 2) for _ in range(m + 2)]
    h[0][0] = inf
    for i in range(m + 1):
        h[i + 1][0] = inf
        h[i + 1][1] = i
    for j in range(n + 1):
        h[0][j + 1] = inf
        h[1][j + 1] = j

    # Last 1-based row of source in which each character was seen.
    last_row: dict[str, int] = {}

    for i in range(1, m + 1):
        ch = source[i - 1]
        last_match_col = 0
        for j in range(1, n + 1):
            i1 = last_row.get(target[j - 1], 0)
            j1 = last_match_col

            if ch == target[j - 1]:
                cost = h[i][j]
                last_match_col = j
            else:
                cost = min(h[i][j], h[i + 1][j], h[i][j + 1]) + 1

            transposed = h[i1][j1] + (i - i1 - 1) + 1 + (j - j1 - 1)
            h[i + 1][j + 1] = min(cost, transposed)

        last_row[ch] = i

    return h[m + 1][n + 1]
