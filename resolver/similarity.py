"""Trigram similarity - embedded counterpart of pg_trgm's SIMILARITY().

Both backends must agree on scores at the search threshold, so this is the
single definition used wherever the store has no native operator:

    similarity(a, b) = 2 * |T(a) & T(b)| / (|T(a)| + |T(b)|)

where T(s) is the set of contiguous 3-character substrings of lower(s).
No boundary padding is added.
"""


def trigrams(value: str) -> set[str]:
    """Set of contiguous 3-character substrings (duplicates collapse)."""
    return {value[i : i + 3] for i in range(len(value) - 2)}


def similarity(a: str | None, b: str | None) -> float:
    """Case-insensitive Dice coefficient over trigram sets, in [0, 1]."""
    if a is None or b is None:
        return 0.0

    a = a.lower()
    b = b.lower()
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    ta = trigrams(a)
    tb = trigrams(b)
    total = len(ta) + len(tb)
    if not total:
        return 0.0
    return 2 * len(ta & tb) / total
