"""Sign comparison for class ranks."""

Rank = int | float


def big_sign(a: Rank, b: Rank) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``.

    Compares directly instead of subtracting so large ranks keep their precision.
    """
    return (a > b) - (a < b)
