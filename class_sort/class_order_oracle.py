"""A class-order oracle backed by a plain list of class names."""

from collections.abc import Iterable
from pathlib import Path

from class_sort.get_base_class_name import count_variants, get_base_class_name
from class_sort.sort_env import RankedClass


class ListClassOrder:
    """Ranks classes by where their base name appears in a canonical list.

    Variant classes rank after every plain class, and each extra variant pushes
    a class one more block of ``len(order)`` further down. Classes whose base
    name is not listed get an unknown rank (None).
    """

    def __init__(self, order: Iterable[str]) -> None:
        """Initialize the oracle from class names in canonical order."""
        self.positions: dict[str, int] = {}
        for name in order:
            self.positions.setdefault(name, len(self.positions))

    def rank(self, cls: str) -> int | None:
        """Return the rank of one class, or None when it is unknown."""
        position = self.positions.get(get_base_class_name(cls))
        if position is None:
            return None
        return count_variants(cls) * len(self.positions) + position

    def __call__(self, class_list: list[str]) -> list[RankedClass]:
        """Pair every class with its rank, duplicates included."""
        return [(cls, self.rank(cls)) for cls in class_list]


def load_class_order(path: str | Path) -> list[str]:
    """Read class names, one per line, skipping blanks and ``#`` comments."""
    names: list[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        name = line.strip()
        if name and not name.startswith("#"):
            names.append(name)
    return names
