"""Logic for sorting a class list and dropping duplicate classes."""

from dataclasses import dataclass, field

from class_sort.reorder_classes import reorder_classes
from class_sort.sort_env import RankedClass, SortEnv


@dataclass
class SortedClassList:
    """Sorted classes plus the sorted-order positions that were removed."""

    class_list: list[str]
    removed_indices: set[int] = field(default_factory=set)


def sort_class_list(
    class_list: list[str], env: SortEnv, *, remove_duplicates: bool = True
) -> SortedClassList:
    """Sort classes and, unless disabled, remove repeated known classes.

    Only classes with a known rank are remembered as seen, so an unknown class
    never shadows a later copy of itself. An unknown class is still dropped when
    a known class with the same name was kept before it.
    """
    ordered = reorder_classes(class_list, env)

    if env.options.preserve_duplicates:
        remove_duplicates = False

    removed_indices: set[int] = set()

    if remove_duplicates:
        seen: set[str] = set()
        kept: list[RankedClass] = []
        for index, (cls, rank) in enumerate(ordered):
            if cls in seen:
                removed_indices.add(index)
                continue
            if rank is not None:
                seen.add(cls)
            kept.append((cls, rank))
        ordered = kept

    return SortedClassList([cls for cls, _ in ordered], removed_indices)
