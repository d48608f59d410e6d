"""Logic for ordering classes by the ranks an oracle assigns them."""

from functools import cmp_to_key

from class_sort.big_sign import big_sign
from class_sort.sort_env import RankedClass, SortEnv

ELLIPSES = frozenset({"...", "…"})


def _compare(left: RankedClass, right: RankedClass) -> int:
    name_a, a = left
    name_z, z = right

    # Ellipses always go last
    a_is_ellipsis = name_a in ELLIPSES
    z_is_ellipsis = name_z in ELLIPSES
    if a_is_ellipsis or z_is_ellipsis:
        return int(a_is_ellipsis) - int(z_is_ellipsis)

    if a == z:
        return 0
    if a is None:
        return -1
    if z is None:
        return 1
    return big_sign(a, z)


def reorder_classes(class_list: list[str], env: SortEnv) -> list[RankedClass]:
    """Rank the classes with the env's oracle and sort them.

    Unknown classes come first, in their original order, followed by known
    classes by ascending rank. Ties keep the order the oracle returned them in.
    """
    ordered = list(env.get_class_order(class_list))
    ordered.sort(key=cmp_to_key(_compare))
    return ordered
