"""Logic for stripping variant prefixes from a utility class name."""


def _variant_separators(cls: str) -> list[int]:
    """Return the offsets of every top-level ``:`` in a class name.

    A ``:`` inside ``[...]`` belongs to an arbitrary value and is not a variant
    separator. Depth never drops below zero, so stray ``]`` are ignored.
    """
    depth = 0
    separators: list[int] = []

    for i, char in enumerate(cls):
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        elif char == ":" and depth == 0:
            separators.append(i)

    return separators


def get_base_class_name(cls: str) -> str:
    """Return the part of a class name after its last top-level variant separator.

    >>> get_base_class_name("lg:hover:[&>div]:bg-red-500")
    'bg-red-500'
    """
    separators = _variant_separators(cls)
    if not separators:
        return cls
    return cls[separators[-1] + 1 :]


def count_variants(cls: str) -> int:
    """Return how many variant prefixes (``md:``, ``hover:`` ...) a class carries."""
    return len(_variant_separators(cls))
