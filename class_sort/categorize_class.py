"""Logic for mapping a class name to its semantic category."""

from class_sort.class_category import CATEGORY_RULES, ClassCategory
from class_sort.get_base_class_name import get_base_class_name


def categorize_class(cls: str) -> ClassCategory:
    """Return the category of the first rule matching the class's base name."""
    base = get_base_class_name(cls)

    for category, pattern in CATEGORY_RULES:
        if pattern.search(base):
            return category

    return ClassCategory.OTHER
