"""Logic for splitting a sorted class list into per-category lines."""

from dataclasses import dataclass, field

from class_sort.categorize_class import categorize_class
from class_sort.class_category import ClassCategory


@dataclass
class ClassGroup:
    """A run of consecutive classes sharing one category."""

    category: ClassCategory
    classes: list[str] = field(default_factory=list)


def group_for_multiline(class_list: list[str]) -> list[ClassGroup]:
    """Coalesce adjacent same-category classes into groups.

    Grouping is run-length: the same category can show up in several groups when
    other categories sit between its classes.
    """
    groups: list[ClassGroup] = []

    for cls in class_list:
        category = categorize_class(cls)

        if groups and groups[-1].category == category:
            groups[-1].classes.append(cls)
        else:
            groups.append(ClassGroup(category, [cls]))

    return groups
