"""Tests for class categorization and multi-line grouping."""

import pytest

from class_sort.categorize_class import categorize_class
from class_sort.class_category import ClassCategory
from class_sort.group_for_multiline import ClassGroup, group_for_multiline


@pytest.mark.parametrize(
    ("cls", "category"),
    [
        ("block", ClassCategory.LAYOUT_DISPLAY),
        ("hidden", ClassCategory.LAYOUT_DISPLAY),
        ("z-10", ClassCategory.LAYOUT_POSITION),
        ("overflow-hidden", ClassCategory.LAYOUT_POSITION),
        ("flex", ClassCategory.FLEX_GRID),
        ("grid", ClassCategory.LAYOUT_DISPLAY),
        ("md:flex", ClassCategory.FLEX_GRID),
        ("items-center", ClassCategory.FLEX_GRID),
        ("gap-4", ClassCategory.FLEX_GRID),
        ("px-2", ClassCategory.SPACING),
        ("space-x-2", ClassCategory.SPACING),
        ("w-full", ClassCategory.SIZING),
        ("max-w-md", ClassCategory.SIZING),
        ("font-bold", ClassCategory.TYPOGRAPHY),
        ("[&:hover]:underline", ClassCategory.TYPOGRAPHY),
        ("hover:bg-red-500", ClassCategory.BACKGROUNDS),
        ("to-blue-500", ClassCategory.BACKGROUNDS),
        ("rounded-lg", ClassCategory.BORDERS),
        ("ring-2", ClassCategory.BORDERS),
        ("shadow-md", ClassCategory.EFFECTS),
        ("opacity-50", ClassCategory.EFFECTS),
        ("blur-sm", ClassCategory.FILTERS),
        ("drop-shadow", ClassCategory.FILTERS),
        ("duration-200", ClassCategory.TRANSITIONS),
        ("transition", ClassCategory.TRANSITIONS),
        ("translate-x-2", ClassCategory.TRANSFORMS),
        ("rotate-45", ClassCategory.TRANSFORMS),
        ("cursor-pointer", ClassCategory.INTERACTIVITY),
        ("select-none", ClassCategory.INTERACTIVITY),
        ("inline-flex", ClassCategory.OTHER),
        ("foo-bar", ClassCategory.OTHER),
    ],
)
def test_categorize_class(cls: str, category: ClassCategory) -> None:
    """Verify the category each class maps to."""
    assert categorize_class(cls) == category


def test_categorize_first_rule_wins() -> None:
    """Verify that 'content-' resolves to flex-grid, the earlier rule."""
    assert categorize_class("content-center") == ClassCategory.FLEX_GRID


def test_category_values() -> None:
    """Verify the category names used in rendered output."""
    assert ClassCategory.LAYOUT_DISPLAY.value == "layout-display"
    assert ClassCategory.OTHER == "other"


def test_group_for_multiline() -> None:
    """Verify grouping of a sorted class list into category runs."""
    groups = group_for_multiline(["block", "flex", "text-sm", "italic", "p-4"])
    assert groups == [
        ClassGroup(ClassCategory.LAYOUT_DISPLAY, ["block"]),
        ClassGroup(ClassCategory.FLEX_GRID, ["flex"]),
        ClassGroup(ClassCategory.TYPOGRAPHY, ["text-sm", "italic"]),
        ClassGroup(ClassCategory.SPACING, ["p-4"]),
    ]


def test_group_for_multiline_is_run_length() -> None:
    """Verify that a category split by another category yields two groups."""
    groups = group_for_multiline(["p-4", "w-full", "m-2"])
    assert [g.category for g in groups] == [
        ClassCategory.SPACING,
        ClassCategory.SIZING,
        ClassCategory.SPACING,
    ]
    for left, right in zip(groups, groups[1:]):
        assert left.category != right.category


def test_group_for_multiline_empty() -> None:
    """Verify that no classes produce no groups."""
    assert group_for_multiline([]) == []
