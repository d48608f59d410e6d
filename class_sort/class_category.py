"""Semantic categories used to group classes for multi-line output."""

import re
from enum import Enum


class ClassCategory(str, Enum):
    """Closed set of buckets a utility class can fall into."""

    LAYOUT_DISPLAY = "layout-display"
    LAYOUT_POSITION = "layout-position"
    FLEX_GRID = "flex-grid"
    SPACING = "spacing"
    SIZING = "sizing"
    TYPOGRAPHY = "typography"
    BACKGROUNDS = "backgrounds"
    BORDERS = "borders"
    EFFECTS = "effects"
    FILTERS = "filters"
    TRANSITIONS = "transitions"
    TRANSFORMS = "transforms"
    INTERACTIVITY = "interactivity"
    OTHER = "other"


# Evaluated top to bottom, first match wins. Overlaps (e.g. `content-`) are
# settled by position in this list, not by how specific the pattern is.
CATEGORY_RULES: tuple[tuple[ClassCategory, re.Pattern[str]], ...] = (
    (
        ClassCategory.LAYOUT_DISPLAY,
        re.compile(
            r"^(block|inline|grid|table|contents|hidden|static|fixed|absolute"
            r"|relative|sticky)$"
        ),
    ),
    (
        ClassCategory.LAYOUT_POSITION,
        re.compile(
            r"^(isolate|z-|top|right|bottom|left|visible|invisible|overflow"
            r"|overscroll|object|inset)"
        ),
    ),
    (
        ClassCategory.FLEX_GRID,
        re.compile(
            r"^(flex$|flex-|justify-|items-|content-|self-|order-|place-|grow|shrink"
            r"|basis)"
        ),
    ),
    (
        ClassCategory.FLEX_GRID,
        re.compile(r"^(grid-|col-|row-|gap-|auto-cols|auto-rows)"),
    ),
    (
        ClassCategory.SPACING,
        re.compile(
            r"^(p-|px-|py-|pt-|pr-|pb-|pl-|m-|mx-|my-|mt-|mr-|mb-|ml-|space-)"
        ),
    ),
    (
        ClassCategory.SIZING,
        re.compile(r"^(w-|h-|min-|max-|size-|aspect-)"),
    ),
    (
        ClassCategory.TYPOGRAPHY,
        re.compile(
            r"^(font-|text-|antialiased|subpixel|italic|not-italic|normal-case"
            r"|uppercase|lowercase|capitalize|tracking-|leading-|align-|whitespace-"
            r"|break-|hyphens-|content-|decoration-|underline|overline|line-through"
            r"|no-underline|list-|indent-)"
        ),
    ),
    (
        ClassCategory.BACKGROUNDS,
        re.compile(r"^(bg-|gradient-|from-|via-|to-)"),
    ),
    (
        ClassCategory.BORDERS,
        re.compile(r"^(rounded|border|divide|ring|outline|stroke|fill)"),
    ),
    (
        ClassCategory.EFFECTS,
        re.compile(r"^(shadow|opacity|mix-|blend-|box-decoration|box-slice)"),
    ),
    (
        ClassCategory.FILTERS,
        re.compile(
            r"^(blur|brightness|contrast|drop-shadow|grayscale|hue-rotate|invert"
            r"|saturate|sepia|backdrop-)"
        ),
    ),
    (
        ClassCategory.TRANSITIONS,
        re.compile(r"^(transition|duration|ease|delay|animate-)"),
    ),
    (
        ClassCategory.TRANSFORMS,
        re.compile(r"^(scale|rotate|translate|skew|origin-)"),
    ),
    (
        ClassCategory.INTERACTIVITY,
        re.compile(
            r"^(cursor-|pointer-|resize|scroll-|select-|touch-|will-change|accent-"
            r"|appearance-|caret-)"
        ),
    ),
)
