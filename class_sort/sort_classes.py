"""Orchestration logic for sorting the classes inside one attribute string."""

import logging
import re
from typing import Any, Literal

from class_sort.group_for_multiline import group_for_multiline
from class_sort.sort_class_list import sort_class_list
from class_sort.sort_env import CollapseWhitespace, SortEnv
from class_sort.split_class_string import (
    SegmentedClassString,
    is_whitespace_only,
    split_class_string,
)

logger = logging.getLogger(__name__)

LEADING_WS_RE = re.compile(r"^\s+")
TRAILING_WS_RE = re.compile(r"\s+\Z")


def sort_classes(
    class_str: Any,
    env: SortEnv,
    *,
    ignore_first: bool = False,
    ignore_last: bool = False,
    remove_duplicates: bool = True,
    collapse_whitespace: CollapseWhitespace | Literal[False] = CollapseWhitespace(),
) -> Any:
    """Return ``class_str`` with its classes sorted into canonical order.

    Anything that is not a non-empty string comes back untouched, as do strings
    containing ``{{`` (template interpolation is never rewritten).
    """
    if not isinstance(class_str, str) or class_str == "":
        return class_str

    if "{{" in class_str:
        logger.debug("Skipping templated class string: %r", class_str)
        return class_str

    if env.options.preserve_whitespace:
        collapse_whitespace = False

    if is_whitespace_only(class_str):
        return " " if collapse_whitespace else class_str

    segments = split_class_string(class_str)
    classes = segments.classes
    whitespace = segments.whitespace

    if collapse_whitespace:
        whitespace = [" "] * len(whitespace)

    prefix = ""
    if ignore_first:
        prefix = (classes.pop(0) if classes else "") + (
            whitespace.pop(0) if whitespace else ""
        )

    suffix = ""
    if ignore_last:
        suffix = (whitespace.pop() if whitespace else "") + (
            classes.pop() if classes else ""
        )

    result = sort_class_list(classes, env, remove_duplicates=remove_duplicates)
    class_list = result.class_list

    # Slot i trails class i; drop the run that sat in front of a removed class
    whitespace = [
        ws for i, ws in enumerate(whitespace) if i + 1 not in result.removed_indices
    ]

    should_multiline = (
        env.options.multiline_classes
        and not ignore_first
        and not ignore_last
        and collapse_whitespace is not False
        and len(class_list) >= env.options.multiline_min_class_count
    )

    if should_multiline:
        lines = [" ".join(group.classes) for group in group_for_multiline(class_list)]

        prefix = TRAILING_WS_RE.sub(" ", prefix)
        suffix = LEADING_WS_RE.sub(" ", suffix)

        return prefix + "\n".join(lines) + suffix

    body = SegmentedClassString(class_list, whitespace).join()

    if collapse_whitespace:
        prefix = TRAILING_WS_RE.sub(" ", prefix)
        suffix = LEADING_WS_RE.sub(" ", suffix)

        body = LEADING_WS_RE.sub("" if collapse_whitespace.start else " ", body)
        body = TRAILING_WS_RE.sub("" if collapse_whitespace.end else " ", body)

    return prefix + body + suffix
