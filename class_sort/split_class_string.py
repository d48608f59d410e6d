"""Logic for splitting a class attribute into classes and whitespace runs."""

import re
from dataclasses import dataclass, field

WHITESPACE_RE = re.compile(r"([\t\r\f\n ]+)")
WHITESPACE_ONLY_RE = re.compile(r"^[\t\r\f\n ]+$")


@dataclass
class SegmentedClassString:
    """Classes and whitespace kept as two parallel lists.

    ``whitespace[i]`` is the run that followed ``classes[i]`` in the input, so
    the whitespace slot for a class at index ``k`` is ``k`` and the run in front
    of it is ``k - 1``. A leading run shows up as an empty first class.
    """

    classes: list[str] = field(default_factory=list)
    whitespace: list[str] = field(default_factory=list)

    def join(self) -> str:
        """Interleave the classes with their trailing whitespace."""
        return "".join(
            cls + (self.whitespace[i] if i < len(self.whitespace) else "")
            for i, cls in enumerate(self.classes)
        )


def is_whitespace_only(class_str: str) -> bool:
    """Return True when the string holds nothing but whitespace."""
    return WHITESPACE_ONLY_RE.match(class_str) is not None


def split_class_string(class_str: str) -> SegmentedClassString:
    """Split a class attribute on whitespace while keeping the whitespace.

    A trailing empty class (input ends in whitespace) is dropped; the final
    whitespace run still carries the trailing whitespace.
    """
    parts = WHITESPACE_RE.split(class_str)
    classes = parts[0::2]
    whitespace = parts[1::2]

    if classes and classes[-1] == "":
        classes.pop()

    return SegmentedClassString(classes, whitespace)
