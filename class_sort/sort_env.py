"""Data models for the options and collaborators a sort call depends on."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from class_sort.big_sign import Rank

# One (class, rank) pair per input class; a rank of None means "unknown".
RankedClass = tuple[str, Rank | None]
ClassOrderOracle = Callable[[list[str]], list[RankedClass]]

DEFAULT_MULTILINE_MIN_CLASS_COUNT = 5


@dataclass(frozen=True)
class CollapseWhitespace:
    """Which edges of a class string lose their surrounding whitespace."""

    start: bool = True
    end: bool = True

    @classmethod
    def from_config(cls, value: Any) -> "CollapseWhitespace | Literal[False]":
        """Build the setting from a config value (``false`` or ``{start, end}``)."""
        if value is False:
            return False
        if value is None or value is True:
            return cls()
        if not isinstance(value, dict):
            msg = f"collapse_whitespace must be false or a mapping, got {value!r}"
            raise ValueError(msg)
        return cls(
            start=bool(value.get("start", True)), end=bool(value.get("end", True))
        )


@dataclass(frozen=True)
class SortOptions:
    """Tool-wide options that override per-call sort settings."""

    preserve_whitespace: bool = False
    preserve_duplicates: bool = False
    multiline_classes: bool = False
    multiline_min_class_count: int = DEFAULT_MULTILINE_MIN_CLASS_COUNT

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "SortOptions":
        """Read the ``options`` section of a loaded configuration."""
        options = config.get("options") or {}
        if not isinstance(options, dict):
            msg = f"options must be a mapping, got {options!r}"
            raise ValueError(msg)
        return cls(
            preserve_whitespace=bool(options.get("preserve_whitespace", False)),
            preserve_duplicates=bool(options.get("preserve_duplicates", False)),
            multiline_classes=bool(options.get("multiline_classes", False)),
            multiline_min_class_count=int(
                options.get(
                    "multiline_min_class_count", DEFAULT_MULTILINE_MIN_CLASS_COUNT
                )
            ),
        )


@dataclass(frozen=True)
class SortEnv:
    """Bundles the class-order oracle with the tool-wide options."""

    get_class_order: ClassOrderOracle
    options: SortOptions = SortOptions()
