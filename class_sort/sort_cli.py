"""Command-line entry point for sorting class attribute strings."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from class_sort.class_order_oracle import ListClassOrder, load_class_order
from class_sort.load_config import load_config
from class_sort.sort_classes import sort_classes
from class_sort.sort_env import CollapseWhitespace, SortEnv, SortOptions

logger = logging.getLogger(__name__)


def build_env(config: dict[str, Any], args: argparse.Namespace) -> SortEnv:
    """Create the sort environment from merged config and CLI overrides."""
    order = list(config.get("class_order") or [])

    order_file = args.order_file or config.get("class_order_file")
    if order_file:
        try:
            order.extend(load_class_order(order_file))
        except OSError as e:
            msg = f"Cannot read class order file {order_file}: {e}"
            raise SystemExit(msg) from e

    if not order:
        logger.warning("No class order configured; every class ranks as unknown.")

    options = SortOptions.from_config(config)
    overrides: dict[str, Any] = {}
    if args.preserve_whitespace:
        overrides["preserve_whitespace"] = True
    if args.multiline:
        overrides["multiline_classes"] = True
    if args.multiline_min is not None:
        overrides["multiline_min_class_count"] = args.multiline_min
    if overrides:
        options = dataclasses.replace(options, **overrides)

    return SortEnv(ListClassOrder(order), options)


def main(argv: list[str] | None = None) -> int:
    """Sort each class string given on the command line or stdin."""
    ap = argparse.ArgumentParser(
        description="Sort whitespace-separated CSS classes into canonical order."
    )
    ap.add_argument(
        "classes",
        nargs="*",
        help="Class strings to sort (default: one per line from stdin)",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--order-file",
        type=Path,
        help="File listing class names in canonical order, one per line",
    )
    ap.add_argument(
        "--ignore-first",
        action="store_true",
        help="Leave the first class in place",
    )
    ap.add_argument(
        "--ignore-last",
        action="store_true",
        help="Leave the last class in place",
    )
    ap.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Do not remove repeated classes",
    )
    ap.add_argument(
        "--preserve-whitespace",
        action="store_true",
        help="Keep whitespace exactly as written",
    )
    ap.add_argument(
        "--multiline",
        action="store_true",
        help="Break long class lists into one line per category",
    )
    ap.add_argument(
        "--multiline-min",
        type=int,
        help="Minimum class count before multiline output kicks in",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        env = build_env(config, args)
        sorting = config.get("sorting") or {}
        if not isinstance(sorting, dict):
            msg = f"sorting must be a mapping, got {sorting!r}"
            raise ValueError(msg)
        collapse_whitespace = CollapseWhitespace.from_config(
            sorting.get("collapse_whitespace")
        )
    except (ValueError, yaml.YAMLError) as e:
        msg = f"Invalid config {args.config}: {e}"
        raise SystemExit(msg) from e

    inputs = args.classes or [line.rstrip("\n") for line in sys.stdin]
    for class_str in inputs:
        print(
            sort_classes(
                class_str,
                env,
                ignore_first=args.ignore_first or bool(sorting.get("ignore_first")),
                ignore_last=args.ignore_last or bool(sorting.get("ignore_last")),
                remove_duplicates=not args.keep_duplicates
                and bool(sorting.get("remove_duplicates", True)),
                collapse_whitespace=collapse_whitespace,
            )
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
