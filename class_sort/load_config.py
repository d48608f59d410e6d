"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from class_sort.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "sorting": {
        "ignore_first": False,
        "ignore_last": False,
        "remove_duplicates": True,
        "collapse_whitespace": {"start": True, "end": True},
    },
    "options": {
        "preserve_whitespace": False,
        "preserve_duplicates": False,
        "multiline_classes": False,
        "multiline_min_class_count": 5,
    },
    "class_order": [],
    "class_order_file": None,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            logger.warning("Config file %s not found. Using defaults.", p)
            return config

        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Config file {p} must contain a mapping at the top level"
            raise ValueError(msg)

        logger.info("Merging config from %s", p)
        config = deep_merge(config, user_config)
    return config
