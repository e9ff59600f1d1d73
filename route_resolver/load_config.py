"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from route_resolver.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "resolution": {
        # Move a matched custom action segment into the resolved path
        "consume_action_segment": True,
    },
    "components": {
        "roots": {
            "component": "components",
            "form": "forms",
        },
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
