"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries without mutating either.

    - Mappings are merged recursively.
    - Scalars and lists in 'update' replace those in 'base'.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result
