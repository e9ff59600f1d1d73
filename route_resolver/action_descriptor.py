"""Data model for the actions a resolved route can perform."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActionDescriptor:
    """Represents an action declared on a schema or provided as a built-in."""

    name: str
    need_fetch: bool = False  # record must be loaded before the action runs


DEFAULT_ACTIONS: dict[str, ActionDescriptor] = {
    "create": ActionDescriptor(name="create", need_fetch=False),
    "update": ActionDescriptor(name="update", need_fetch=True),
}
