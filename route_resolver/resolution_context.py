"""Immutable state threaded through the route resolution phases."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from route_resolver.split_path import join_path, split_path

if TYPE_CHECKING:
    from route_resolver.action_descriptor import ActionDescriptor
    from route_resolver.component import Component
    from route_resolver.parent_link import ParentLink
    from route_resolver.schema import Schema


@dataclass(frozen=True)
class ResolutionContext:
    """Snapshot of a route resolution between two phases.

    Each phase returns a new context; ``resolved`` plus ``remaining`` always
    equals the segments of the original route, in order.
    """

    remaining: tuple[str, ...]
    resolved: tuple[str, ...] = ()
    schema: "Schema | None" = None
    name: str = ""
    id: str = ""  # empty means no id captured for the focused entity
    parents: tuple["ParentLink", ...] = ()
    action: "ActionDescriptor | None" = None
    component: "Component | None" = None
    endpoint: str = ""
    alias: str = ""

    @classmethod
    def for_path(cls, path: str) -> "ResolutionContext":
        """Create the initial context for a dot-delimited route."""
        return cls(remaining=split_path(path))

    @property
    def path(self) -> str:
        """Dot-joined consumed segments."""
        return join_path(self.resolved)

    @property
    def head(self) -> str | None:
        """First unconsumed segment, or None once the route is exhausted."""
        return self.remaining[0] if self.remaining else None

    @property
    def is_exhausted(self) -> bool:
        """Check if every segment has been consumed."""
        return not self.remaining

    def consume(self) -> "ResolutionContext":
        """Move the head segment from ``remaining`` to ``resolved``."""
        if not self.remaining:
            msg = "Cannot consume a segment from an exhausted route"
            raise IndexError(msg)
        return replace(
            self,
            remaining=self.remaining[1:],
            resolved=(*self.resolved, self.remaining[0]),
        )

    def evolve(self, **changes: object) -> "ResolutionContext":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]
