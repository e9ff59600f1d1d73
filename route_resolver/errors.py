"""Exceptions raised while loading schemas or resolving routes."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from route_resolver.resolution_context import ResolutionContext


class ResolutionError(Exception):
    """Base class for all route resolution failures."""


class SchemaNotFoundError(ResolutionError):
    """The root segment of a route names no registered schema."""

    def __init__(self, name: str) -> None:
        """Record the missing entity name."""
        super().__init__(f"The {name} schema was not found")
        self.name = name


class UnresolvedPathError(ResolutionError):
    """Segments remained after every resolution phase ran."""

    def __init__(self, context: "ResolutionContext") -> None:
        """Keep the partial context so callers can inspect what was resolved."""
        remaining = ".".join(context.remaining)
        super().__init__(
            f"Configuration path was not completely resolved: '{remaining}' remains"
        )
        self.context = context


class SchemaDefinitionError(ResolutionError):
    """A schema mapping or schema file is malformed."""
