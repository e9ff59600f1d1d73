"""Lookup of entity schemas by root entity name."""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from route_resolver.schema import Schema


class SchemaRegistry(Protocol):
    """Read-only lookup consumed by the route resolver."""

    def has_schema(self, name: str) -> bool:
        """Check if a schema is registered under exactly ``name``."""
        ...

    def get_schema(self, name: str) -> Schema:
        """Return the schema registered under ``name``."""
        ...


class InMemorySchemaRegistry:
    """A registry backed by a plain mapping of entity name to schema."""

    def __init__(self, schemas: Mapping[str, Schema] | None = None) -> None:
        """Initialize the registry with an optional initial mapping."""
        self._schemas: dict[str, Schema] = dict(schemas or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InMemorySchemaRegistry":
        """Build a registry from a mapping of entity name to schema definition."""
        return cls(
            {
                str(name): Schema.from_dict(spec, name=str(name))
                for name, spec in data.items()
            }
        )

    def register(self, schema: Schema, name: str | None = None) -> None:
        """Add or replace a schema, keyed by ``name`` or the schema's own name."""
        self._schemas[name or schema.name] = schema

    def has_schema(self, name: str) -> bool:
        """Check if a schema is registered under exactly ``name``."""
        return name in self._schemas

    def get_schema(self, name: str) -> Schema:
        """Return the schema registered under ``name``."""
        return self._schemas[name]

    def names(self) -> list[str]:
        """Return the registered entity names in registration order."""
        return list(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)
