"""Data models for entity schemas and their parsing from plain mappings."""

from dataclasses import dataclass, field
from typing import Any

from route_resolver.action_descriptor import ActionDescriptor
from route_resolver.errors import SchemaDefinitionError


@dataclass(frozen=True)
class ModelDescriptor:
    """Describes the store model bound to a schema."""

    name: str | None = None


@dataclass(frozen=True)
class Schema:
    """Represents an entity schema with its actions and child relationships."""

    name: str
    fields: dict[str, Any] = field(default_factory=dict, hash=False)
    actions: dict[str, ActionDescriptor] = field(default_factory=dict, hash=False)
    relationships: tuple["Schema", ...] = ()
    model: ModelDescriptor | None = None

    def find_relationship(self, name: str) -> "Schema | None":
        """Return the first relationship named ``name``, if any."""
        for rel in self.relationships:
            if rel.name == name:
                return rel
        return None

    def has_relationship(self, name: str) -> bool:
        """Check whether ``name`` is one of this schema's relationships."""
        return self.find_relationship(name) is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any], name: str | None = None) -> "Schema":
        """Build a schema tree from a parsed YAML/JSON mapping.

        ``name`` is used when the mapping carries no ``name`` key, which is the
        case for top-level entries keyed by entity name.
        """
        if not isinstance(data, dict):
            msg = f"Schema definition for {name!r} must be a mapping"
            raise SchemaDefinitionError(msg)

        schema_name = data.get("name") or name
        if not schema_name:
            msg = "Schema definition is missing a name"
            raise SchemaDefinitionError(msg)
        schema_name = str(schema_name)

        relationships = []
        for rel in data.get("relationships") or []:
            if not isinstance(rel, dict) or not rel.get("name"):
                msg = f"Relationship of {schema_name!r} must be a mapping with a name"
                raise SchemaDefinitionError(msg)
            relationships.append(cls.from_dict(rel))

        return cls(
            name=schema_name,
            fields=dict(data.get("fields") or {}),
            actions=_parse_actions(schema_name, data.get("actions")),
            relationships=tuple(relationships),
            model=_parse_model(data.get("model")),
        )


def _parse_actions(
    schema_name: str, raw: dict[str, Any] | None
) -> dict[str, ActionDescriptor]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"Actions of {schema_name!r} must be a mapping"
        raise SchemaDefinitionError(msg)

    actions: dict[str, ActionDescriptor] = {}
    for key, value in raw.items():
        spec = value or {}
        if isinstance(spec, ActionDescriptor):
            actions[str(key)] = spec
            continue
        if not isinstance(spec, dict):
            msg = f"Action {key!r} of {schema_name!r} must be a mapping"
            raise SchemaDefinitionError(msg)
        # Schema files written for the JS store use camelCase
        need_fetch = spec.get("needFetch", spec.get("need_fetch", False))
        actions[str(key)] = ActionDescriptor(
            name=str(spec.get("name") or key), need_fetch=bool(need_fetch)
        )
    return actions


def _parse_model(raw: object) -> ModelDescriptor | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return ModelDescriptor(name=raw)
    if isinstance(raw, dict):
        name = raw.get("name")
        return ModelDescriptor(name=str(name) if name else None)
    msg = f"Model must be a name or a mapping, got {type(raw).__name__}"
    raise SchemaDefinitionError(msg)
