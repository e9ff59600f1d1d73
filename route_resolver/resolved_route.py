"""Data model for the outcome of resolving a route."""

from dataclasses import dataclass
from typing import Any

from route_resolver.action_descriptor import ActionDescriptor
from route_resolver.component import Component
from route_resolver.parent_link import ParentLink
from route_resolver.resolution_context import ResolutionContext
from route_resolver.schema import Schema


@dataclass(frozen=True)
class ResolvedRoute:
    """A fully validated route: target schema, parent chain, action and keys."""

    path: str
    endpoint: str
    alias: str
    action: ActionDescriptor
    id: str
    name: str
    parents: tuple[ParentLink, ...]
    schema: Schema
    component: Component

    @classmethod
    def from_context(cls, context: ResolutionContext) -> "ResolvedRoute":
        """Freeze a completed resolution context into a result."""
        schema, action, component = context.schema, context.action, context.component
        if schema is None or action is None or component is None:
            msg = "Resolution context has not been through every phase"
            raise ValueError(msg)
        return cls(
            path=context.path,
            endpoint=context.endpoint,
            alias=context.alias,
            action=action,
            id=context.id,
            name=context.name,
            parents=context.parents,
            schema=schema,
            component=component,
        )

    @property
    def store_path(self) -> str:
        """Path to the state and config resolved for this route."""
        return f"states.{self.alias}"

    @property
    def config_path(self) -> str:
        """Path to the config resolved for this route."""
        return f"{self.component.root}.{self.alias}"

    @property
    def state_path(self) -> str:
        """Path to the state value resolved for this route."""
        return f"{self.component.root}.{self.alias}.value"

    @property
    def source_path(self) -> str:
        """Path to the data source resolved for this route."""
        return f"{self.component.root}.{self.alias}.source"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable summary."""
        return {
            "path": self.path,
            "endpoint": self.endpoint,
            "alias": self.alias,
            "action": {"name": self.action.name, "needFetch": self.action.need_fetch},
            "id": self.id,
            "entity": self.name,
            "parents": [
                {"entity": p.name, "schema": p.schema.name, "id": p.id}
                for p in self.parents
            ],
            "schema": self.schema.name,
            "component": self.component.kind.value,
            "storePath": self.store_path,
            "configPath": self.config_path,
            "statePath": self.state_path,
            "sourcePath": self.source_path,
        }
