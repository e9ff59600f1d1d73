"""Orchestration of the route resolution phases."""

import logging
from typing import Any

from route_resolver.component import (
    ComponentFactory,
    ComponentKind,
    DefaultComponentFactory,
)
from route_resolver.derive_endpoint import apply_endpoint
from route_resolver.resolution_context import ResolutionContext
from route_resolver.resolve_action import resolve_action
from route_resolver.resolve_base import resolve_base
from route_resolver.resolve_chain import resolve_chain
from route_resolver.resolved_route import ResolvedRoute
from route_resolver.schema_registry import SchemaRegistry
from route_resolver.validate_resolution import validate_resolution

logger = logging.getLogger(__name__)


class RouteResolver:
    """Resolves dot-delimited routes against a schema registry.

    The resolver holds no per-route state, so one instance can serve many
    routes (and threads) as long as the registry is not mutated meanwhile.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        factory: ComponentFactory | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Bind the registry, the component factory and resolution options."""
        self.registry = registry
        self.config = config or {}
        self.factory = factory or DefaultComponentFactory(self.config)
        resolution = self.config.get("resolution") or {}
        self.consume_action_segment = bool(
            resolution.get("consume_action_segment", True)
        )

    def resolve_context(
        self, path: str, kind: ComponentKind = ComponentKind.COMPONENT
    ) -> ResolutionContext:
        """Run every phase and return the context without validating it.

        Useful for diagnostics: leftover segments stay in ``remaining``.
        """
        context = ResolutionContext.for_path(path)
        context = resolve_base(context, self.registry)
        context = resolve_chain(context)
        context = resolve_action(
            context, consume_action_segment=self.consume_action_segment
        )
        context = context.evolve(component=self.factory.build(context, kind))
        return apply_endpoint(context)

    def resolve(
        self, path: str, kind: ComponentKind = ComponentKind.COMPONENT
    ) -> ResolvedRoute:
        """Resolve and validate a route.

        Raises SchemaNotFoundError for an unknown root entity and
        UnresolvedPathError when segments are left over.
        """
        context = self.resolve_context(path, kind)
        validate_resolution(context)
        logger.debug("Resolved %s -> %s (%s)", path, context.endpoint, context.alias)
        return ResolvedRoute.from_context(context)
