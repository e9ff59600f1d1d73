"""First resolution phase: bind the root segment to a registered schema."""

import logging

from route_resolver.errors import SchemaNotFoundError
from route_resolver.resolution_context import ResolutionContext
from route_resolver.schema_registry import SchemaRegistry

logger = logging.getLogger(__name__)


def resolve_base(
    context: ResolutionContext, registry: SchemaRegistry
) -> ResolutionContext:
    """Consume the first segment as the root entity.

    Raises SchemaNotFoundError when the registry has no schema under that
    exact name.
    """
    name = context.head or ""
    if not registry.has_schema(name):
        raise SchemaNotFoundError(name)

    logger.debug("Bound root entity %s", name)
    return context.evolve(schema=registry.get_schema(name), name=name).consume()
