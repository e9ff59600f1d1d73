"""Final check that a route was consumed completely."""

import logging

from route_resolver.errors import UnresolvedPathError
from route_resolver.resolution_context import ResolutionContext

logger = logging.getLogger(__name__)


def validate_resolution(context: ResolutionContext) -> bool:
    """Return True for a fully consumed route, else raise UnresolvedPathError."""
    if not context.is_exhausted:
        logger.warning(
            "Route %s stopped at %s", context.path, ".".join(context.remaining)
        )
        raise UnresolvedPathError(context)
    return True
