"""Third resolution phase: choose the action for the focused entity."""

import logging

from route_resolver.action_descriptor import DEFAULT_ACTIONS, ActionDescriptor
from route_resolver.resolution_context import ResolutionContext

logger = logging.getLogger(__name__)


def default_action(context: ResolutionContext) -> ActionDescriptor:
    """Return ``update`` when an id was captured, else ``create``."""
    if context.id != "":
        return DEFAULT_ACTIONS["update"]
    return DEFAULT_ACTIONS["create"]


def find_custom_action(context: ResolutionContext) -> ActionDescriptor | None:
    """Return the focused schema's action named by the head segment, if any."""
    segment = context.head
    if segment is None or context.schema is None:
        return None
    return context.schema.actions.get(segment)


def resolve_action(
    context: ResolutionContext, *, consume_action_segment: bool = True
) -> ResolutionContext:
    """Bind a custom or default action.

    With ``consume_action_segment`` the custom action's segment becomes part
    of the resolved path; otherwise it stays in ``remaining`` and validation
    will reject the route.
    """
    custom = find_custom_action(context)
    if custom is None:
        return context.evolve(action=default_action(context))

    logger.debug("Custom action %s on %s", custom.name, context.name)
    context = context.evolve(action=custom)
    if consume_action_segment:
        context = context.consume()
    return context
