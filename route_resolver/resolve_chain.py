"""Second resolution phase: walk relationship and id segments."""

import logging
from enum import Enum

from route_resolver.is_valid_id import is_valid_id
from route_resolver.parent_link import ParentLink
from route_resolver.resolution_context import ResolutionContext

logger = logging.getLogger(__name__)


class ChainState(Enum):
    """States of the chain scanner."""

    SCANNING = "scanning"
    STOPPED = "stopped"


def step_chain(context: ResolutionContext) -> tuple[ChainState, ResolutionContext]:
    """Consume at most one segment and report whether scanning may continue.

    A relationship name of the focused schema takes priority over the id
    predicate, so a relationship called ``1`` is still entered.
    """
    segment = context.head
    if segment is None or context.schema is None:
        return ChainState.STOPPED, context

    child = context.schema.find_relationship(segment)
    if child is not None:
        parent = ParentLink(schema=context.schema, name=context.name, id=context.id)
        logger.debug("Entering relationship %s from %s", segment, context.name)
        return ChainState.SCANNING, context.evolve(
            parents=(*context.parents, parent),
            schema=child,
            name=segment,
            id="",
        ).consume()

    if is_valid_id(segment):
        return ChainState.SCANNING, context.evolve(id=segment).consume()

    return ChainState.STOPPED, context


def resolve_chain(context: ResolutionContext) -> ResolutionContext:
    """Consume relationship and id segments until one matches neither."""
    state = ChainState.SCANNING
    while state is ChainState.SCANNING:
        state, context = step_chain(context)
    return context
