"""Data model for an ancestor entity in a resolved route."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from route_resolver.schema import Schema


@dataclass(frozen=True)
class ParentLink:
    """Snapshot of the focused entity taken when a relationship is crossed."""

    schema: "Schema"
    name: str
    id: str  # empty when the parent was addressed without an id
