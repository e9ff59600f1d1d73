"""Components bound to a resolved route and the factory that builds them."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from route_resolver.resolution_context import ResolutionContext
    from route_resolver.schema import ModelDescriptor


class ComponentKind(Enum):
    """Flavor of component a caller asks the factory for."""

    COMPONENT = "component"
    FORM = "form"


@dataclass(frozen=True)
class Component:
    """A store-facing component: where its state lives and which model it uses."""

    kind: ComponentKind
    root: str  # storage prefix in the owning store
    model: "ModelDescriptor | None" = None

    @property
    def has_model(self) -> bool:
        """Check if the component is backed by a named store model."""
        return self.model is not None

    @property
    def model_name(self) -> str | None:
        """Return the model name, if the component has one."""
        return self.model.name if self.model is not None else None


class ComponentFactory(Protocol):
    """Builds the component for a resolution context."""

    def build(self, context: "ResolutionContext", kind: ComponentKind) -> Component:
        """Return the component for ``context``."""
        ...


DEFAULT_ROOTS: dict[ComponentKind, str] = {
    ComponentKind.COMPONENT: "components",
    ComponentKind.FORM: "forms",
}


class DefaultComponentFactory:
    """Factory that roots each component kind under a configured prefix."""

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Read the per-kind storage roots from ``components.roots``."""
        roots = ((config or {}).get("components") or {}).get("roots") or {}
        self.roots = {
            kind: str(roots.get(kind.value, default))
            for kind, default in DEFAULT_ROOTS.items()
        }

    def build(self, context: "ResolutionContext", kind: ComponentKind) -> Component:
        """Build a component carrying the focused schema's model."""
        model = context.schema.model if context.schema is not None else None
        return Component(kind=kind, root=self.roots[kind], model=model)
