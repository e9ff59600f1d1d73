"""Fourth resolution phase: derive the wire endpoint and the store alias."""

from route_resolver.component import Component
from route_resolver.resolution_context import ResolutionContext


def derive_endpoint(path: str) -> str:
    """Turn a dot-delimited resolved path into a slash-delimited endpoint."""
    return path.replace(".", "/")


def derive_alias(endpoint: str, component: Component | None) -> str:
    """Prefer the component's model name, else hyphenate the endpoint."""
    if component is not None and component.model_name:
        return component.model_name
    return endpoint.replace("/", "-")


def apply_endpoint(context: ResolutionContext) -> ResolutionContext:
    """Set ``endpoint`` and ``alias`` on the context."""
    endpoint = derive_endpoint(context.path)
    return context.evolve(
        endpoint=endpoint, alias=derive_alias(endpoint, context.component)
    )
