"""Tests for end-to-end route resolution."""

from unittest.mock import MagicMock

import pytest

from route_resolver.component import Component, ComponentKind, DefaultComponentFactory
from route_resolver.errors import SchemaNotFoundError, UnresolvedPathError
from route_resolver.load_config import load_config
from route_resolver.resolution_context import ResolutionContext
from route_resolver.route_resolver import RouteResolver
from route_resolver.schema import ModelDescriptor
from route_resolver.schema_registry import InMemorySchemaRegistry


@pytest.fixture
def resolver(registry: InMemorySchemaRegistry) -> RouteResolver:
    """Fixture providing a resolver with the default configuration."""
    return RouteResolver(registry, config=load_config(None))


def test_nested_custom_action(
    resolver: RouteResolver, registry: InMemorySchemaRegistry
) -> None:
    """Verify the users.5.posts.create scenario end to end."""
    res = resolver.resolve("users.5.posts.create")

    assert [(p.schema, p.name, p.id) for p in res.parents] == [
        (registry.get_schema("users"), "users", "5")
    ]
    assert res.schema is registry.get_schema("users").find_relationship("posts")
    assert res.action.name == "create"
    assert res.endpoint == "users/5/posts/create"
    assert res.alias == "users-5-posts-create"
    assert res.id == ""


def test_unconsumed_action_is_unresolved(registry: InMemorySchemaRegistry) -> None:
    """Verify that leaving the action segment in place fails validation."""
    config = load_config(None)
    config["resolution"]["consume_action_segment"] = False
    resolver = RouteResolver(registry, config=config)

    with pytest.raises(UnresolvedPathError) as exc:
        resolver.resolve("users.5.posts.create")

    partial = exc.value.context
    assert partial.remaining == ("create",)
    assert partial.action is not None
    assert partial.action.name == "create"
    assert partial.endpoint == "users/5/posts"


def test_model_name_is_alias(resolver: RouteResolver) -> None:
    """Verify the widgets.7 scenario: model alias and update action."""
    res = resolver.resolve("widgets.7")

    assert res.alias == "Widget"
    assert res.endpoint == "widgets/7"
    assert res.action.name == "update"
    assert res.action.need_fetch is True
    assert res.component.has_model


def test_storage_paths(resolver: RouteResolver) -> None:
    """Verify the store paths derived from alias and component root."""
    res = resolver.resolve("widgets.7")
    assert res.store_path == "states.Widget"
    assert res.config_path == "components.Widget"
    assert res.state_path == "components.Widget.value"
    assert res.source_path == "components.Widget.source"

    form = resolver.resolve("users.5", ComponentKind.FORM)
    assert form.component.kind is ComponentKind.FORM
    assert form.config_path == "forms.users-5"
    assert not form.component.has_model


def test_unknown_root_raises(resolver: RouteResolver) -> None:
    """Verify that an unregistered first segment raises SchemaNotFoundError."""
    with pytest.raises(SchemaNotFoundError):
        resolver.resolve("ghosts.1")
    with pytest.raises(SchemaNotFoundError):
        resolver.resolve("")


def test_root_lookup_is_exact(resolver: RouteResolver) -> None:
    """Verify that root names are matched exactly, not by prefix or case."""
    with pytest.raises(SchemaNotFoundError):
        resolver.resolve("Users.5")
    with pytest.raises(SchemaNotFoundError):
        resolver.resolve("user.5")


@pytest.mark.parametrize(
    "path",
    [
        "users",
        "users.5",
        "users.5.posts",
        "users.5.posts.8",
        "users.5.posts.8.comments.0",
        "users.posts.comments",
        "users.12.roles.3",
        "users..posts",
    ],
)
def test_round_trip(resolver: RouteResolver, path: str) -> None:
    """Verify that relationship/id paths are consumed exactly as written."""
    ctx = resolver.resolve_context(path)
    assert ctx.path == path
    assert ctx.is_exhausted
    assert resolver.resolve(path).endpoint == path.replace(".", "/")


def test_resolution_is_idempotent(resolver: RouteResolver) -> None:
    """Verify that resolving the same route twice gives identical results."""
    first = resolver.resolve("users.5.posts.9.publish")
    second = resolver.resolve("users.5.posts.9.publish")

    assert first == second
    assert first.action.name == "publish"


@pytest.mark.parametrize(
    ("path", "action"),
    [
        ("users.5", "update"),
        ("users", "create"),
        ("users.5.posts", "create"),
        ("users.5.posts.0", "update"),
        ("tags.3.merge", "merge"),
    ],
)
def test_action_selection(resolver: RouteResolver, path: str, action: str) -> None:
    """Verify default and custom action selection."""
    assert resolver.resolve(path).action.name == action


def test_trailing_garbage_is_unresolved(resolver: RouteResolver) -> None:
    """Verify that unmatched trailing segments fail only at validation."""
    ctx = resolver.resolve_context("users.5.bogus.7")
    assert ctx.remaining == ("bogus", "7")
    assert ctx.endpoint == "users/5"

    with pytest.raises(UnresolvedPathError):
        resolver.resolve("users.5.bogus.7")


def test_custom_factory_is_used(registry: InMemorySchemaRegistry) -> None:
    """Verify that an injected component factory drives the alias and roots."""
    factory = MagicMock()
    factory.build.return_value = Component(
        ComponentKind.FORM, "drafts", ModelDescriptor("Draft")
    )
    resolver = RouteResolver(registry, factory=factory)

    res = resolver.resolve("users.5", ComponentKind.FORM)

    built_ctx, built_kind = factory.build.call_args.args
    assert isinstance(built_ctx, ResolutionContext)
    assert built_ctx.name == "users"
    assert built_kind is ComponentKind.FORM
    assert res.alias == "Draft"
    assert res.state_path == "drafts.Draft.value"


def test_default_factory_reads_configured_roots() -> None:
    """Verify that component roots come from configuration."""
    factory = DefaultComponentFactory({"components": {"roots": {"form": "editors"}}})
    ctx = ResolutionContext(remaining=())

    assert factory.build(ctx, ComponentKind.FORM).root == "editors"
    assert factory.build(ctx, ComponentKind.COMPONENT).root == "components"
    assert factory.build(ctx, ComponentKind.COMPONENT).model is None


def test_to_dict_summary(resolver: RouteResolver) -> None:
    """Verify the JSON summary of a resolved route."""
    summary = resolver.resolve("users.5.posts.9").to_dict()

    assert summary["endpoint"] == "users/5/posts/9"
    assert summary["action"] == {"name": "update", "needFetch": True}
    assert summary["parents"] == [{"entity": "users", "schema": "users", "id": "5"}]
    assert summary["entity"] == "posts"
    assert summary["storePath"] == "states.users-5-posts-9"


def test_builtin_action_segment_needs_declaration(resolver: RouteResolver) -> None:
    """Verify that a built-in action name is only consumed when declared."""
    ctx = resolver.resolve_context("users.create")
    assert ctx.action is not None
    assert ctx.action.name == "create"
    assert ctx.remaining == ("create",)

    with pytest.raises(UnresolvedPathError):
        resolver.resolve("users.create")


@pytest.mark.parametrize("segment", ["٣", "５", "\x1c5"])
def test_non_ascii_digits_stop_the_chain(
    resolver: RouteResolver, segment: str
) -> None:
    """Verify that digits JS cannot coerce are left unresolved, not taken as ids."""
    ctx = resolver.resolve_context(f"users.{segment}")
    assert ctx.id == ""
    assert ctx.remaining == (segment,)

    with pytest.raises(UnresolvedPathError):
        resolver.resolve(f"users.{segment}")
