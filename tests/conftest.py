"""Shared fixtures for route resolution tests."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from route_resolver.schema_registry import InMemorySchemaRegistry

SCHEMAS: dict[str, Any] = {
    "users": {
        "fields": {"email": {"type": "string"}},
        "relationships": [
            {
                "name": "posts",
                "actions": {
                    "create": {"needFetch": False},
                    "publish": {"needFetch": True},
                },
                "relationships": [{"name": "comments"}],
            },
            {"name": "roles"},
        ],
    },
    "widgets": {"model": {"name": "Widget"}},
    "tags": {"actions": {"merge": {"need_fetch": True}}},
}


@pytest.fixture
def registry() -> InMemorySchemaRegistry:
    """Fixture providing a small registry of users, widgets and tags."""
    return InMemorySchemaRegistry.from_dict(SCHEMAS)


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """Fixture writing the same schemas to a YAML file."""
    path = tmp_path / "schemas.yml"
    path.write_text(yaml.dump({"schemas": SCHEMAS}), encoding="utf-8")
    return path
