"""Logic for loading a schema registry from a YAML file."""

from pathlib import Path

import yaml

from route_resolver.errors import SchemaDefinitionError
from route_resolver.schema_registry import InMemorySchemaRegistry


def load_schemas(path: Path) -> InMemorySchemaRegistry:
    """Load and parse a schema file with a top-level ``schemas`` mapping."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"{path}: invalid YAML"
        raise SchemaDefinitionError(msg) from e
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping at the top level"
        raise SchemaDefinitionError(msg)

    schemas = doc.get("schemas") or {}
    if not isinstance(schemas, dict):
        msg = f"{path}: 'schemas' must map entity names to definitions"
        raise SchemaDefinitionError(msg)
    return InMemorySchemaRegistry.from_dict(schemas)
