"""Validate configuration mappings against the packaged JSON schemas."""
from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List, Mapping

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from referencing import Registry, Resource

CONFIG_SCHEMA = "docket.v1.json"

_SCHEMA_PACKAGE = "apidocs.schemas"


def _read_schemas() -> Dict[str, Dict[str, Any]]:
    schemas: Dict[str, Dict[str, Any]] = {}
    for entry in resources.files(_SCHEMA_PACKAGE).iterdir():
        if not entry.name.endswith(".json"):
            continue
        with entry.open("r", encoding="utf-8") as handle:
            schemas[entry.name] = json.load(handle)
    return schemas


@lru_cache(maxsize=None)
def _validator(name: str) -> Draft202012Validator:
    schemas = _read_schemas()
    registry: Registry = Registry().with_resources(
        (contents["$id"], Resource.from_contents(contents))
        for contents in schemas.values()
        if "$id" in contents
    )
    return Draft202012Validator(schemas[name], registry=registry)


def _describe(error: ValidationError) -> str:
    return f"{error.json_path}: {error.message}"


def config_errors(config: Mapping[str, Any], *, schema: str = CONFIG_SCHEMA) -> List[str]:
    """Return every violation of *schema* in *config*, ordered by location."""

    errors = sorted(_validator(schema).iter_errors(dict(config)), key=lambda error: error.json_path)
    return [_describe(error) for error in errors]


def validate_config(config: Mapping[str, Any], *, schema: str = CONFIG_SCHEMA) -> Dict[str, Any]:
    """Return *config* as a plain dict, or raise ``ValueError`` naming each violation."""

    data = dict(config)
    errors = config_errors(data, schema=schema)
    if errors:
        raise ValueError("; ".join(errors))
    return data


__all__ = ["CONFIG_SCHEMA", "config_errors", "validate_config"]
