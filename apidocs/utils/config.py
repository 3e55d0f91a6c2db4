"""Runtime configuration helpers for documentation scans."""
from __future__ import annotations

import os
from typing import Final


DEFAULT_GROUP_NAME: Final[str] = "default"
DEFAULT_DOCUMENTATION_PATH: Final[str] = "/"

_POSITION_POLICIES: Final[frozenset[str]] = frozenset({"min", "first"})


def _parse_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    return value in {"1", "true", "yes", "on"}


def _env_bool(name: str, *, default: bool = False) -> bool:
    return _parse_bool(os.getenv(name), default=default)


def documentation_path() -> str:
    """Root under which resource listings are published."""

    value = os.getenv("APIDOCS_DOCUMENTATION_PATH", "").strip()
    return value or DEFAULT_DOCUMENTATION_PATH


def concurrent_scans() -> bool:
    """Whether the reference and listing scans run on separate threads."""

    return _env_bool("APIDOCS_CONCURRENT_SCANS", default=False)


def position_policy_name() -> str:
    """Name of the rule picking a merged entry's position (``min`` or ``first``)."""

    value = os.getenv("APIDOCS_POSITION_POLICY", "").strip().lower()
    if value in _POSITION_POLICIES:
        return value
    return "min"


__all__ = [
    "DEFAULT_DOCUMENTATION_PATH",
    "DEFAULT_GROUP_NAME",
    "concurrent_scans",
    "documentation_path",
    "position_policy_name",
]
