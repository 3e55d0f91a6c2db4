"""Path providers decide where listings and operations are published."""
from __future__ import annotations

import re
from typing import Optional

from .utils.config import documentation_path as _configured_documentation_path

_ADJACENT_SLASHES = re.compile(r"/{2,}")


def collapse_slashes(path: str) -> str:
    return _ADJACENT_SLASHES.sub("/", path)


def join_path(*segments: str) -> str:
    """Join *segments* into an absolute path without duplicate separators."""

    joined = "/".join(segment.strip("/") for segment in segments if segment and segment.strip("/"))
    return collapse_slashes(f"/{joined}")


class PathProvider:
    """Base provider; subclasses choose the application base path."""

    def __init__(self, *, documentation_path: Optional[str] = None) -> None:
        self._documentation_path = documentation_path

    @property
    def application_base_path(self) -> str:
        raise NotImplementedError

    @property
    def documentation_path(self) -> str:
        path = self._documentation_path
        if path is None:
            path = _configured_documentation_path()
        return join_path(path)

    def resource_listing_path(self, group_name: str, api_declaration: str) -> str:
        return join_path(self.documentation_path, group_name, api_declaration)

    def operation_path(self, operation_path: str) -> str:
        base = self.application_base_path
        if base != "/" and (operation_path == base or operation_path.startswith(base + "/")):
            operation_path = operation_path[len(base):]
        return collapse_slashes("/" + operation_path.lstrip("/"))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.application_base_path == other.application_base_path  # type: ignore[attr-defined]
            and self.documentation_path == other.documentation_path  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        return hash((type(self), self.application_base_path, self.documentation_path))


class RelativePathProvider(PathProvider):
    """Paths relative to the mount point of the documented application."""

    def __init__(self, context_path: str = "", *, documentation_path: Optional[str] = None) -> None:
        super().__init__(documentation_path=documentation_path)
        self.context_path = context_path

    @property
    def application_base_path(self) -> str:
        return join_path(self.context_path)


class AbsolutePathProvider(PathProvider):
    """Paths rooted at an explicit application base path."""

    def __init__(self, base_path: str, *, documentation_path: Optional[str] = None) -> None:
        super().__init__(documentation_path=documentation_path)
        self.base_path = base_path

    @property
    def application_base_path(self) -> str:
        return join_path(self.base_path)


__all__ = [
    "AbsolutePathProvider",
    "PathProvider",
    "RelativePathProvider",
    "collapse_slashes",
    "join_path",
]
