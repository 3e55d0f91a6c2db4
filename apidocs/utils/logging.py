"""Logging helpers for documentation scans."""
from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import monotonic
from typing import Dict, Iterator, Mapping, Optional

import contextvars


_SCAN_CONTEXT: contextvars.ContextVar["ScanScope | None"] = contextvars.ContextVar(
    "apidocs_scan_scope", default=None
)


@contextmanager
def scoped_timer(
    logger: logging.Logger, message: str, *, extra: Optional[Dict[str, object]] = None
) -> Iterator[None]:
    start = monotonic()
    try:
        yield
    finally:
        elapsed = monotonic() - start
        logger.debug("%s", message, extra={"duration_s": elapsed, **(extra or {})})


@dataclass(slots=True)
class ScanScope:
    """Structured logging context for a single documentation scan."""

    name: str
    scan_id: str
    logger: logging.Logger
    metadata: Dict[str, object] = field(default_factory=dict)
    counters: Dict[str, int] = field(default_factory=dict)
    start_time: float = field(default_factory=monotonic)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def extra(self, **values: object) -> Dict[str, object]:
        payload = {"scan_id": self.scan_id, "scan": self.name, **self.metadata}
        payload.update(values)
        return payload

    def log(
        self, level: int, message: str, *, extra: Optional[Mapping[str, object]] = None
    ) -> None:
        payload = self.extra(**(dict(extra) if extra else {}))
        self.logger.log(level, message, extra=payload)

    def increment(self, counter: str, amount: int = 1) -> int:
        with self._lock:
            value = self.counters.get(counter, 0) + amount
            self.counters[counter] = value
        self.logger.debug(
            "counter.%s", counter, extra=self.extra(counter=counter, value=value)
        )
        return value


@contextmanager
def scan_scope(
    name: str,
    *,
    logger: Optional[logging.Logger] = None,
    extra: Optional[Mapping[str, object]] = None,
) -> Iterator[ScanScope]:
    """Create a structured logging scope for one scan invocation.

    Scopes nest: the scanners invoked by the documentation scanner run inside
    the outer scope and share its counters.
    """

    outer = _SCAN_CONTEXT.get(None)
    if outer is not None:
        yield outer
        return

    logger = logger or logging.getLogger("apidocs.scan")
    scope = ScanScope(
        name=name,
        scan_id=str(uuid.uuid4()),
        logger=logger,
        metadata=dict(extra or {}),
    )
    token = _SCAN_CONTEXT.set(scope)
    scope.log(logging.INFO, "scan.start")
    try:
        with scoped_timer(logger, f"{name}.duration", extra=scope.extra(event="timer")):
            yield scope
    except Exception:
        logger.exception("scan.error", extra=scope.extra())
        raise
    finally:
        duration = monotonic() - scope.start_time
        scope.log(
            logging.INFO,
            "scan.finish",
            extra={"duration_s": duration, "counters": dict(scope.counters)},
        )
        _SCAN_CONTEXT.reset(token)


__all__ = [
    "ScanScope",
    "scan_scope",
    "scoped_timer",
]
