"""Timing spans for ``--verbose``.

``@traced`` opens a root span around a service operation and attaches the
finished span tree to ``ServiceResult.meta["telemetry"]``. ``trace_span``
opens a child of whatever span is active. Both do nothing unless
:func:`enable_telemetry` was called.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog

from roverctl.services.result import ServiceResult

log = structlog.get_logger("roverctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    name: str
    started: float = field(default_factory=time.perf_counter)
    elapsed_ms: float = 0.0
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.elapsed_ms, 2)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.elapsed_ms = (time.perf_counter() - span.started) * 1000
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a block as a child of the active span; yields None when not tracing."""
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name)
    parent.children.append(child)
    with _activate(child):
        yield child


def traced(func: Callable[..., ServiceResult]) -> Callable[..., ServiceResult]:
    """Wrap a service method so its ServiceResult carries a span tree in ``meta``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> ServiceResult:
        if not _enabled.get():
            return func(*args, **kwargs)
        with _activate(Span(func.__qualname__)) as span:
            result = func(*args, **kwargs)
        log.debug("span.complete", span_name=span.name, duration_ms=round(span.elapsed_ms, 2))
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
