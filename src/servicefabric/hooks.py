"""Per-operation hooks around gateway calls.

Hooks are registered under an operation key (``applications.create``), a
group pattern (``mesh.*``, ``mesh.secrets.*``) or ``*`` for every call, and
run broadest pattern first.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .protocols import AsyncHookMiddleware, SyncHookMiddleware

_STAGES = ("before", "after", "error")


@dataclass(slots=True)
class RequestCall:
    """The call a hook observes. ``query`` already includes ``api-version``."""

    operation: str
    method: str
    path: str
    query: dict[str, Any] | None = None
    json_body: Any | None = None
    content: bytes | None = None
    headers: dict[str, str] | None = None
    api_version: str | None = None

    @property
    def group(self) -> str:
        return self.operation.split(".", 1)[0]


BeforeHook = Callable[[RequestCall], None | Awaitable[None]]
AfterHook = Callable[[RequestCall, Any], None | Awaitable[None]]
ErrorHook = Callable[[RequestCall, Exception], None | Awaitable[None]]


def _patterns(operation: str) -> Iterator[str]:
    yield "*"
    parts = operation.split(".")
    for depth in range(1, len(parts)):
        yield ".".join(parts[:depth]) + ".*"
    yield operation


@dataclass(slots=True)
class HookRegistry:
    _hooks: dict[str, dict[str, list[Callable[..., Any]]]] = field(
        default_factory=lambda: {stage: {} for stage in _STAGES}
    )

    def _add(self, stage: str, operation: str, hook: Callable[..., Any]) -> None:
        self._hooks[stage].setdefault(operation, []).append(hook)

    def add_before(self, operation: str, hook: BeforeHook) -> None:
        self._add("before", operation, hook)

    def add_after(self, operation: str, hook: AfterHook) -> None:
        self._add("after", operation, hook)

    def add_error(self, operation: str, hook: ErrorHook) -> None:
        self._add("error", operation, hook)

    def add_middleware(self, operation: str, middleware: SyncHookMiddleware | AsyncHookMiddleware) -> None:
        hooks: dict[str, Callable[..., Any]] = {}
        for stage, name in zip(_STAGES, ("before", "after", "on_error")):
            hook = getattr(middleware, name, None)
            if not callable(hook):
                raise TypeError(f"hook middleware must provide callable {name}()")
            hooks[stage] = hook
        for stage, hook in hooks.items():
            self._add(stage, operation, hook)

    def matching(self, stage: str, operation: str) -> list[Callable[..., Any]]:
        registered = self._hooks[stage]
        return [hook for pattern in _patterns(operation) for hook in registered.get(pattern, ())]

    def _fire(self, stage: str, call: RequestCall, *args: Any) -> None:
        for hook in self.matching(stage, call.operation):
            result = hook(call, *args)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(f"sync clients cannot execute async {stage} hooks")

    async def _fire_async(self, stage: str, call: RequestCall, *args: Any) -> None:
        for hook in self.matching(stage, call.operation):
            result = hook(call, *args)
            if inspect.isawaitable(result):
                await result

    def run_before(self, call: RequestCall) -> None:
        self._fire("before", call)

    def run_after(self, call: RequestCall, response: Any) -> None:
        self._fire("after", call, response)

    def run_error(self, call: RequestCall, error: Exception) -> None:
        self._fire("error", call, error)

    async def run_before_async(self, call: RequestCall) -> None:
        await self._fire_async("before", call)

    async def run_after_async(self, call: RequestCall, response: Any) -> None:
        await self._fire_async("after", call, response)

    async def run_error_async(self, call: RequestCall, error: Exception) -> None:
        await self._fire_async("error", call, error)


class LoggingMiddleware:
    """Logs each gateway call, and failures at WARNING."""

    def __init__(self, logger: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def before(self, call: RequestCall) -> None:
        self._logger.log(self._level, "calling %s %s %s", call.operation, call.method, call.path)

    def after(self, call: RequestCall, response: Any) -> None:
        self._logger.log(self._level, "completed %s", call.operation)

    def on_error(self, call: RequestCall, error: Exception) -> None:
        self._logger.warning("%s failed: %s", call.operation, error)
