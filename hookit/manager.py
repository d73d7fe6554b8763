"""Hook registry and execution engine.

Hook points are registered by name with an execution mode and a resolver.
Plugins attach handlers through registerers bound to their origin, and
``execute`` drives the handlers and hands the aggregated outcome to the
resolver.

There are two kinds of hook point:

- sync hooks reduce a value. The first payload argument is the initial
  accumulator and every handler returns the next one, so a handler may get
  data fresh from the caller or data already transformed by an earlier
  handler. Handlers are expected to return something shaped like their
  input.
- async hooks only provide data. Every handler gets the same payload and
  the resolver decides how to combine the origin-tagged results.

Handler failures never stop an execution. They are collected into
``HookOutcome.errors`` and left for the resolver to deal with.
"""

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from .errors import HookExistsError, NoHookError
from .handler import DEFAULT_ORIGIN, Handler, HandlerFn

logger = logging.getLogger(__name__)

Resolver = Callable[..., Any]
Registerer = Callable[[str, HandlerFn], None]


class HookMode(str, Enum):
    """How the handlers of a hook point are driven."""

    SYNC = "sync"
    ASYNC = "async"


def identity_resolver(outcome: Any, *args: Any) -> Any:
    """Default resolver: return the aggregated outcome unchanged."""
    return outcome


@dataclass(frozen=True)
class HookOutcome:
    """Aggregated output of one execution, passed to the resolver.

    Attributes:
        results: Final accumulator (sync) or list of TaggedResult (async).
        errors: Exceptions raised by failing handlers, in handler order.
    """

    results: Any
    errors: list[Exception] = field(default_factory=list)


@dataclass
class HookPoint:
    """A named extension point and the handlers attached to it."""

    name: str
    mode: HookMode = HookMode.ASYNC
    resolver: Resolver = identity_resolver
    handlers: list[Handler] = field(default_factory=list)

    @property
    def sync(self) -> bool:
        return self.mode is HookMode.SYNC


class HookManager:
    """Registry of hook points and the engine that executes them.

    Each manager owns its own hook points, so independent managers can
    coexist in one process.

    Example:
        manager = HookManager()
        manager.register("routes", sync=True)

        register = manager.create_registerer("my-plugin")
        register("routes", lambda routes: [*routes, "/health"])

        outcome = await manager.execute("routes", None, ["/"])
        outcome.results  # ["/", "/health"]
    """

    def __init__(self):
        self._hooks: dict[str, HookPoint] = {}

    def register(
        self,
        name: str,
        sync: bool = False,
        resolver: Optional[Resolver] = None,
    ) -> bool:
        """Register a new hook point.

        Args:
            name: Unique hook name
            sync: True for an accumulating hook, False for an independent one
            resolver: Reduces the HookOutcome (plus resolver args) into the
                final value. Defaults to identity_resolver.

        Returns:
            True once the hook point is registered.

        Raises:
            HookExistsError: If ``name`` is already registered
        """
        if name in self._hooks:
            raise HookExistsError(name)

        mode = HookMode.SYNC if sync else HookMode.ASYNC
        self._hooks[name] = HookPoint(
            name=name,
            mode=mode,
            resolver=resolver or identity_resolver,
        )
        logger.debug("Registered %s hook %s", mode.value, name)
        return True

    def create_registerer(self, origin: str = DEFAULT_ORIGIN) -> Registerer:
        """Return a function that attaches handlers under ``origin``.

        The returned function takes ``(hook_name, fn)`` and raises
        NoHookError if the hook is not registered at call time.
        """

        def register_handler(hook_name: str, fn: HandlerFn) -> None:
            hook_point = self.get_hook_point(hook_name)
            hook_point.handlers.append(Handler(fn, origin))
            logger.debug("Attached handler from %s to hook %s", origin, hook_name)

        return register_handler

    async def execute(
        self,
        name: str,
        resolver_args: Optional[Any] = None,
        *args: Any,
    ) -> Any:
        """Run every handler of a hook point and resolve the outcome.

        Args:
            name: Registered hook name
            resolver_args: Extra positional arguments for the resolver. Any
                falsy value means none.
            *args: Payload. For sync hooks the first element is the initial
                accumulator and the rest are passed to every handler as-is.
                For async hooks every handler gets all of them.

        Returns:
            Whatever the hook's resolver returns.

        Raises:
            NoHookError: If ``name`` is not registered
        """
        hook_point = self.get_hook_point(name)
        handlers = tuple(hook_point.handlers)
        logger.debug(
            "Executing %s hook %s (%d handlers)",
            hook_point.mode.value, name, len(handlers),
        )

        if hook_point.sync:
            outcome = await self._run_sync(handlers, args)
        else:
            outcome = await self._run_async(handlers, args)

        # False and None both mean no resolver args
        extra = list(resolver_args or [])

        resolved = hook_point.resolver(outcome, *extra)
        if inspect.isawaitable(resolved):
            resolved = await resolved
        logger.debug("Executed hook %s", name)
        return resolved

    async def _run_sync(self, handlers: tuple[Handler, ...], args: tuple) -> HookOutcome:
        """Reduce the first payload argument through each handler in turn."""
        constant_args = list(args)
        accumulator = constant_args.pop(0) if constant_args else None
        errors: list[Exception] = []

        for handler in handlers:
            try:
                accumulator = await handler.run_raw(accumulator, *constant_args)
            except Exception as e:
                # A failing handler is a no-op transform
                errors.append(e)

        return HookOutcome(results=accumulator, errors=errors)

    async def _run_async(self, handlers: tuple[Handler, ...], args: tuple) -> HookOutcome:
        """Collect origin-tagged results, one handler at a time."""
        results = []
        errors: list[Exception] = []

        for handler in handlers:
            try:
                results.append(await handler.run_tagged(*args))
            except Exception as e:
                errors.append(e)

        return HookOutcome(results=results, errors=errors)

    def get_hook_point(self, name: str) -> HookPoint:
        """Get a registered hook point by name.

        Raises:
            NoHookError: If ``name`` is not registered
        """
        if name not in self._hooks:
            raise NoHookError(name)
        return self._hooks[name]

    def has_hook(self, name: str) -> bool:
        """Check if a hook point is registered."""
        return name in self._hooks

    def hook_names(self) -> list[str]:
        """List registered hook names in registration order."""
        return list(self._hooks)

    def describe(self) -> list[dict]:
        """Return a summary of all hook points for display."""
        return [
            {
                "name": h.name,
                "mode": h.mode.value,
                "resolver": getattr(h.resolver, "__qualname__", repr(h.resolver)),
                "handlers": len(h.handlers),
                "origins": [handler.origin for handler in h.handlers],
            }
            for h in self._hooks.values()
        ]
