"""A single function attached to a hook point.

Handlers may be plain functions, coroutine functions, or functions that
return some other awaitable. ``run_raw`` folds all three into one coroutine
so the engine can await every handler the same way.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_ORIGIN = "default"

HandlerFn = Callable[..., Any]


@dataclass(frozen=True)
class TaggedResult:
    """A successful handler result labelled with who produced it.

    The origin lets resolvers detect collisions between plugins, e.g. two
    plugins contributing the same key can be namespaced as
    ``f"{origin}-{key}"``.
    """

    origin: str
    result: Any

    def as_dict(self) -> dict[str, Any]:
        return {"from": self.origin, "result": self.result}


@dataclass(frozen=True)
class Handler:
    """A registered function and the origin that registered it."""

    fn: HandlerFn
    origin: str = DEFAULT_ORIGIN

    async def run_raw(self, *args: Any) -> Any:
        """Call ``fn`` and await its result if it returned an awaitable.

        Exceptions raised by the call itself surface when the returned
        coroutine is awaited, never when ``run_raw`` is called.
        """
        result = self.fn(*args)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def run_tagged(self, *args: Any) -> TaggedResult:
        """Like ``run_raw`` but wrap a successful value in a TaggedResult."""
        result = await self.run_raw(*args)
        return TaggedResult(origin=self.origin, result=result)
