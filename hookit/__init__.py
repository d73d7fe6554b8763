"""Hookit - named hook registry and execution engine."""

__version__ = "0.1.0"

from .errors import (
    EHOOKCONFIG,
    EHOOKEXISTS,
    ENOHOOK,
    HookConfigError,
    HookError,
    HookExistsError,
    NoHookError,
)
from .handler import DEFAULT_ORIGIN, Handler, TaggedResult
from .manager import HookManager, HookMode, HookOutcome, HookPoint, identity_resolver

__all__ = [
    "DEFAULT_ORIGIN",
    "EHOOKCONFIG",
    "EHOOKEXISTS",
    "ENOHOOK",
    "Handler",
    "HookConfigError",
    "HookError",
    "HookExistsError",
    "HookManager",
    "HookMode",
    "HookOutcome",
    "HookPoint",
    "NoHookError",
    "TaggedResult",
    "identity_resolver",
]
