"""Error types for the hook engine.

Every error carries a stable ``code`` callers can branch on and the name
of the offending hook.
"""

from typing import Optional

ENOHOOK = "ENOHOOK"
EHOOKEXISTS = "EHOOKEXISTS"
EHOOKCONFIG = "EHOOKCONFIG"


class HookError(Exception):
    """Base class for hook engine errors."""

    code: str = ""

    def __init__(self, message: str, hook: Optional[str] = None):
        super().__init__(message)
        self.hook = hook


class NoHookError(HookError):
    """Raised when a hook name does not resolve to a registered hook point."""

    code = ENOHOOK

    def __init__(self, hook: str):
        super().__init__(f"Hook {hook} doesn't exist", hook=hook)


class HookExistsError(HookError):
    """Raised when registering a hook name that is already taken."""

    code = EHOOKEXISTS

    def __init__(self, hook: str):
        super().__init__(f"Hook {hook} is already registered", hook=hook)


class HookConfigError(HookError):
    """Raised when a declarative hook or plugin entry cannot be wired up."""

    code = EHOOKCONFIG
