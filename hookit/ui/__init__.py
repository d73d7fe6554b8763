"""Terminal UI for the hookit CLI."""

from .output import render_error, render_hook_table, render_outcome
from .theme import PALETTE, console

__all__ = [
    "PALETTE",
    "console",
    "render_error",
    "render_hook_table",
    "render_outcome",
]
