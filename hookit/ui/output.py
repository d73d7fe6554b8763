"""Rendering for hook point listings and execution outcomes."""

from typing import Any, Optional

from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from ..handler import TaggedResult
from ..manager import HookOutcome
from .theme import MODE_STYLES, PALETTE, console as default_console


def render_error(text: str, console: Optional[Console] = None) -> None:
    """Render an error message."""
    err = Text()
    err.append("err ", style=f"bold {PALETTE.error}")
    err.append("| ", style=f"dim {PALETTE.text_muted}")
    err.append(text, style=PALETTE.error)
    (console or default_console).print(err)


def render_hook_table(hooks: list[dict], console: Optional[Console] = None) -> None:
    """Show registered hook points as a table.

    Takes the dicts produced by HookManager.describe().
    """
    console = console or default_console
    if not hooks:
        console.print("No hook points registered.", style="dim")
        return

    table = Table(border_style=PALETTE.border, header_style=f"bold {PALETTE.text_bright}")
    table.add_column("hook")
    table.add_column("mode")
    table.add_column("resolver", style=PALETTE.text_dim)
    table.add_column("handlers", justify="right")
    table.add_column("origins", style=PALETTE.origin)

    for hook in hooks:
        table.add_row(
            hook["name"],
            Text(hook["mode"], style=MODE_STYLES.get(hook["mode"], PALETTE.text)),
            hook["resolver"],
            str(hook["handlers"]),
            ", ".join(hook["origins"]) or "-",
        )

    console.print(table)


def _plain(value: Any) -> Any:
    if isinstance(value, TaggedResult):
        return value.as_dict()
    if isinstance(value, HookOutcome):
        return {"results": _plain(value.results), "errors": [repr(e) for e in value.errors]}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def render_outcome(name: str, value: Any, console: Optional[Console] = None) -> None:
    """Render the resolved value of a hook execution.

    When the value is a HookOutcome (identity resolver) its handler errors
    are listed under the results.
    """
    console = console or default_console

    title = Text()
    title.append(name, style=f"bold {PALETTE.accent}")
    title.append(" resolved", style=f"dim {PALETTE.text}")
    console.print(title)

    if isinstance(value, HookOutcome):
        console.print(Pretty(_plain(value.results)))
        for error in value.errors:
            render_error(f"{type(error).__name__}: {error}", console=console)
        return

    console.print(Pretty(_plain(value)))
