"""Central UI handler for LintBase.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from lintbase.ui import console, print_warning

    console.print("[success]Scan complete[/success]")
    print_warning("Report not saved")

Output is ASCII only: no emoji or box-drawing glyphs, so Windows CP1252
terminals render it.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

LINTBASE_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "brand": "bold magenta",
    "rule_id": "magenta",
    "collection": "bold white",
    "dim": "dim white",
    "critical": "bold red",
    "high": "bold dark_orange",
    "medium": "bold yellow",
    "low": "bold green",
})

# stdout console for reports; stderr console for diagnostics
console = Console(theme=LINTBASE_THEME, force_terminal=sys.stdout.isatty())
err_console = Console(theme=LINTBASE_THEME, stderr=True)


def print_warning(msg: str) -> None:
    """Print a warning message in yellow on stderr."""
    err_console.print(f"[warning]WARNING:[/warning] {escape(msg)}", highlight=False)


def print_status(msg: str, json_mode: bool = False) -> None:
    """Progress line; routed to stderr when stdout carries JSON."""
    target = err_console if json_mode else console
    target.print(f"[dim]{escape(msg)}[/dim]", highlight=False)
