"""CLI for the undocalc command/undo calculator.

Usage:
    python -m undocalc 5                  # Start at 5, read commands from stdin
    undocalc -3                           # Negative starting values are fine
    UNDOCALC_SEED=42 undocalc 0           # Reproducible randadd deltas
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console

from undocalc.calculator import Calculator
from undocalc.environment import load_settings
from undocalc.repl import run_repl

USAGE = "Usage: undocalc <initial_value>"

app = typer.Typer(
    name="undocalc",
    help="Integer calculator with single-level undo",
    add_completion=False,
)
console = Console(highlight=False, soft_wrap=True)


def _parse_initial(args: Optional[List[str]]) -> Optional[int]:
    """Return the starting value, or None if the arguments are unusable."""
    if not args or len(args) != 1:
        return None
    try:
        return int(args[0].strip())
    except ValueError:
        return None


# Unknown options pass through so "-5" reaches us as a value, not a flag.
@app.command(context_settings={"ignore_unknown_options": True})
def cmd_main(
    args: Optional[List[str]] = typer.Argument(
        None, metavar="INITIAL_VALUE", help="Integer starting value",
    ),
) -> None:
    """Start the interactive calculator at INITIAL_VALUE."""
    initial = _parse_initial(args)
    if initial is None:
        console.print(USAGE, markup=False)
        raise typer.Exit(1)

    settings = load_settings()
    calc = Calculator(initial, rng=settings.make_rng())
    run_repl(calc, console, settings)


if __name__ == "__main__":
    app()
