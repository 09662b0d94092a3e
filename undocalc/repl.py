"""Interactive loop for undocalc.

Reads one line at a time, runs it as a batch, and prints one line per token.
Output goes through a Rich Console with markup disabled so user-typed text
is printed verbatim.
"""

from __future__ import annotations

from rich.console import Console

from undocalc.calculator import COMMANDS, Calculator
from undocalc.environment import Settings
from undocalc.models import StepResult


def banner_lines() -> list[str]:
    return [
        f"Supported Commands: {', '.join(COMMANDS)}",
        "Enter single command (e.g., increment) or command sequence "
        "(e.g., increment, decrement, undo)",
    ]


def format_step(step: StepResult) -> str:
    """Render one StepResult as the line shown to the user.

    Errors carry their own user-facing message.
    """
    if step.error is not None:
        return str(step.error)
    return f"After '{step.token}': {step.result}"


def run_repl(calc: Calculator, console: Console, settings: Settings) -> int:
    """Run the read/execute/print loop until end of input.

    Returns the number of batches processed.
    """
    if settings.show_banner:
        for line in banner_lines():
            console.print(line, markup=False, highlight=False)

    batches = 0
    while True:
        try:
            line = console.input(settings.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line.strip():
            continue

        batches += 1
        for step in calc.run_batch(line):
            console.print(format_step(step), markup=False, highlight=False)

    return batches
