"""Data models for the undocalc calculator.

OpKind enum, Operation, StepResult and the two recoverable error types: the
typed structures that flow through calculator → repl → CLI.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# RandomAdd draws its delta from this inclusive range.
RANDADD_MIN = 1
RANDADD_MAX = 10


class OpKind(str, Enum):
    """Supported commands. Values are the tokens typed at the prompt."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    DOUBLE = "double"
    RANDADD = "randadd"
    UNDO = "undo"


class CalculatorError(Exception):
    """Base for recoverable calculator errors."""


class UnknownCommandError(CalculatorError):
    """A batch token did not name a supported command."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown command: {token}")
        self.token = token


class NoHistoryError(CalculatorError):
    """Undo was requested with nothing on the history stack."""

    def __init__(self) -> None:
        super().__init__("No command to undo.")


@dataclass
class Operation:
    """One reversible step.

    ``delta`` is only meaningful for RANDADD and is fixed when the operation
    is created. ``prior_value`` is filled in at apply time and is what undo
    restores.
    """

    kind: OpKind
    delta: int = 0
    prior_value: Optional[int] = None

    @classmethod
    def create(cls, kind: OpKind, rng: Optional[random.Random] = None) -> Operation:
        """Build an operation, sampling the RandomAdd delta if needed."""
        if kind == OpKind.RANDADD:
            rng = rng or random.Random()
            return cls(kind=kind, delta=rng.randint(RANDADD_MIN, RANDADD_MAX))
        return cls(kind=kind)

    @property
    def applied(self) -> bool:
        return self.prior_value is not None


@dataclass
class StepResult:
    """Outcome of a single token within a batch."""

    token: str
    result: Optional[int] = None
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
