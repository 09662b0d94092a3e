"""Calculator state machine: apply, undo and batch execution.

Holds a single integer result and a LIFO history of applied operations.
Each token in a batch runs against the result left by the previous token:
1. Split the input line into lower-cased, trimmed, non-empty tokens
2. Map each token to an Operation (RandomAdd samples its delta here)
3. Apply it, or pop and restore for undo
4. Record a StepResult; errors are captured and the batch continues
"""

from __future__ import annotations

import random
from typing import Iterator, Optional

from undocalc.models import (
    CalculatorError,
    NoHistoryError,
    OpKind,
    Operation,
    StepResult,
    UnknownCommandError,
)

COMMANDS = [k.value for k in OpKind]


def evaluate(kind: OpKind, delta: int, current: int) -> int:
    """Compute the new result for a non-undo operation."""
    if kind == OpKind.INCREMENT:
        return current + 1
    if kind == OpKind.DECREMENT:
        return current - 1
    if kind == OpKind.DOUBLE:
        return current * 2
    if kind == OpKind.RANDADD:
        return current + delta
    raise ValueError(f"{kind.value} has no forward evaluation")


def apply(op: Operation, current: int) -> int:
    """Apply ``op`` to ``current``, recording the prior value on the op."""
    new = evaluate(op.kind, op.delta, current)
    op.prior_value = current
    return new


def split_batch(line: str) -> list[str]:
    """Split a comma-separated input line into command tokens.

    'Increment , ,DOUBLE ' → ['increment', 'double']
    """
    tokens = (raw.strip() for raw in line.strip().lower().split(","))
    return [t for t in tokens if t]


class Calculator:
    """Integer result plus the history of operations eligible for undo."""

    def __init__(self, initial: int = 0, rng: Optional[random.Random] = None) -> None:
        self.result = initial
        self.history: list[Operation] = []
        self._rng = rng or random.Random()

    def create(self, token: str) -> Operation:
        """Map a command token to a fresh Operation.

        Raises:
            UnknownCommandError: token is not one of COMMANDS.
        """
        try:
            kind = OpKind(token)
        except ValueError:
            raise UnknownCommandError(token) from None
        return Operation.create(kind, self._rng)

    def apply(self, op: Operation) -> int:
        """Apply an operation and push it onto the history."""
        if op.kind == OpKind.UNDO:
            return self.undo()
        self.result = apply(op, self.result)
        self.history.append(op)
        return self.result

    def undo(self) -> int:
        """Pop the last operation and restore the result it saw.

        Raises:
            NoHistoryError: history is empty. The result is unchanged.
        """
        if not self.history:
            raise NoHistoryError()
        op = self.history.pop()
        self.result = op.prior_value
        return self.result

    def execute(self, token: str) -> int:
        return self.apply(self.create(token))

    def run_batch(self, line: str) -> Iterator[StepResult]:
        """Execute every token in ``line`` in order, yielding one StepResult each.

        Recoverable errors are reported in the StepResult rather than raised,
        so later tokens in the same batch still run.
        """
        for token in split_batch(line):
            try:
                result = self.execute(token)
            except CalculatorError as e:
                yield StepResult(token=token, error=e)
                continue
            yield StepResult(token=token, result=result)
