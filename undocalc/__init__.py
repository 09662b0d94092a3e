"""undocalc — integer calculator built on the command/undo pattern.

Holds one integer result and a stack of applied operations. Commands are
typed as comma-separated batches and each one can be undone once.

Usage:
    python -m undocalc 1
    > increment, increment, double, undo
"""

from undocalc.calculator import Calculator, split_batch
from undocalc.models import NoHistoryError, OpKind, Operation, UnknownCommandError

__all__ = [
    "Calculator",
    "NoHistoryError",
    "OpKind",
    "Operation",
    "UnknownCommandError",
    "split_batch",
]
