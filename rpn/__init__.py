"""
RPN - Postfix Integer Evaluator

Evaluates a sequence of text tokens in Reverse Polish Notation over a bounded
operand stack and yields one integer.

Exports:
- evaluate: Evaluate tokens and return the result, raising on bad input
- Executor / ExecutionConfig / ExecutionResult: Configured, non-raising runs
- RPNError and its subclasses: StackOverflow, StackUnderflow,
  MalformedOperand, NumericOverflow
"""

from typing import Iterable

from rpn.runtime import (
    ErrorKind,
    RPNError,
    StackOverflow,
    StackUnderflow,
    MalformedOperand,
    NumericOverflow,
    Evaluator,
    Executor,
    ExecutionConfig,
    ExecutionResult,
)

__version__ = "1.0.0"


def evaluate(tokens: Iterable[str]) -> int:
    """Evaluate `tokens` with the default capacity and integer width."""
    return Evaluator().evaluate(tokens)


__all__ = [
    "evaluate",
    "ErrorKind",
    "RPNError",
    "StackOverflow",
    "StackUnderflow",
    "MalformedOperand",
    "NumericOverflow",
    "Evaluator",
    "Executor",
    "ExecutionConfig",
    "ExecutionResult",
    "__version__",
]
