"""
RPN Result Adapter

Turns the final stack into the run's result and maps that result onto a
process exit status.

Exit status contract (8-bit status):
- success: result mod 128, always in 0..127 (-7 becomes 121)
- failure: 128..255, one fixed value per ErrorKind (see rpn.runtime.errors)
"""

from __future__ import annotations

from rpn.runtime.errors import MIN_ERROR_STATUS
from rpn.runtime.state import OperandStack

DEFAULT_STATUS_MODULUS = 128


def resolve_result(stack: OperandStack) -> int:
    """
    Empty stack means nothing was computed and yields 0. Otherwise the top is
    popped once; anything below it is dropped.
    """
    if stack.is_empty:
        return 0
    return stack.pop()


def to_exit_status(value: int, modulus: int = DEFAULT_STATUS_MODULUS) -> int:
    """Reduce a result into the success band of the exit status."""
    if not 1 <= modulus <= MIN_ERROR_STATUS:
        raise ValueError(f"status modulus must be in 1..{MIN_ERROR_STATUS}, got {modulus}")
    return value % modulus
