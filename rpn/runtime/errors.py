"""
RPN Runtime Errors

Every failure aborts the whole evaluation. Each error kind owns a distinct exit
status in the 128..255 band, which successful results never reach (see
rpn.runtime.result.to_exit_status).

Key classes:
- ErrorKind: Closed set of failure kinds
- RPNError: Base class carrying kind, token index, token text and exit status
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    STACK_OVERFLOW = "StackOverflow"
    STACK_UNDERFLOW = "StackUnderflow"
    MALFORMED_OPERAND = "MalformedOperand"
    NUMERIC_OVERFLOW = "NumericOverflow"


# Exit statuses reserved for failures.
ERROR_STATUS = {
    ErrorKind.STACK_OVERFLOW: 129,
    ErrorKind.STACK_UNDERFLOW: 130,
    ErrorKind.MALFORMED_OPERAND: 131,
    ErrorKind.NUMERIC_OVERFLOW: 132,
}

MIN_ERROR_STATUS = min(ERROR_STATUS.values())


class RPNError(Exception):
    """
    Base class for evaluation failures.

    `index` and `token` are filled in by whoever knows the position of the
    token being processed; the Stack itself does not.
    """
    kind: ErrorKind

    def __init__(self, detail: str, index: Optional[int] = None,
                 token: Optional[str] = None):
        self.detail = detail
        self.index = index
        self.token = token
        super().__init__(detail)

    @property
    def status(self) -> int:
        return ERROR_STATUS[self.kind]

    def at(self, index: int, token: str) -> "RPNError":
        """Attach the token position unless one is already recorded."""
        if self.index is None:
            self.index = index
            self.token = token
        return self

    def describe(self) -> str:
        if self.index is None:
            return f"{self.kind.value}: {self.detail}"
        return f"{self.kind.value} at token {self.index} ({self.token!r}): {self.detail}"

    def __str__(self) -> str:
        return self.describe()


class StackOverflow(RPNError):
    kind = ErrorKind.STACK_OVERFLOW


class StackUnderflow(RPNError):
    kind = ErrorKind.STACK_UNDERFLOW


class MalformedOperand(RPNError):
    kind = ErrorKind.MALFORMED_OPERAND


class NumericOverflow(RPNError):
    kind = ErrorKind.NUMERIC_OVERFLOW
