"""
RPN Tokens

Classifies raw text tokens into operators and operands before any arithmetic
runs. Operands are parsed here, so the evaluator only ever sees well-formed
values.

Key classes:
- OperatorKind: The recognized binary operators
- Token: A classified, validated input token
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from rpn.runtime.errors import MalformedOperand, NumericOverflow, RPNError

DEFAULT_INT_BITS = 64

_DIGITS = {c: i for i, c in enumerate("0123456789")}


class OperatorKind(Enum):
    ADD = "+"
    SUBTRACT = "-"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, a: int, b: int) -> int:
        """Apply to `a` (pushed first) and `b` (pushed second)."""
        return _OPERATIONS[self](a, b)


_OPERATIONS: Dict[OperatorKind, Callable[[int, int], int]] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUBTRACT: operator.sub,
}

_OPERATORS_BY_SYMBOL = {kind.symbol: kind for kind in OperatorKind}


class TokenKind(Enum):
    OPERAND = "OPERAND"
    OPERATOR = "OPERATOR"


@dataclass(frozen=True)
class Token:
    """A single input token after classification."""
    index: int
    text: str
    kind: TokenKind
    operator: Optional[OperatorKind] = None
    value: Optional[int] = None

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR


def int_bounds(int_bits: int = DEFAULT_INT_BITS) -> tuple:
    """Inclusive (min, max) of a signed two's-complement integer."""
    return -(1 << (int_bits - 1)), (1 << (int_bits - 1)) - 1


def parse_operand(text: str, int_bits: int = DEFAULT_INT_BITS) -> int:
    """
    Parse a digit-only literal into a nonnegative integer.

    Only ASCII 0-9 are accepted; leading zeros are fine. The value is
    accumulated digit by digit and NumericOverflow is raised as soon as it
    passes the largest representable integer.

    Raises:
        MalformedOperand: empty text or any non-digit character
        NumericOverflow: literal larger than the integer range
    """
    if not text:
        raise MalformedOperand("empty token")

    if any(ch not in _DIGITS for ch in text):
        raise MalformedOperand(f"not an operator or decimal literal: {text!r}")

    _, limit = int_bounds(int_bits)
    value = 0
    for ch in text:
        value = value * 10 + _DIGITS[ch]
        if value > limit:
            raise NumericOverflow(f"literal exceeds {limit}")
    return value


def classify_token(text: str, index: int,
                   int_bits: int = DEFAULT_INT_BITS) -> Token:
    """
    Classify one token. Exact `+` or `-` is an operator; everything else must
    be a valid operand. Errors come back tagged with `index`.
    """
    kind = _OPERATORS_BY_SYMBOL.get(text)
    if kind is not None:
        return Token(index=index, text=text, kind=TokenKind.OPERATOR, operator=kind)
    try:
        value = parse_operand(text, int_bits)
    except (MalformedOperand, NumericOverflow) as e:
        raise e.at(index, text)
    return Token(index=index, text=text, kind=TokenKind.OPERAND, value=value)


def tokenize(texts: Iterable[str], int_bits: int = DEFAULT_INT_BITS) -> Iterator[Token]:
    """Lazily classify tokens in order, stopping at the first bad one."""
    for index, text in enumerate(texts):
        yield classify_token(text, index, int_bits)


def check_tokens(texts: Iterable[str],
                 int_bits: int = DEFAULT_INT_BITS) -> Tuple[List[Token], List[RPNError]]:
    """
    Classify every token without evaluating anything.

    Unlike tokenize() this does not stop at the first bad token: it returns the
    well-formed tokens and one error per rejected token. Stack depth is not
    checked here.
    """
    tokens: List[Token] = []
    errors: List[RPNError] = []
    for index, text in enumerate(texts):
        try:
            tokens.append(classify_token(text, index, int_bits))
        except (MalformedOperand, NumericOverflow) as e:
            errors.append(e)
    return tokens, errors
