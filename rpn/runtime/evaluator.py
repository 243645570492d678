"""
RPN Evaluator

Walks the token sequence once, left to right:
- operand: push its value
- operator: pop b, pop a, push a (op) b

The first error aborts the run. Each call to evaluate() builds its own
OperandStack, so one Evaluator can serve any number of runs.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rpn.runtime.errors import NumericOverflow, RPNError
from rpn.runtime.result import resolve_result
from rpn.runtime.state import DEFAULT_CAPACITY, OperandStack
from rpn.runtime.tokens import DEFAULT_INT_BITS, Token, int_bounds, tokenize

logger = logging.getLogger(__name__)


class Evaluator:
    """Postfix evaluator over `+` and `-` with a bounded operand stack."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 int_bits: int = DEFAULT_INT_BITS):
        self.capacity = capacity
        self.int_bits = int_bits
        self.min_value, self.max_value = int_bounds(int_bits)

    def evaluate(self, tokens: Iterable[str]) -> int:
        """
        Evaluate `tokens` and return the internal (untruncated) result.

        Raises:
            StackOverflow, StackUnderflow, MalformedOperand, NumericOverflow
        """
        stack = OperandStack(self.capacity)
        for token in tokenize(tokens, self.int_bits):
            try:
                self.step(stack, token)
            except RPNError as e:
                raise e.at(token.index, token.text)
        return resolve_result(stack)

    def step(self, stack: OperandStack, token: Token) -> None:
        """Apply one classified token to `stack`."""
        if not token.is_operator:
            stack.push(token.value)
            logger.debug("push %d (depth %d)", token.value, len(stack))
            return

        stack.require(2)
        b = stack.pop()
        a = stack.pop()
        value = token.operator.apply(a, b)
        if not self.min_value <= value <= self.max_value:
            raise NumericOverflow(f"{a} {token.text} {b} is outside the {self.int_bits}-bit range")
        stack.push(value)
        logger.debug("%d %s %d -> %d", a, token.text, b, value)
