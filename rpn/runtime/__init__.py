"""
RPN Runtime Engine

This module provides the core runtime for evaluating postfix expressions:
- Tokens: Token classification and operand parsing
- State: Bounded operand stack
- Evaluator: Token dispatch over the stack
- Result: Final stack read and exit status mapping
- Executor: Configured runs reported as ExecutionResult
"""

from rpn.runtime.errors import (
    ErrorKind,
    RPNError,
    StackOverflow,
    StackUnderflow,
    MalformedOperand,
    NumericOverflow,
)
from rpn.runtime.tokens import (
    OperatorKind,
    Token,
    TokenKind,
    check_tokens,
    classify_token,
    parse_operand,
    tokenize,
)
from rpn.runtime.state import OperandStack
from rpn.runtime.evaluator import Evaluator
from rpn.runtime.result import resolve_result, to_exit_status
from rpn.runtime.executor import Executor, ExecutionResult, ExecutionConfig

__all__ = [
    "ErrorKind",
    "RPNError",
    "StackOverflow",
    "StackUnderflow",
    "MalformedOperand",
    "NumericOverflow",
    "OperatorKind",
    "Token",
    "TokenKind",
    "check_tokens",
    "classify_token",
    "parse_operand",
    "tokenize",
    "OperandStack",
    "Evaluator",
    "resolve_result",
    "to_exit_status",
    "Executor",
    "ExecutionResult",
    "ExecutionConfig",
]
