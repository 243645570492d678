"""
RPN Executor

Runs one evaluation under an ExecutionConfig and reports the outcome as an
ExecutionResult instead of raising. This is the only place evaluation errors
are caught.

Key classes:
- ExecutionConfig: Configuration for evaluation
- ExecutionResult: Result of one evaluation run
- Executor: Main execution engine
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from rpn.runtime.errors import RPNError
from rpn.runtime.evaluator import Evaluator
from rpn.runtime.result import DEFAULT_STATUS_MODULUS, to_exit_status
from rpn.runtime.state import DEFAULT_CAPACITY
from rpn.runtime.tokens import DEFAULT_INT_BITS

logger = logging.getLogger(__name__)


@dataclass
class ExecutionConfig:
    """Configuration for evaluation."""
    capacity: int = DEFAULT_CAPACITY
    int_bits: int = DEFAULT_INT_BITS
    status_modulus: int = DEFAULT_STATUS_MODULUS

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be >= 2, got {self.int_bits}")
        # fails early on a modulus that would overlap the error statuses
        to_exit_status(0, self.status_modulus)


@dataclass
class ExecutionResult:
    """Result of one evaluation run."""
    success: bool
    value: Optional[int] = None
    status: int = 0
    error_kind: Optional[str] = None
    error_index: Optional[int] = None
    error_token: Optional[str] = None
    error: Optional[str] = None
    token_count: int = 0
    execution_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "value": self.value,
            "status": self.status,
            "error_kind": self.error_kind,
            "error_index": self.error_index,
            "error_token": self.error_token,
            "error": self.error,
            "token_count": self.token_count,
            "execution_time_ms": self.execution_time_ms,
        }


class Executor:
    """
    Evaluation engine for hosting surfaces (CLI, HTTP).

    Successful runs carry the internal result in `value` and its reduced form
    in `status`. Failed runs carry `value=None` and the error's reserved
    status, so the two can never be confused.
    """

    def __init__(self, config: Optional[ExecutionConfig] = None):
        self.config = config or ExecutionConfig()
        self.evaluator = Evaluator(
            capacity=self.config.capacity,
            int_bits=self.config.int_bits,
        )

    def execute(self, tokens: Iterable[str]) -> ExecutionResult:
        tokens = list(tokens)
        start = time.time()
        logger.debug("evaluating %d tokens (capacity %d)", len(tokens), self.config.capacity)

        try:
            value = self.evaluator.evaluate(tokens)
        except RPNError as e:
            logger.error("evaluation failed: %s", e.describe())
            return ExecutionResult(
                success=False,
                status=e.status,
                error_kind=e.kind.value,
                error_index=e.index,
                error_token=e.token,
                error=e.describe(),
                token_count=len(tokens),
                execution_time_ms=(time.time() - start) * 1000,
            )

        result = ExecutionResult(
            success=True,
            value=value,
            status=to_exit_status(value, self.config.status_modulus),
            token_count=len(tokens),
            execution_time_ms=(time.time() - start) * 1000,
        )
        logger.debug("result %d (status %d)", result.value, result.status)
        return result
