"""Test fixtures for the RPN evaluator test suite."""
import pytest
import sys
from pathlib import Path
from typing import List

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rpn.runtime.evaluator import Evaluator
from rpn.runtime.executor import Executor, ExecutionConfig
from rpn.runtime.state import OperandStack


@pytest.fixture
def evaluator() -> Evaluator:
    """Evaluator with default capacity and integer width."""
    return Evaluator()


@pytest.fixture
def executor() -> Executor:
    """Executor with default configuration."""
    return Executor()


@pytest.fixture
def small_executor() -> Executor:
    """Executor whose stack holds only three operands."""
    return Executor(ExecutionConfig(capacity=3))


@pytest.fixture
def empty_stack() -> OperandStack:
    """Empty stack with the default capacity."""
    return OperandStack()


@pytest.fixture
def sample_tokens() -> List[str]:
    """(10 - 3) + 5 in postfix."""
    return ["10", "3", "-", "5", "+"]


@pytest.fixture
def overflow_tokens() -> List[str]:
    """One more operand than the default capacity allows."""
    return [str(i) for i in range(101)]
