"""
RPN Runtime State

The operand stack owned by a single evaluation run.

Key classes:
- OperandStack: Bounded last-in-first-out container of integers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from rpn.runtime.errors import StackOverflow, StackUnderflow

DEFAULT_CAPACITY = 100


@dataclass
class OperandStack:
    """
    Bounded LIFO stack of integers.

    push and pop are the only mutations. Both fail loudly at the bounds
    instead of wrapping or reading stale slots.
    """
    capacity: int = DEFAULT_CAPACITY
    _items: List[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")

    def __len__(self) -> int:
        return len(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: int) -> None:
        """Push `value` as the new top."""
        if self.is_full:
            raise StackOverflow(f"stack capacity {self.capacity} exceeded")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("pop from empty stack")
        return self._items.pop()

    def require(self, count: int) -> None:
        """Fail without touching the stack unless `count` values are present."""
        if len(self._items) < count:
            raise StackUnderflow(
                f"need {count} operands, stack holds {len(self._items)}"
            )
