"""A queue of bounded stacks that keeps running statistics."""

from __future__ import annotations

from collections import deque

from coursework.stats import NumberType, SmartStack


class QueueStack:
    """A queue whose elements are stacks of at most ``max_stack_size`` values.

    New values go onto the last stack, opening a new one when it is full;
    values are taken from the top of the first stack.
    """

    __hash__ = None  # mutable

    def __init__(
        self, max_stack_size: int, number_type: NumberType = NumberType.DOUBLE
    ) -> None:
        if max_stack_size < 0:
            raise ValueError("max_stack_size must not be negative")
        self._max_stack_size = max_stack_size
        self._type = number_type
        self._stacks: deque[SmartStack] = deque()
        self._sum = number_type._zero()

    @property
    def max_stack_size(self) -> int:
        return self._max_stack_size

    @property
    def number_type(self) -> NumberType:
        return self._type

    def enqueue(self, value: int | float) -> None:
        """Add ``value``; ignored when the stack size limit is zero."""
        if self._max_stack_size == 0:
            return
        value = self._type._coerce(value)
        if not self._stacks or len(self._stacks[-1]) >= self._max_stack_size:
            self._stacks.append(SmartStack(self._type))
        self._stacks[-1].push(value)
        self._sum += value

    def peek(self) -> int | float:
        """The value ``dequeue`` would return; IndexError when empty."""
        if not self._stacks:
            raise IndexError("peek from empty queue stack")
        return self._stacks[0].peek()

    def dequeue(self) -> int | float:
        """Remove and return the top of the first stack; IndexError when empty."""
        if not self._stacks:
            raise IndexError("dequeue from empty queue stack")
        front = self._stacks[0]
        value = front.pop()
        self._sum -= value
        if not front:
            self._stacks.popleft()
        return value

    def max(self) -> int | float:
        """The largest value, or the type's lowest value when empty."""
        if not self._stacks:
            return self._type.lowest()
        return max(stack.max() for stack in self._stacks)

    def min(self) -> int | float:
        """The smallest value, or the type's highest value when empty."""
        if not self._stacks:
            return self._type.highest()
        return min(stack.min() for stack in self._stacks)

    def average(self) -> float:
        if not self._stacks:
            return 0.0
        return self.sum() / len(self)

    def sum(self) -> int | float:
        if not self._stacks:
            return self._type._zero()
        return self._sum

    def __len__(self) -> int:
        return sum(len(stack) for stack in self._stacks)

    def stack_count(self) -> int:
        """The number of stacks currently held."""
        return len(self._stacks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueueStack):
            return NotImplemented
        return (
            self._type == other._type
            and self._max_stack_size == other._max_stack_size
            and self._sum == other._sum
            and list(self._stacks) == list(other._stacks)
        )

    def __repr__(self) -> str:
        return (
            f"QueueStack({self._max_stack_size}, {self._type.name}, "
            f"{list(self._stacks)!r})"
        )

    def copy(self) -> QueueStack:
        duplicate = QueueStack(self._max_stack_size, self._type)
        duplicate._stacks = deque(stack.copy() for stack in self._stacks)
        duplicate._sum = self._sum
        return duplicate