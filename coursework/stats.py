"""Stacks and queues that keep running statistics over their contents."""

from __future__ import annotations

import math
import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum

_FLOAT32_MAX = 3.4028234663852886e38


class NumberType(Enum):
    """The kind of number a container holds, with its representable range."""

    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    DOUBLE = "double"

    def lowest(self) -> int | float:
        """The smallest value of this type."""
        return _LIMITS[self][0]

    def highest(self) -> int | float:
        """The largest value of this type."""
        return _LIMITS[self][1]

    @property
    def _integral(self) -> bool:
        return self in (NumberType.INT, NumberType.UINT)

    def _zero(self) -> int | float:
        return 0 if self._integral else 0.0

    def _coerce(self, value: object) -> int | float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        if self._integral:
            if not isinstance(value, int):
                raise TypeError(f"{self.value} values must be integers")
            if not self.lowest() <= value <= self.highest():
                raise ValueError(f"{value} is out of range for {self.value}")
            return value
        return float(value)


_LIMITS: dict[NumberType, tuple[int | float, int | float]] = {
    NumberType.INT: (-(2**31), 2**31 - 1),
    NumberType.UINT: (0, 2**32 - 1),
    NumberType.FLOAT: (-_FLOAT32_MAX, _FLOAT32_MAX),
    NumberType.DOUBLE: (-sys.float_info.max, sys.float_info.max),
}


@dataclass(frozen=True)
class Capture:
    """A stack entry remembering the extremes of everything beneath it."""

    value: int | float
    max: int | float
    min: int | float

    def after(self, value: int | float) -> Capture:
        """The entry for ``value`` pushed on top of this one."""
        return Capture(
            value,
            value if self.max < value else self.max,
            value if self.min > value else self.min,
        )


def _variance(sum_of_squares: float, total: int | float, count: int) -> float:
    average = total / count
    return (sum_of_squares - 2 * average * total + count * average**2) / count


def _standard_deviation(variance: float) -> float:
    # Rounding can leave a tiny negative variance for constant data.
    return math.sqrt(variance) if variance > 0 else 0.0


class SmartStack:
    """A stack that answers max, min, sum, average and variance queries."""

    __hash__ = None  # mutable

    def __init__(self, number_type: NumberType = NumberType.DOUBLE) -> None:
        self._type = number_type
        self._captures: list[Capture] = []
        self._sum = number_type._zero()
        self._sum_of_squares = 0.0

    @property
    def number_type(self) -> NumberType:
        return self._type

    def push(self, value: int | float) -> None:
        value = self._type._coerce(value)
        if self._captures:
            base = self._captures[-1]
        else:
            base = Capture(self._type._zero(), self._type.lowest(), self._type.highest())
        self._captures.append(base.after(value))
        self._sum += value
        self._sum_of_squares += float(value) ** 2

    def pop(self) -> int | float:
        """Remove and return the top value; IndexError when empty."""
        if not self._captures:
            raise IndexError("pop from empty stack")
        value = self._captures.pop().value
        self._sum -= value
        self._sum_of_squares -= float(value) ** 2
        return value

    def peek(self) -> int | float:
        """The top value; IndexError when empty."""
        if not self._captures:
            raise IndexError("peek from empty stack")
        return self._captures[-1].value

    def max(self) -> int | float:
        """The largest value, or the type's lowest value when empty."""
        if not self._captures:
            return self._type.lowest()
        return self._captures[-1].max

    def min(self) -> int | float:
        """The smallest value, or the type's highest value when empty."""
        if not self._captures:
            return self._type.highest()
        return self._captures[-1].min

    def average(self) -> float:
        if not self._captures:
            return 0.0
        return self._sum / len(self._captures)

    def sum(self) -> int | float:
        if not self._captures:
            return self._type._zero()
        return self._sum

    def variance(self) -> float:
        """Population variance; IndexError when empty."""
        if not self._captures:
            raise IndexError("variance of empty stack")
        return _variance(self._sum_of_squares, self._sum, len(self._captures))

    def standard_deviation(self) -> float:
        return _standard_deviation(self.variance())

    def __len__(self) -> int:
        return len(self._captures)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmartStack):
            return NotImplemented
        return (
            self._type == other._type
            and self._captures == other._captures
            and self._sum == other._sum
            and self._sum_of_squares == other._sum_of_squares
        )

    def __repr__(self) -> str:
        values = [capture.value for capture in self._captures]
        return f"SmartStack({self._type.name}, {values!r})"

    def copy(self) -> SmartStack:
        duplicate = SmartStack(self._type)
        duplicate._captures = list(self._captures)
        duplicate._sum = self._sum
        duplicate._sum_of_squares = self._sum_of_squares
        return duplicate


class SmartQueue:
    """A queue that answers max, min, sum, average and variance queries."""

    __hash__ = None  # mutable

    def __init__(self, number_type: NumberType = NumberType.DOUBLE) -> None:
        self._type = number_type
        self._values: deque[int | float] = deque()
        self._sum = number_type._zero()
        self._sum_of_squares = 0.0

    @property
    def number_type(self) -> NumberType:
        return self._type

    def enqueue(self, value: int | float) -> None:
        value = self._type._coerce(value)
        self._values.append(value)
        self._sum += value
        self._sum_of_squares += float(value) ** 2

    def dequeue(self) -> int | float:
        """Remove and return the front value; IndexError when empty."""
        if not self._values:
            raise IndexError("dequeue from empty queue")
        value = self._values.popleft()
        self._sum -= value
        self._sum_of_squares -= float(value) ** 2
        return value

    def peek(self) -> int | float:
        """The front value; IndexError when empty."""
        if not self._values:
            raise IndexError("peek from empty queue")
        return self._values[0]

    def max(self) -> int | float:
        """The largest value, or the type's lowest value when empty."""
        if not self._values:
            return self._type.lowest()
        return max(self._values)

    def min(self) -> int | float:
        """The smallest value, or the type's highest value when empty."""
        if not self._values:
            return self._type.highest()
        return min(self._values)

    def average(self) -> float:
        if not self._values:
            return 0.0
        return self._sum / len(self._values)

    def sum(self) -> int | float:
        if not self._values:
            return self._type._zero()
        return self._sum

    def variance(self) -> float:
        """Population variance; IndexError when empty."""
        if not self._values:
            raise IndexError("variance of empty queue")
        return _variance(self._sum_of_squares, self._sum, len(self._values))

    def standard_deviation(self) -> float:
        return _standard_deviation(self.variance())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmartQueue):
            return NotImplemented
        return (
            self._type == other._type
            and self._values == other._values
            and self._sum == other._sum
            and self._sum_of_squares == other._sum_of_squares
        )

    def __repr__(self) -> str:
        return f"SmartQueue({self._type.name}, {list(self._values)!r})"

    def copy(self) -> SmartQueue:
        duplicate = SmartQueue(self._type)
        duplicate._values = deque(self._values)
        duplicate._sum = self._sum
        duplicate._sum_of_squares = self._sum_of_squares
        return duplicate