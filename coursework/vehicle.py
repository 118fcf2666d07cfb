"""The common base of all vehicles and the movement abilities they share."""

from __future__ import annotations

import copy as _copy
import dataclasses
from abc import ABC, abstractmethod

from coursework.people import Person


class Flyable(ABC):
    @property
    @abstractmethod
    def fly_speed(self) -> int:
        """Speed when flying."""


class Drivable(ABC):
    @property
    @abstractmethod
    def drive_speed(self) -> int:
        """Speed when driving."""


class Sailable(ABC):
    @property
    @abstractmethod
    def sail_speed(self) -> int:
        """Speed when sailing."""


class Divable(ABC):
    @property
    @abstractmethod
    def dive_speed(self) -> int:
        """Speed when diving."""


class Vehicle(ABC):
    """A vehicle with a limited number of seats that moves turn by turn."""

    def __init__(self, max_passengers_count: int) -> None:
        if max_passengers_count < 0:
            raise ValueError("max_passengers_count must not be negative")
        self._max_passengers_count = max_passengers_count
        self._passengers: list[Person] = []
        self._traveled_distance = 0
        self._turn = 0

    def add_passenger(self, person: Person) -> bool:
        """Seat ``person``; return False when the vehicle is full."""
        if len(self._passengers) >= self._max_passengers_count:
            return False
        self._passengers.append(person)
        return True

    def remove_passenger(self, i: int) -> bool:
        """Remove the passenger at ``i``; return False if there is none."""
        if not 0 <= i < len(self._passengers):
            return False
        del self._passengers[i]
        return True

    def get_passenger(self, i: int) -> Person | None:
        """The passenger at ``i``, or None if there is none."""
        if not 0 <= i < len(self._passengers):
            return None
        return self._passengers[i]

    @property
    def passengers_count(self) -> int:
        return len(self._passengers)

    @property
    def max_passengers_count(self) -> int:
        return self._max_passengers_count

    @property
    def passengers_weight(self) -> int:
        return sum(person.weight for person in self._passengers)

    @property
    @abstractmethod
    def max_speed(self) -> int:
        """The highest speed the vehicle can reach with its current load."""

    @abstractmethod
    def is_moveable(self) -> bool:
        """Whether the vehicle moves on the current turn."""

    def move(self) -> None:
        """Advance one turn, covering ``max_speed`` if the vehicle may move."""
        if self.is_moveable():
            self._traveled_distance += self.max_speed
        self._turn += 1

    def reset_move(self) -> None:
        self._turn = 0
        self._traveled_distance = 0

    @property
    def traveled_distance(self) -> int:
        return self._traveled_distance

    def copy(self) -> Vehicle:
        """An independent copy holding copies of the passengers."""
        duplicate = _copy.copy(self)
        duplicate._passengers = [dataclasses.replace(p) for p in self._passengers]
        return duplicate

    def _take_passengers(self) -> list[Person]:
        """Remove and return every passenger, in seating order."""
        taken, self._passengers = self._passengers, []
        return taken