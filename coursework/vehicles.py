"""The concrete vehicles: planes, boats, cars and submarines."""

from __future__ import annotations

import dataclasses
import math

from coursework.people import Trailer
from coursework.vehicle import Divable, Drivable, Flyable, Sailable, Vehicle


def _dock(plane: Airplane, boat: Boat) -> Boatplane:
    """Join a plane and a boat, moving every passenger into a new boatplane."""
    joined = Boatplane(plane.max_passengers_count + boat.max_passengers_count)
    joined._passengers = plane._take_passengers() + boat._take_passengers()
    return joined


class Airplane(Vehicle, Flyable, Drivable):
    """A plane that can also drive on the ground; moves every fourth turn."""

    def __init__(self, max_passengers_count: int) -> None:
        super().__init__(max_passengers_count)

    @property
    def max_speed(self) -> int:
        return max(self.fly_speed, self.drive_speed)

    @property
    def fly_speed(self) -> int:
        return int(200 * math.exp((800 - self.passengers_weight) / 500) + 0.5)

    @property
    def drive_speed(self) -> int:
        return int(4 * math.exp((400 - self.passengers_weight) / 70) + 0.5)

    def is_moveable(self) -> bool:
        return self._turn % 4 == 0

    def __add__(self, boat: object) -> Boatplane:
        """Dock with a boat; both lose their passengers to the boatplane."""
        if not isinstance(boat, Boat):
            return NotImplemented
        return _dock(self, boat)


class Boat(Vehicle, Sailable):
    """A boat; rests on every third turn."""

    def __init__(self, max_passengers_count: int) -> None:
        super().__init__(max_passengers_count)

    @property
    def max_speed(self) -> int:
        return self.sail_speed

    @property
    def sail_speed(self) -> int:
        return max(800 - 10 * self.passengers_weight, 20)

    def is_moveable(self) -> bool:
        return self._turn % 3 != 2

    def __add__(self, plane: object) -> Boatplane:
        """Dock with a plane; the plane's passengers are seated first."""
        if not isinstance(plane, Airplane):
            return NotImplemented
        return _dock(plane, self)


class Boatplane(Vehicle, Flyable, Sailable):
    """A plane that can land on water; moves every fourth turn."""

    def __init__(self, max_passengers_count: int) -> None:
        super().__init__(max_passengers_count)

    @property
    def max_speed(self) -> int:
        return max(self.fly_speed, self.sail_speed)

    @property
    def fly_speed(self) -> int:
        return int(150 * math.exp((500 - self.passengers_weight) / 300) + 0.5)

    @property
    def sail_speed(self) -> int:
        speed = 800 - 1.7 * self.passengers_weight + 0.5
        return int(speed) if speed > 20 else 20

    def is_moveable(self) -> bool:
        return self._turn % 4 == 0


class Motorcycle(Vehicle, Drivable):
    """A two-seat motorcycle; rests on every sixth turn."""

    SEATS = 2

    def __init__(self) -> None:
        super().__init__(self.SEATS)

    @property
    def max_speed(self) -> int:
        return self.drive_speed

    @property
    def drive_speed(self) -> int:
        weight = self.passengers_weight
        speed = -((weight / 15) ** 3) + 2 * weight + 400 + 0.5
        return int(speed) if speed > 0 else 0

    def is_moveable(self) -> bool:
        return self._turn % 6 != 5


class Sedan(Vehicle, Drivable):
    """A four-seat car that may tow one trailer."""

    SEATS = 4

    def __init__(self) -> None:
        super().__init__(self.SEATS)
        self._trailer: Trailer | None = None

    @property
    def trailer(self) -> Trailer | None:
        return self._trailer

    @property
    def max_speed(self) -> int:
        return self.drive_speed

    @property
    def drive_speed(self) -> int:
        load = self.passengers_weight
        if self._trailer is not None:
            load += self._trailer.weight
        if load > 350:
            return 300
        if load > 260:
            return 380
        if load > 160:
            return 400
        if load > 80:
            return 458
        return 480

    def add_trailer(self, trailer: Trailer) -> bool:
        """Hitch ``trailer``; return False if one is already attached."""
        if self._trailer is not None:
            return False
        self._trailer = trailer
        return True

    def remove_trailer(self) -> bool:
        """Unhitch the trailer; return False if there is none."""
        if self._trailer is None:
            return False
        self._trailer = None
        return True

    def is_moveable(self) -> bool:
        if self._trailer is None:
            return self._turn % 6 != 5
        return self._turn % 7 not in (5, 6)

    def copy(self) -> Sedan:
        """An independent copy, with its own copy of the trailer."""
        duplicate = super().copy()
        if self._trailer is not None:
            duplicate._trailer = dataclasses.replace(self._trailer)
        return duplicate


class UBoat(Vehicle, Sailable, Divable):
    """A submarine with fifty seats; moves two turns out of six."""

    SEATS = 50

    def __init__(self) -> None:
        super().__init__(self.SEATS)

    @property
    def max_speed(self) -> int:
        return max(self.sail_speed, self.dive_speed)

    @property
    def sail_speed(self) -> int:
        speed = 550 - self.passengers_weight / 10 + 0.5
        return int(speed) if speed > 200 else 200

    @property
    def dive_speed(self) -> int:
        return int(500 * math.log((self.passengers_weight + 150) / 150) + 30.5)

    def is_moveable(self) -> bool:
        return self._turn % 6 in (0, 1)