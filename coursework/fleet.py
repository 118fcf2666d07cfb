"""A single shared fleet that moves all its vehicles together."""

from __future__ import annotations

from typing import ClassVar

from coursework.vehicle import Vehicle


class DeusExMachina:
    """The one fleet of up to ten vehicles; obtain it with ``get_instance``."""

    MAX_VEHICLES = 10

    _instance: ClassVar[DeusExMachina | None] = None

    def __init__(self) -> None:
        self._vehicles: list[Vehicle] = []

    @classmethod
    def get_instance(cls) -> DeusExMachina:
        """The shared fleet, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def destroy(cls) -> None:
        """Discard the shared fleet; the next ``get_instance`` starts afresh."""
        if cls._instance is not None:
            cls._instance._vehicles.clear()
        cls._instance = None

    def travel(self) -> None:
        """Move every vehicle one turn."""
        for vehicle in self._vehicles:
            vehicle.move()

    def add_vehicle(self, vehicle: Vehicle) -> bool:
        """Add ``vehicle`` with its journey reset; return False when full."""
        if len(self._vehicles) >= self.MAX_VEHICLES:
            return False
        vehicle.reset_move()
        self._vehicles.append(vehicle)
        return True

    def get_vehicle(self, i: int) -> Vehicle | None:
        """The vehicle at ``i``, or None if there is none."""
        if not 0 <= i < len(self._vehicles):
            return None
        return self._vehicles[i]

    def remove_vehicle(self, i: int) -> bool:
        """Remove the vehicle at ``i``; return False if there is none."""
        if not 0 <= i < len(self._vehicles):
            return False
        del self._vehicles[i]
        return True

    def get_furthest_travelled(self) -> Vehicle | None:
        """The vehicle that has gone furthest; the earliest one wins ties."""
        if not self._vehicles:
            return None
        result = self._vehicles[0]
        for vehicle in self._vehicles[1:]:
            if result.traveled_distance < vehicle.traveled_distance:
                result = vehicle
        return result