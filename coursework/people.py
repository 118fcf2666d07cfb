"""Passengers and trailers carried by vehicles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A passenger with a name and a weight."""

    name: str
    weight: int


@dataclass(frozen=True)
class Trailer:
    """A trailer that adds its weight to the car that tows it."""

    weight: int