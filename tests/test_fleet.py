import pytest

from coursework.fleet import DeusExMachina
from coursework.people import Person, Trailer
from coursework.vehicles import Airplane, Boat, Boatplane, Motorcycle, Sedan, UBoat


@pytest.fixture
def fleet():
    DeusExMachina.destroy()
    instance = DeusExMachina.get_instance()
    yield instance
    DeusExMachina.destroy()


def test_single_instance(fleet):
    assert DeusExMachina.get_instance() is fleet
    DeusExMachina.destroy()
    fresh = DeusExMachina.get_instance()
    assert fresh is not fleet
    assert fresh.get_vehicle(0) is None


def test_empty_fleet_has_no_furthest(fleet):
    fleet.travel()
    assert fleet.get_furthest_travelled() is None


def test_capacity_and_removal(fleet):
    vehicles = [Airplane(5), Boat(5), Boatplane(5), Motorcycle(), Sedan(), Sedan(), UBoat()]
    for v in vehicles:
        assert fleet.add_vehicle(v) is True
    v1, v2, v3, v4 = Airplane(1), Airplane(1), Airplane(1), Airplane(1)
    assert fleet.add_vehicle(v1) is True
    assert fleet.add_vehicle(v2) is True
    assert fleet.add_vehicle(v3) is True
    assert fleet.add_vehicle(v4) is False
    assert fleet.remove_vehicle(10) is False
    assert fleet.remove_vehicle(9) is True
    assert fleet.remove_vehicle(9) is False
    assert fleet.get_vehicle(8) is v2
    assert fleet.get_vehicle(9) is None
    assert fleet.remove_vehicle(-1) is False


def test_remove_shifts_following_vehicles(fleet):
    a, b, c = Boat(1), Boat(1), Boat(1)
    for v in (a, b, c):
        fleet.add_vehicle(v)
    assert fleet.remove_vehicle(0) is True
    assert fleet.get_vehicle(0) is b
    assert fleet.get_vehicle(1) is c
    assert fleet.get_vehicle(2) is None


def test_add_resets_journey(fleet):
    boat = Boat(1)
    boat.move()
    boat.move()
    assert boat.traveled_distance == 1600
    fleet.add_vehicle(boat)
    assert boat.traveled_distance == 0
    assert boat.is_moveable() is True


def test_moveability_through_travel(fleet):
    airplane = Airplane(5)
    boat = Boat(5)
    boatplane = Boatplane(5)
    motorcycle = Motorcycle()
    sedan0 = Sedan()
    sedan1 = Sedan()
    sedan1.add_trailer(Trailer(50))
    uboat = UBoat()
    ordered = [airplane, boat, boatplane, motorcycle, sedan0, sedan1, uboat]
    for v in ordered:
        fleet.add_vehicle(v)

    assert [v.is_moveable() for v in ordered] == [True] * 7
    fleet.travel()
    assert [v.is_moveable() for v in ordered] == [False, True, False, True, True, True, True]
    fleet.travel()
    assert [v.is_moveable() for v in ordered] == [False, False, False, True, True, True, False]


TRAVELED = [
    [1213, 1213, 1213, 1213, 2426, 2426, 2426, 2426, 3639, 3639, 3639, 3639, 4852],
    [800, 1600, 1600, 2400, 3200, 3200, 4000, 4800, 4800, 5600, 6400, 6400, 7200],
    [800, 800, 800, 800, 1600, 1600, 1600, 1600, 2400, 2400, 2400, 2400, 3200],
    [400, 800, 1200, 1600, 2000, 2000, 2400, 2800, 3200, 3600, 4000, 4000, 4400],
    [480, 960, 1440, 1920, 2400, 2400, 2880, 3360, 3840, 4320, 4800, 4800, 5280],
    [480, 960, 1440, 1920, 2400, 2400, 2400, 2880, 3360, 3840, 4320, 4800, 4800],
    [550, 1100, 1100, 1100, 1100, 1100, 1650, 2200, 2200, 2200, 2200, 2200, 2750],
]


def test_furthest_travelled_over_thirteen_turns(fleet):
    t1 = Airplane(2)
    t2 = Boat(2)
    t3 = Boatplane(2)
    t4 = Motorcycle()
    t5 = Sedan()
    t6 = Sedan()
    t6.add_trailer(Trailer(1))
    t7 = UBoat()
    vehicles = [t1, t2, t3, t4, t5, t6, t7]
    for v in vehicles:
        fleet.add_vehicle(v)
    expected_leaders = [t1] + [t2] * 12

    for turn in range(13):
        fleet.travel()
        assert [v.traveled_distance for v in vehicles] == [row[turn] for row in TRAVELED]
        assert fleet.get_furthest_travelled() is expected_leaders[turn]


def test_full_fleet_travel_keeps_passengers(fleet):
    vehicles = [Airplane(10), Airplane(10), Boatplane(10), Motorcycle(), Sedan(), Sedan(), UBoat()]
    vehicles[5].add_trailer(Trailer(10))
    for v in vehicles:
        fleet.add_vehicle(v)
    for i in range(7):
        v = fleet.get_vehicle(i)
        for j in range(v.passengers_count, v.max_passengers_count):
            v.add_passenger(Person(f"p{i + j}", 10))
    for _ in range(10):
        fleet.travel()
    for v in vehicles:
        assert v.passengers_count == v.max_passengers_count
    furthest = fleet.get_furthest_travelled()
    assert all(furthest.traveled_distance >= v.traveled_distance for v in vehicles)