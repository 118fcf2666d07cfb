# coursework

Three small, self-contained libraries:

- **`coursework.mystring`**: `MyString`, a mutable string with searching
  (`index_of`, `last_index_of`), `append`, `interleave`, `remove_at`,
  `pad_left`, `pad_right`, `reverse`, `to_lower` and `to_upper`. It supports
  `len()`, `str()`, `==` against `str` or `MyString`, and `+`.
- **`coursework.people`**, **`coursework.vehicle`**, **`coursework.vehicles`**,
  **`coursework.fleet`**: a turn-based travel simulation. Passengers (`Person`)
  board vehicles (`Airplane`, `Boat`, `Boatplane`, `Motorcycle`, `Sedan`,
  `UBoat`). A vehicle's speed depends on the total weight of its passengers
  (plus a `Trailer`'s weight for a `Sedan`), and each kind of vehicle rests on
  different turns. Adding an `Airplane` and a `Boat` docks them into a new
  `Boatplane` that takes over all their passengers. `DeusExMachina` is a
  single shared fleet that moves up to ten vehicles together and tells which
  one has gone furthest.
- **`coursework.stats`**, **`coursework.queuestack`**: `SmartStack`,
  `SmartQueue` and `QueueStack` track max, min, sum and average (and, for the
  stack and queue, variance and standard deviation) as values come and go.
  A `NumberType` (`INT`, `UINT`, `FLOAT`, `DOUBLE`) fixes which values are
  accepted and what `max()` and `min()` report when the container is empty.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from coursework.mystring import MyString

s = MyString("1357")
s.interleave("2468")
str(s)                 # "12345678"
s.index_of("45")       # 3
s.pad_left(10, "-")
str(s)                 # "--12345678"
```

```python
from coursework.people import Person
from coursework.vehicles import Airplane, Boat
from coursework.fleet import DeusExMachina

plane = Airplane(4)
plane.add_passenger(Person("name1", 100))
boat = Boat(3)
boat.add_passenger(Person("name6", 200))

boatplane = plane + boat        # passengers move into a new Boatplane
boatplane.passengers_count      # 2
plane.passengers_count          # 0

fleet = DeusExMachina.get_instance()
fleet.add_vehicle(boatplane)
fleet.travel()
fleet.get_furthest_travelled() is boatplane   # True
DeusExMachina.destroy()
```

Speeds, load and distance are read as properties: `max_speed`,
`passengers_weight`, `passengers_count`, `max_passengers_count`,
`traveled_distance`, and `fly_speed`, `drive_speed`, `sail_speed` or
`dive_speed` depending on the vehicle. `is_moveable()` and `move()` are
methods.

```python
from coursework.stats import NumberType, SmartStack
from coursework.queuestack import QueueStack

stack = SmartStack(NumberType.INT)
for value in (6, 5, -2):
    stack.push(value)
stack.sum()                     # 9
round(stack.variance(), 3)      # 12.667

qs = QueueStack(3, NumberType.INT)
for value in (1, 2, 3, 4, 5):
    qs.enqueue(value)
qs.stack_count()                # 2
qs.dequeue()                    # 3
```

Taking from an empty stack or queue (`pop`, `dequeue`, `peek`, `variance`)
raises `IndexError`.

## What it does not do

This is a library only: it has no command-line program, and it does not
save or load any state.