import dataclasses

import pytest

from coursework.people import Person, Trailer


def test_person_equality():
    p0 = Person("name0", 90)
    assert p0 == Person("name0", 90)
    assert p0 != Person("test1", 100)
    assert p0 != Person("name0", 91)


def test_person_fields():
    p = Person("name1", 40)
    assert p.name == "name1"
    assert p.weight == 40


def test_person_copy_is_equal_but_distinct():
    p = Person("name1", 40)
    copied = dataclasses.replace(p)
    assert copied == p
    assert copied is not p


def test_person_is_immutable():
    p = Person("name1", 40)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.weight = 10
    assert p.weight == 40
    assert p == Person("name1", 40)


def test_trailer_weight():
    assert Trailer(40).weight == 40
    assert Trailer(10) == Trailer(10)
    assert Trailer(10) != Trailer(20)