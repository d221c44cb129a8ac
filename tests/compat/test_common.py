"""Tests for the Class-Commons style adapter."""

from protoclass import Definition, create, type_
from protoclass.compat import common


def test_class_and_instance():
    point = common.class_("Point", {"x": 0, "y": 0})

    inst = common.instance(point)

    assert repr(point) == "<protoclass Point>"
    assert type(inst).__name__ == "Point"
    assert inst.x == 0
    assert type_(inst) is point


def test_table_wins_over_parents():
    parent = create(Definition(x=1, y=1))

    child = common.class_("Child", {"x": 2}, parent)

    assert dict(child) == {"x": 2, "y": 1}


def test_none_values_are_filled_from_parents():
    parent = create(Definition(x=1))

    child = common.class_("Child", {"x": None}, parent)

    assert child["x"] == 1


def test_parents_behavior_and_ancestry_carried():
    calls = []
    parent = create(Definition(), {"__create__": lambda cls, b: calls.append(cls)})

    child = common.class_("Child", {}, parent)

    assert common.instanceof(common.instance(child), parent)
    assert common.instanceof(common.instance(child), child)
    assert calls[-1] is child


def test_instance_passes_arguments():
    def init(self, value):
        self.value = value

    holder = common.class_("Holder", {"init": init})

    assert common.instance(holder, 7).value == 7


def test_definition_table_finalized_in_place():
    table = Definition(x=1)

    assert common.class_(None, table) is table
    assert repr(table) == "<protoclass.Class>"
