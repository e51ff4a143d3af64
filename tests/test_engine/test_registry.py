"""Tests for the factor registry."""

import pytest

from inkgroup.engine.context import GroupingContext, StrokeFeatures
from inkgroup.engine.registry import Factor, FactorRegistry, FactorSpec, get_registry


def _one(a: StrokeFeatures, b: StrokeFeatures, ctx: GroupingContext) -> float:
    return 1.0


def test_register_and_get():
    reg = FactorRegistry()
    spec = FactorSpec(id=Factor.TEMPORAL, fn=_one)
    reg.register(spec)
    assert reg.get(Factor.TEMPORAL) is spec
    assert reg.count == 1
    assert Factor.TEMPORAL in reg
    assert Factor.SPATIAL not in reg


def test_duplicate_rejected():
    reg = FactorRegistry()
    reg.register(FactorSpec(id=Factor.SPATIAL, fn=_one))
    with pytest.raises(ValueError, match="Duplicate factor ID: spatial"):
        reg.register(FactorSpec(id=Factor.SPATIAL, fn=_one))


def test_all_in_declaration_order():
    reg = FactorRegistry()
    for fid in (Factor.BEHAVIOR, Factor.TEMPORAL, Factor.GEOMETRY):
        reg.register(FactorSpec(id=fid, fn=_one))
    assert [s.id for s in reg.all()] == [Factor.TEMPORAL, Factor.GEOMETRY, Factor.BEHAVIOR]


def test_default_registry_has_builtin_factors():
    reg = get_registry()
    assert reg.count == 4
    assert [s.id for s in reg.all()] == list(Factor)
    assert all(s.description for s in reg.all())
