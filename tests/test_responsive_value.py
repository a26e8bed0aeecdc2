"""Tests for responsive value resolution."""

import logging

import pytest
from responsive.design.breakpoints import Orientation
from responsive.design.conditions import Condition
from responsive.design.errors import MissingRegistryContext, UnknownBreakpointName
from responsive.design.resolver import ResponsiveValue, find_active_condition, resolve


def test_no_match_returns_default(make_registry):
    conditions = [
        Condition.smaller_than(breakpoint=100, value="tiny"),
        Condition.equals("DESKTOP", value="desk"),
    ]
    assert resolve(conditions, "fallback", make_registry(700)) == "fallback"
    assert resolve([], "fallback", make_registry(700)) == "fallback"


def test_later_declared_condition_wins(make_registry):
    conditions = [
        Condition.larger_than(breakpoint=100, value="first"),
        Condition.larger_than(name="MOBILE", value="second"),
        Condition.smaller_than(breakpoint=10, value="never"),
    ]
    rv = ResponsiveValue(conditions, "default", make_registry(700))
    assert rv.value == "second"
    assert rv.active_condition is conditions[1]


def test_equals_matches_active_breakpoint_only(make_registry):
    reg = make_registry(700)
    assert resolve([Condition.equals("TABLET", value=16)], 0, reg) == 16
    assert resolve([Condition.equals("DESKTOP", value=24)], 0, reg) == 0


def test_equals_with_unnamed_active_breakpoint_never_matches(make_registry):
    reg = make_registry(100, thresholds={"TABLET": 600})
    assert resolve([Condition.equals("TABLET", value=1)], 0, reg) == 0


def test_named_smaller_than_boundary(make_registry):
    conditions = [Condition.smaller_than(name="TABLET", value="small")]
    assert resolve(conditions, None, make_registry(599)) == "small"
    assert resolve(conditions, None, make_registry(600)) is None


def test_numeric_larger_than_boundary(make_registry):
    conditions = [Condition.larger_than(breakpoint=800, value="wide")]
    assert resolve(conditions, "narrow", make_registry(800)) == "narrow"
    assert resolve(conditions, "narrow", make_registry(801)) == "wide"


def test_landscape_value_overrides(make_registry):
    conditions = [Condition.larger_than(breakpoint=0, value=10, landscape_value=20)]
    assert resolve(conditions, 0, make_registry(700, Orientation.PORTRAIT)) == 10
    assert resolve(conditions, 0, make_registry(700, Orientation.LANDSCAPE)) == 20


def test_landscape_without_override_uses_value(make_registry):
    conditions = [Condition.larger_than(breakpoint=0, value=10)]
    assert resolve(conditions, 0, make_registry(700, Orientation.LANDSCAPE)) == 10


def test_matched_condition_without_value_is_not_default(make_registry):
    conditions = [Condition.smaller_than(breakpoint=1000)]
    rv = ResponsiveValue(conditions, "default", make_registry(700, Orientation.LANDSCAPE))
    assert rv.active_condition is conditions[0]
    assert rv.value is None


def test_name_takes_priority_over_threshold(make_registry):
    # Named check fails (700 >= 600); the numeric threshold is not consulted.
    cond = Condition.smaller_than(breakpoint=1000, name="TABLET", value="x")
    assert resolve([cond], "d", make_registry(700)) == "d"


def test_unknown_name_raises_instead_of_default(make_registry):
    conditions = [Condition.smaller_than(name="PHABLET", value=1)]
    with pytest.raises(UnknownBreakpointName):
        resolve(conditions, 0, make_registry(700))


def test_unknown_name_in_equals_raises(make_registry):
    with pytest.raises(UnknownBreakpointName) as info:
        resolve([Condition.equals("TABLTE", value=1)], 0, make_registry(700))
    assert info.value.context["name"] == "TABLTE"


def test_unknown_name_shadowed_by_later_match_is_not_evaluated(make_registry):
    conditions = [
        Condition.smaller_than(name="PHABLET", value=1),
        Condition.larger_than(breakpoint=0, value=2),
    ]
    assert resolve(conditions, 0, make_registry(700)) == 2


def test_named_condition_without_registry_fails_fast():
    with pytest.raises(MissingRegistryContext) as info:
        ResponsiveValue([Condition.equals("TABLET", value=1)], 0)
    assert "TABLET" in str(info.value)


def test_threshold_condition_without_registry_fails_fast():
    with pytest.raises(MissingRegistryContext):
        resolve([Condition.smaller_than(breakpoint=600, value=1)], 0)


def test_empty_conditions_without_registry_use_default():
    rv = ResponsiveValue([], "d")
    assert rv.value == "d"
    assert rv.active_condition is None
    assert rv.registry is None


def test_end_to_end_small_medium_large(make_registry):
    conditions = [
        Condition.smaller_than(breakpoint=600, value="small"),
        Condition.larger_than(breakpoint=1024, value="large"),
    ]
    assert resolve(conditions, "medium", make_registry(300)) == "small"
    assert resolve(conditions, "medium", make_registry(800)) == "medium"
    assert resolve(conditions, "medium", make_registry(1200)) == "large"


def test_find_active_condition_none(make_registry):
    assert find_active_condition([Condition.equals("DESKTOP")], make_registry(10)) is None


def test_resolution_is_idempotent(make_registry):
    reg = make_registry(700)
    conditions = (Condition.equals("TABLET", value=[1, 2]),)
    first = resolve(conditions, None, reg)
    assert first == resolve(conditions, None, reg)
    assert first is conditions[0].value


def test_resolution_logs_decision(make_registry, caplog):
    with caplog.at_level(logging.DEBUG, logger="responsive.design.resolver"):
        resolve([Condition.equals("TABLET", value=1)], 0, make_registry(700))
    assert any("active condition" in r.getMessage() for r in caplog.records)
