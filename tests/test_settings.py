"""Tests for breakpoint presets and environment overrides."""

import pytest
from config.settings import (
    BREAKPOINTS_ENV_VAR,
    DEFAULT_BREAKPOINTS,
    FRAMEWORK_BREAKPOINTS,
    load_breakpoints,
    parse_breakpoints,
)
from responsive.design.breakpoints import Breakpoint, BreakpointRegistry
from responsive.design.errors import InvalidBreakpointConfiguration


def test_default_scale_classifies_widths():
    reg = BreakpointRegistry(screen_width=1279, breakpoints=DEFAULT_BREAKPOINTS)
    assert reg.names() == ["xs", "sm", "md", "lg", "xl"]
    assert reg.active_breakpoint_name() == "md"
    assert reg.with_width(1600).active_breakpoint_name() == "xl"


def test_framework_scale_is_valid():
    reg = BreakpointRegistry(screen_width=500, breakpoints=FRAMEWORK_BREAKPOINTS)
    assert reg.active_breakpoint_name() == "TABLET"


def test_parse_named_and_unnamed_entries():
    bps = parse_breakpoints(" MOBILE:0, TABLET:600 ,1440, DESKTOP:1024.5 ")
    assert bps == (
        Breakpoint(0, "MOBILE"),
        Breakpoint(600, "TABLET"),
        Breakpoint(1440, None),
        Breakpoint(1024.5, "DESKTOP"),
    )


@pytest.mark.parametrize("text", ["", "TABLET:wide", ":600", " , "])
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidBreakpointConfiguration):
        parse_breakpoints(text)


def test_load_uses_environment_override():
    bps = load_breakpoints({BREAKPOINTS_ENV_VAR: "S:0,L:900"})
    assert [b.name for b in bps] == ["S", "L"]


def test_load_falls_back_to_defaults(monkeypatch):
    monkeypatch.delenv(BREAKPOINTS_ENV_VAR, raising=False)
    assert load_breakpoints() == DEFAULT_BREAKPOINTS
    assert load_breakpoints({BREAKPOINTS_ENV_VAR: "  "}) == DEFAULT_BREAKPOINTS
