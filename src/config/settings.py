"""Global configuration and breakpoint presets."""

from __future__ import annotations

import os
from typing import Final, Mapping, Tuple

from responsive.design.breakpoints import Breakpoint
from responsive.design.errors import InvalidBreakpointConfiguration

# Desktop-oriented scale; each tier is inclusive on its threshold.
DEFAULT_BREAKPOINTS: Final[Tuple[Breakpoint, ...]] = (
    Breakpoint(0, "xs"),
    Breakpoint(640, "sm"),
    Breakpoint(960, "md"),
    Breakpoint(1280, "lg"),
    Breakpoint(1600, "xl"),
)

# Device-class scale (phone / tablet / desktop / 4K screens)
FRAMEWORK_BREAKPOINTS: Final[Tuple[Breakpoint, ...]] = (
    Breakpoint(0, "MOBILE"),
    Breakpoint(451, "TABLET"),
    Breakpoint(801, "DESKTOP"),
    Breakpoint(1921, "4K"),
)

BREAKPOINTS_ENV_VAR: Final = "RESPONSIVE_BREAKPOINTS"


def parse_breakpoints(text: str) -> Tuple[Breakpoint, ...]:
    """Parse ``"MOBILE:0,TABLET:600,1440"`` into breakpoints.

    Entries are comma separated ``name:threshold`` pairs; a bare number is an
    unnamed breakpoint.
    """
    result = []
    for raw in text.split(","):
        entry = raw.strip()
        if not entry:
            continue
        name, sep, width = entry.rpartition(":")
        try:
            threshold = float(width)
        except ValueError:
            raise InvalidBreakpointConfiguration(
                f"Malformed breakpoint entry: {entry!r}", context={"entry": entry}
            ) from None
        if sep and not name.strip():
            raise InvalidBreakpointConfiguration(
                f"Breakpoint name cannot be empty: {entry!r}", context={"entry": entry}
            )
        if threshold.is_integer():
            threshold = int(threshold)
        result.append(Breakpoint(threshold, name.strip() if sep else None))
    if not result:
        raise InvalidBreakpointConfiguration("Breakpoint list is empty", context={"text": text})
    return tuple(result)


def load_breakpoints(environ: Mapping[str, str] | None = None) -> Tuple[Breakpoint, ...]:
    """Return breakpoints from ``RESPONSIVE_BREAKPOINTS`` or the default scale."""
    env = os.environ if environ is None else environ
    raw = env.get(BREAKPOINTS_ENV_VAR)
    if raw is None or not raw.strip():
        return DEFAULT_BREAKPOINTS
    return parse_breakpoints(raw)
