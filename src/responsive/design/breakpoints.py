"""Breakpoint registry snapshots.

A registry is an immutable, point-in-time view of the environment: the current
screen width, the orientation and an ordered set of breakpoints. It answers the
breakpoint-relative questions conditions are built from ("is the width smaller
than TABLET", "which segment contains the width").

Segments
--------
Breakpoints are ordered by ascending threshold. The segment of a breakpoint is
inclusive on its threshold and exclusive on the next breakpoint's threshold;
the final breakpoint is open ended. Widths below every threshold fall into the
unnamed ``BELOW_ALL`` sentinel segment.

Named comparisons are strict: ``is_smaller_than("TABLET")`` is true only for
widths below the TABLET threshold, never at it.

Snapshots are never mutated. Environment adapters build a new snapshot when the
width or orientation changes (see ``with_width`` / ``with_orientation``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Mapping, Tuple

from .errors import InvalidBreakpointConfiguration, UnknownBreakpointName

_logger = logging.getLogger(__name__)

__all__ = [
    "Breakpoint",
    "BreakpointRegistry",
    "Orientation",
    "BELOW_ALL",
]


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class Breakpoint:
    """One boundary in an ordered breakpoint sequence.

    Attributes
    ----------
    threshold: float
        Inclusive lower width boundary of the segment this breakpoint opens.
    name: str | None
        Optional semantic identifier (e.g. "TABLET"). Unnamed breakpoints still
        segment widths but cannot be referenced by conditions.
    """

    threshold: float
    name: str | None = None


BELOW_ALL = Breakpoint(threshold=float("-inf"), name=None)


@dataclass(frozen=True)
class BreakpointRegistry:
    screen_width: float
    breakpoints: Tuple[Breakpoint, ...] = ()
    orientation: Orientation = Orientation.PORTRAIT
    active_breakpoint: Breakpoint = field(init=False)
    _by_name: Dict[str, Breakpoint] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.screen_width < 0:
            raise ValueError("Screen width must be non-negative")
        ordered = tuple(sorted(self.breakpoints, key=lambda b: b.threshold))
        by_name = _index_breakpoints(ordered)
        object.__setattr__(self, "breakpoints", ordered)
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        object.__setattr__(self, "_by_name", by_name)
        object.__setattr__(self, "active_breakpoint", self.breakpoint_for(self.screen_width))

    @classmethod
    def from_mapping(
        cls,
        screen_width: float,
        thresholds: Mapping[str, float],
        *,
        orientation: Orientation = Orientation.PORTRAIT,
    ) -> "BreakpointRegistry":
        """Build a registry from a ``{name: threshold}`` mapping."""
        bps = tuple(Breakpoint(threshold=v, name=k) for k, v in thresholds.items())
        return cls(screen_width=screen_width, breakpoints=bps, orientation=orientation)

    # ------------------------------------------------------------------
    # Derived snapshots
    # ------------------------------------------------------------------
    def with_width(self, screen_width: float) -> "BreakpointRegistry":
        return replace(self, screen_width=screen_width)

    def with_orientation(self, orientation: Orientation) -> "BreakpointRegistry":
        return replace(self, orientation=orientation)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def names(self) -> List[str]:
        return [bp.name for bp in self.breakpoints if bp.name is not None]

    def get(self, name: str) -> Breakpoint:
        bp = self._by_name.get(name)
        if bp is None:
            raise UnknownBreakpointName(
                f"Unknown breakpoint name: {name!r} (known: {', '.join(self.names()) or '-'})",
                context={"name": name, "known": self.names()},
            )
        return bp

    def threshold(self, name: str) -> float:
        return self.get(name).threshold

    def breakpoint_for(self, width: float) -> Breakpoint:
        """Return the breakpoint whose segment contains ``width``."""
        for bp in reversed(self.breakpoints):
            if bp.threshold <= width:
                return bp
        return BELOW_ALL

    def active_breakpoint_name(self) -> str | None:
        return self.active_breakpoint.name

    @property
    def is_landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE

    @property
    def is_portrait(self) -> bool:
        return self.orientation is Orientation.PORTRAIT

    # ------------------------------------------------------------------
    # Named comparisons
    # ------------------------------------------------------------------
    def is_smaller_than(self, name: str) -> bool:
        return self.screen_width < self.threshold(name)

    def is_larger_than(self, name: str) -> bool:
        return self.screen_width > self.threshold(name)

    def is_smaller_or_equal_to(self, name: str) -> bool:
        return self.screen_width <= self.threshold(name)

    def is_larger_or_equal_to(self, name: str) -> bool:
        return self.screen_width >= self.threshold(name)

    def equals(self, name: str) -> bool:
        """True when the active segment is the breakpoint called ``name``."""
        self.get(name)
        return self.active_breakpoint_name() == name

    def between(self, lower: str, upper: str) -> bool:
        """True when ``threshold(lower) <= width < threshold(upper)``."""
        return self.threshold(lower) <= self.screen_width < self.threshold(upper)


def _index_breakpoints(ordered: Tuple[Breakpoint, ...]) -> Dict[str, Breakpoint]:
    by_name: Dict[str, Breakpoint] = {}
    previous: Breakpoint | None = None
    for bp in ordered:
        if bp.threshold < 0:
            raise InvalidBreakpointConfiguration(
                f"Breakpoint {bp.name or '<unnamed>'} threshold cannot be negative",
                context={"breakpoint": bp},
            )
        if previous is not None and bp.threshold == previous.threshold:
            raise InvalidBreakpointConfiguration(
                f"Duplicate breakpoint threshold: {bp.threshold}",
                context={"breakpoint": bp, "previous": previous},
            )
        if bp.name is not None:
            if not bp.name:
                raise InvalidBreakpointConfiguration("Breakpoint name cannot be empty")
            if bp.name in by_name:
                raise InvalidBreakpointConfiguration(
                    f"Duplicate breakpoint name: {bp.name}", context={"name": bp.name}
                )
            by_name[bp.name] = bp
        previous = bp
    _logger.debug("indexed %d breakpoints (%d named)", len(ordered), len(by_name))
    return by_name
