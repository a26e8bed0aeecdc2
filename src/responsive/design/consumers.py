"""Resolved-value consumers: visibility toggles and size constraints.

Thin applications of the resolver. They only decide *what* to apply; the Qt
appliers in ``responsive.widgets`` push the decision onto a widget.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .breakpoints import BreakpointRegistry
from .conditions import Condition
from .resolver import ResponsiveValue

__all__ = [
    "SizeConstraints",
    "resolve_visibility",
    "resolve_constraints",
]


@dataclass(frozen=True)
class SizeConstraints:
    """Box constraints in pixels; ``None`` leaves that bound unconstrained."""

    min_width: int | None = None
    max_width: int | None = None
    min_height: int | None = None
    max_height: int | None = None

    def __post_init__(self) -> None:
        for lo, hi in ((self.min_width, self.max_width), (self.min_height, self.max_height)):
            if lo is not None and lo < 0:
                raise ValueError("Minimum size must be non-negative")
            if lo is not None and hi is not None and lo > hi:
                raise ValueError(f"Minimum {lo} exceeds maximum {hi}")

    @classmethod
    def tight_width(cls, width: int) -> "SizeConstraints":
        return cls(min_width=width, max_width=width)


def resolve_visibility(
    registry: BreakpointRegistry | None,
    *,
    visible: bool = True,
    visible_conditions: Sequence[Condition] = (),
    hidden_conditions: Sequence[Condition] = (),
) -> bool:
    """Return whether an element should be shown.

    Hidden conditions are declared after visible ones, so when both match the
    element is hidden.
    """
    conditions: List[Condition[bool]] = [c.replace(value=True) for c in visible_conditions]
    conditions.extend(c.replace(value=False) for c in hidden_conditions)
    resolved = ResponsiveValue(conditions, visible, registry).value
    return bool(resolved)


def resolve_constraints(
    registry: BreakpointRegistry | None,
    *,
    constraint: SizeConstraints | None = None,
    conditional_constraints: Sequence[Condition[SizeConstraints]] = (),
) -> SizeConstraints | None:
    return ResponsiveValue(list(conditional_constraints), constraint, registry).value
