"""Apply responsive size constraints to a Qt widget."""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtWidgets import QWidget

from responsive.design.breakpoints import BreakpointRegistry
from responsive.design.conditions import Condition
from responsive.design.consumers import SizeConstraints, resolve_constraints

__all__ = ["apply_constraints", "QWIDGETSIZE_MAX"]

QWIDGETSIZE_MAX = (1 << 24) - 1  # Qt's unconstrained maximum extent


def apply_constraints(
    widget: QWidget,
    registry: BreakpointRegistry | None,
    *,
    constraint: SizeConstraints | None = None,
    conditional_constraints: Sequence[Condition[SizeConstraints]] = (),
) -> SizeConstraints | None:
    """Resolve and apply min/max sizes.

    ``None`` bounds leave the widget's current bound untouched; a ``None``
    result resets the widget to Qt's unconstrained defaults.
    """
    resolved = resolve_constraints(
        registry, constraint=constraint, conditional_constraints=conditional_constraints
    )
    if resolved is None:
        widget.setMinimumSize(0, 0)
        widget.setMaximumSize(QWIDGETSIZE_MAX, QWIDGETSIZE_MAX)
        return None
    if resolved.min_width is not None:
        widget.setMinimumWidth(resolved.min_width)
    if resolved.max_width is not None:
        widget.setMaximumWidth(resolved.max_width)
    if resolved.min_height is not None:
        widget.setMinimumHeight(resolved.min_height)
    if resolved.max_height is not None:
        widget.setMaximumHeight(resolved.max_height)
    return resolved
