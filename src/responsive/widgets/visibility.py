"""Apply responsive visibility to a Qt widget."""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtWidgets import QWidget

from responsive.design.breakpoints import BreakpointRegistry
from responsive.design.conditions import Condition
from responsive.design.consumers import resolve_visibility
from responsive.services.breakpoint_observer import BreakpointObserver
from responsive.services.event_bus import ResponsiveEvent, Subscription

__all__ = ["apply_visibility", "bind_visibility"]


def apply_visibility(
    widget: QWidget,
    registry: BreakpointRegistry | None,
    *,
    visible: bool = True,
    visible_conditions: Sequence[Condition] = (),
    hidden_conditions: Sequence[Condition] = (),
) -> bool:
    shown = resolve_visibility(
        registry,
        visible=visible,
        visible_conditions=visible_conditions,
        hidden_conditions=hidden_conditions,
    )
    widget.setVisible(shown)
    return shown


def bind_visibility(
    widget: QWidget,
    observer: BreakpointObserver,
    *,
    visible: bool = True,
    visible_conditions: Sequence[Condition] = (),
    hidden_conditions: Sequence[Condition] = (),
) -> Subscription:
    """Re-apply visibility on every registry update published by ``observer``.

    Applies immediately when the observer already holds a snapshot. The
    subscription is cancelled when ``widget`` is destroyed.
    """
    visible_conditions = tuple(visible_conditions)
    hidden_conditions = tuple(hidden_conditions)

    def _apply(registry: BreakpointRegistry) -> None:
        apply_visibility(
            widget,
            registry,
            visible=visible,
            visible_conditions=visible_conditions,
            hidden_conditions=hidden_conditions,
        )

    if observer.current is not None:
        _apply(observer.current)
    bus = observer.bus
    sub = bus.subscribe(
        ResponsiveEvent.REGISTRY_UPDATED, lambda evt: _apply(evt.payload.registry)
    )
    widget.destroyed.connect(lambda *_: bus.unsubscribe(sub))
    return sub
