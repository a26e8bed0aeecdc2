"""Breakpoint observer.

Keeps a breakpoint registry snapshot current for a widget. Measuring the
widget stays with Qt: on every resize the observer reads the widget size,
builds a fresh ``BreakpointRegistry`` (landscape when wider than tall) and
publishes it as a ``RegistryChange`` on the EventBus (see ``event_bus`` for
the two events and when each fires).

The resize filter is a child of the observed widget, so it dies with the
widget; the observer keeps no per-widget state.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PyQt6.QtCore import QEvent, QObject

from responsive.design.breakpoints import Breakpoint, BreakpointRegistry, Orientation

from .event_bus import EventBus, RegistryChange

_logger = logging.getLogger(__name__)

__all__ = ["BreakpointObserver", "orientation_for"]


def orientation_for(width: float, height: float) -> Orientation:
    return Orientation.LANDSCAPE if width > height else Orientation.PORTRAIT


class _ResizeFilter(QObject):
    def __init__(self, parent: QObject, observer: "BreakpointObserver"):
        super().__init__(parent)
        self.observer = observer

    def eventFilter(self, watched, event):  # type: ignore[override]
        if event.type() == QEvent.Type.Resize:
            self.observer.measure(watched)
        return False


class BreakpointObserver:
    """Publishes registry snapshots derived from widget sizes."""

    def __init__(self, breakpoints: Sequence[Breakpoint], bus: EventBus | None = None):
        # Validate once up front; every snapshot reuses the same ordered set.
        self._template = BreakpointRegistry(screen_width=0, breakpoints=tuple(breakpoints))
        self._bus = bus or EventBus()
        self._current: Optional[BreakpointRegistry] = None

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def current(self) -> Optional[BreakpointRegistry]:
        """Last snapshot, or None before the first measurement."""
        return self._current

    def snapshot_for(self, width: float, height: float) -> BreakpointRegistry:
        return BreakpointRegistry(
            screen_width=max(0, width),
            breakpoints=self._template.breakpoints,
            orientation=orientation_for(width, height),
        )

    def update(
        self, width: float, height: float, source: QObject | None = None
    ) -> BreakpointRegistry:
        snapshot = self.snapshot_for(width, height)
        previous = self._current
        if previous == snapshot:
            return snapshot
        self._current = snapshot
        change = RegistryChange(registry=snapshot, previous=previous, source=source)
        if change.breakpoint_changed:
            _logger.info(
                "breakpoint changed to %s (%s, width=%s)",
                snapshot.active_breakpoint_name() or "<unnamed>",
                snapshot.orientation.value,
                snapshot.screen_width,
            )
        self._bus.publish_change(change)
        return snapshot

    def _filter_for(self, widget: QObject) -> Optional[_ResizeFilter]:
        for child in widget.children():
            if isinstance(child, _ResizeFilter) and child.observer is self:
                return child
        return None

    def is_observing(self, widget: QObject) -> bool:
        return self._filter_for(widget) is not None

    def observe(self, widget: QObject) -> None:
        """Track ``widget`` resizes; evaluates the current size immediately."""
        if self._filter_for(widget) is not None:
            return
        filt = _ResizeFilter(widget, self)
        widget.installEventFilter(filt)
        self.measure(widget)

    def unobserve(self, widget: QObject) -> None:
        filt = self._filter_for(widget)
        if filt is None:
            return
        widget.removeEventFilter(filt)
        filt.setParent(None)
        filt.deleteLater()

    def measure(self, widget) -> BreakpointRegistry:
        return self.update(widget.width(), widget.height(), widget)
