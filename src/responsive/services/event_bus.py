"""Synchronous publish/subscribe for registry snapshot changes.

Environment adapters announce every new ``BreakpointRegistry`` snapshot as a
``RegistryChange``; consumers subscribe and re-run resolution against
``change.registry``.

Events:
 - ``REGISTRY_UPDATED``: any change of width or orientation. Conditions with
   numeric thresholds can flip inside one breakpoint segment, so appliers
   re-resolve on this one.
 - ``BREAKPOINT_CHANGED``: additionally published when the active breakpoint
   or the orientation differs from the previous snapshot (or there was none).

Handler failures are isolated: one failing handler doesn't stop the others.
Failures are logged and kept in a bounded ring (``errors``).
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Deque, Dict, List, Optional, Protocol, Tuple

from responsive.design.breakpoints import BreakpointRegistry

_logger = logging.getLogger(__name__)

__all__ = [
    "ResponsiveEvent",
    "RegistryChange",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class ResponsiveEvent(str, Enum):
    REGISTRY_UPDATED = "registry_updated"
    BREAKPOINT_CHANGED = "breakpoint_changed"


@dataclass(frozen=True)
class RegistryChange:
    """Payload of both responsive events.

    Attributes
    ----------
    registry: BreakpointRegistry
        The new snapshot; resolve against this one.
    previous: BreakpointRegistry | None
        Snapshot it replaces, None for the first measurement.
    source: Any
        Object whose size was measured (a QWidget), or None.
    """

    registry: BreakpointRegistry
    previous: Optional[BreakpointRegistry] = None
    source: Any = None

    @property
    def breakpoint_changed(self) -> bool:
        if self.previous is None:
            return True
        return (
            self.previous.active_breakpoint != self.registry.active_breakpoint
            or self.previous.orientation != self.registry.orientation
        )


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass(eq=False)
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Synchronous dispatcher of registry changes.

    The subscription table is guarded by a re-entrant lock; handlers run with
    the lock released so they may subscribe or unsubscribe while handling.
    """

    DEFAULT_ERROR_CAPACITY = 50

    def __init__(self, error_capacity: int = DEFAULT_ERROR_CAPACITY) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: Deque[Tuple[Event, BaseException]] = deque(maxlen=error_capacity)

    def subscribe(
        self, name: str | ResponsiveEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = name.value if isinstance(name, ResponsiveEvent) else name
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event, [])
            if sub in bucket:
                bucket.remove(sub)
            if not bucket:
                self._subs.pop(sub.event, None)
        sub.active = False

    def publish(self, name: str | ResponsiveEvent, payload: Any = None) -> Event:
        key = name.value if isinstance(name, ResponsiveEvent) else name
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        for sub in subs:
            if not sub.active:
                continue
            if sub.once:
                self.unsubscribe(sub)
            try:
                sub.handler(evt)
            except Exception as exc:
                _logger.exception("handler for %s failed", key)
                with self._lock:
                    self._errors.append((evt, exc))
        return evt

    def publish_change(self, change: RegistryChange) -> None:
        """Publish ``REGISTRY_UPDATED`` and, when the segment moved, ``BREAKPOINT_CHANGED``."""
        self.publish(ResponsiveEvent.REGISTRY_UPDATED, change)
        if change.breakpoint_changed:
            self.publish(ResponsiveEvent.BREAKPOINT_CHANGED, change)

    @property
    def errors(self) -> List[Tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
