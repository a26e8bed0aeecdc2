"""Environment-side services: event bus and breakpoint observer."""

from .event_bus import EventBus, Event, RegistryChange, ResponsiveEvent, Subscription  # noqa: F401
from .breakpoint_observer import BreakpointObserver, orientation_for  # noqa: F401
