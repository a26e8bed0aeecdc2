"""Responsive value resolution.

Picks the single active ``Condition`` out of a caller's list and extracts the
value to use right now.

Precedence
----------
Conditions are walked in reverse declaration order and the first match wins,
so callers append more specific overrides later in their list. Per kind:

 - EQUALS: the active breakpoint of the registry carries the condition's name
   (the name must exist in the registry).
 - SMALLER_THAN: named conditions ask ``registry.is_smaller_than(name)``;
   unnamed ones compare ``screen_width < breakpoint``.
 - LARGER_THAN: symmetric with ``>``.

An active condition yields its ``landscape_value`` in landscape orientation
when one is declared, else its ``value`` (even when that is ``None``). Only
when nothing matches does the caller's default apply.

Configuration mistakes (named conditions without a registry, names the
registry does not know) raise instead of resolving to the default.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, Sequence, Tuple, TypeVar

from .breakpoints import BreakpointRegistry
from .conditions import ComparisonKind, Condition
from .errors import MissingRegistryContext

_logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "ResponsiveValue",
    "find_active_condition",
    "is_active",
    "resolve",
]


def is_active(condition: Condition[T], registry: BreakpointRegistry) -> bool:
    """Return whether a single condition holds for the registry snapshot."""
    if condition.kind is ComparisonKind.EQUALS:
        # raises UnknownBreakpointName for names the registry lacks
        return registry.equals(condition.name)
    if condition.kind is ComparisonKind.SMALLER_THAN:
        if condition.name is not None:
            return registry.is_smaller_than(condition.name)
        return condition.breakpoint is not None and registry.screen_width < condition.breakpoint
    if condition.kind is ComparisonKind.LARGER_THAN:
        if condition.name is not None:
            return registry.is_larger_than(condition.name)
        return condition.breakpoint is not None and registry.screen_width > condition.breakpoint
    return False


def find_active_condition(
    conditions: Sequence[Condition[T]], registry: BreakpointRegistry
) -> Optional[Condition[T]]:
    """Return the last-declared condition that holds, or None."""
    for condition in reversed(conditions):
        if is_active(condition, registry):
            return condition
    return None


class ResponsiveValue(Generic[T]):
    """Value resolved from conditions against one registry snapshot.

    Everything is computed at construction; instances are read-only.
    """

    __slots__ = ("_conditions", "_default", "_registry", "_active", "_value")

    def __init__(
        self,
        conditions: Sequence[Condition[T]],
        default: T | None = None,
        registry: BreakpointRegistry | None = None,
    ) -> None:
        self._conditions: Tuple[Condition[T], ...] = tuple(conditions)
        self._default = default
        self._registry = _require_registry(self._conditions, registry)
        if self._registry is None:
            self._active: Optional[Condition[T]] = None
            self._value = default
            return
        self._active = find_active_condition(self._conditions, self._registry)
        self._value = self._extract(self._active, self._registry, default)

    @staticmethod
    def _extract(
        active: Optional[Condition[T]], registry: BreakpointRegistry, default: T | None
    ) -> T | None:
        if active is None:
            _logger.debug(
                "no active condition at width=%s; using default %r",
                registry.screen_width,
                default,
            )
            return default
        _logger.debug("active condition at width=%s: %r", registry.screen_width, active)
        if registry.is_landscape and active.landscape_value is not None:
            return active.landscape_value
        return active.value

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def default(self) -> T | None:
        return self._default

    @property
    def conditions(self) -> Tuple[Condition[T], ...]:
        return self._conditions

    @property
    def active_condition(self) -> Optional[Condition[T]]:
        return self._active

    @property
    def registry(self) -> BreakpointRegistry | None:
        return self._registry

    def __repr__(self) -> str:
        return f"ResponsiveValue(value={self._value!r}, active={self._active!r})"


def resolve(
    conditions: Sequence[Condition[T]],
    default: T | None = None,
    registry: BreakpointRegistry | None = None,
) -> T | None:
    """Resolve ``conditions`` against ``registry`` and return the winning value."""
    return ResponsiveValue(conditions, default, registry).value


def _require_registry(
    conditions: Tuple[Condition[T], ...], registry: BreakpointRegistry | None
) -> BreakpointRegistry | None:
    if registry is not None:
        return registry
    named = next((c for c in conditions if c.name is not None), None)
    if named is not None:
        raise MissingRegistryContext(
            f"{named!r} references breakpoint {named.name!r} but no breakpoint registry "
            "was supplied; pass a registry or remove breakpoint name references",
            context={"condition": named},
        )
    if conditions:
        raise MissingRegistryContext(
            f"{conditions[0]!r} compares against the screen width but no breakpoint "
            "registry was supplied",
            context={"condition": conditions[0]},
        )
    return None
