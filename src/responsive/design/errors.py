"""Structured configuration errors for responsive value resolution."""

from __future__ import annotations
from typing import Any


class ResponsiveConfigurationError(Exception):
    """Base class for mistakes in declared breakpoints or conditions."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidConditionConfiguration(ResponsiveConfigurationError):
    """Raised when a Condition violates its construction invariants."""


class InvalidBreakpointConfiguration(ResponsiveConfigurationError):
    """Raised when a breakpoint set is unordered, duplicated or malformed."""


class MissingRegistryContext(ResponsiveConfigurationError):
    """Raised when conditions need a breakpoint registry and none was supplied."""


class UnknownBreakpointName(ResponsiveConfigurationError):
    """Raised when a named breakpoint is not part of the registry."""
