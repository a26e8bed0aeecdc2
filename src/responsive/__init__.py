"""Responsive values resolved from breakpoint conditions."""

from .design import (  # noqa: F401
    Breakpoint,
    BreakpointRegistry,
    ComparisonKind,
    Condition,
    Orientation,
    ResponsiveValue,
    SizeConstraints,
    resolve,
    resolve_visibility,
    resolve_constraints,
    ResponsiveConfigurationError,
    InvalidConditionConfiguration,
    InvalidBreakpointConfiguration,
    MissingRegistryContext,
    UnknownBreakpointName,
)
