"""Responsive design core.

Breakpoint registry snapshots, conditional values and their resolution. Pure
Python, no Qt dependency.
"""

from .errors import (  # noqa: F401
    ResponsiveConfigurationError,
    InvalidConditionConfiguration,
    InvalidBreakpointConfiguration,
    MissingRegistryContext,
    UnknownBreakpointName,
)
from .breakpoints import Breakpoint, BreakpointRegistry, Orientation, BELOW_ALL  # noqa: F401
from .conditions import ComparisonKind, Condition  # noqa: F401
from .resolver import (  # noqa: F401
    ResponsiveValue,
    find_active_condition,
    is_active,
    resolve,
)
from .consumers import (  # noqa: F401
    SizeConstraints,
    resolve_visibility,
    resolve_constraints,
)
