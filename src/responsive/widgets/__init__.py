"""PyQt6 appliers for resolved responsive values."""

from .visibility import apply_visibility, bind_visibility  # noqa: F401
from .constraints import apply_constraints, QWIDGETSIZE_MAX  # noqa: F401
