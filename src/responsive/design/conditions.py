"""Conditional value candidates.

A ``Condition`` pairs one comparison against the breakpoint registry with the
value to yield while that comparison holds. Compare by an explicit numeric
``breakpoint`` or by the ``name`` of a registry breakpoint; ``EQUALS`` only
makes sense against a named breakpoint.

Usage:
    Condition.smaller_than(name="TABLET", value=8)
    Condition.larger_than(breakpoint=1024, value=24, landscape_value=32)
    Condition.equals("TABLET", value=16)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import InvalidConditionConfiguration

T = TypeVar("T")

__all__ = ["ComparisonKind", "Condition"]


class ComparisonKind(str, Enum):
    EQUALS = "equals"
    SMALLER_THAN = "smaller_than"
    LARGER_THAN = "larger_than"


@dataclass(frozen=True)
class Condition(Generic[T]):
    """One candidate rule for a responsive value.

    Attributes
    ----------
    kind: ComparisonKind
        How the width is compared against the referenced breakpoint.
    breakpoint: float | None
        Explicit numeric threshold, used when no ``name`` is given.
    name: str | None
        Reference to a named breakpoint of the registry. Checked instead of
        ``breakpoint`` when both are set.
    value: T | None
        Value yielded while the condition is active. ``None`` is a deliberate
        "no value" outcome, not a request for the default.
    landscape_value: T | None
        Replaces ``value`` while the registry reports landscape orientation.
    """

    kind: ComparisonKind
    breakpoint: float | None = None
    name: str | None = None
    value: T | None = None
    landscape_value: T | None = None

    def __post_init__(self) -> None:
        try:
            kind = ComparisonKind(self.kind)
        except ValueError:
            raise InvalidConditionConfiguration(
                f"Unknown comparison kind: {self.kind!r}", context={"kind": self.kind}
            ) from None
        object.__setattr__(self, "kind", kind)
        if self.breakpoint is None and self.name is None:
            raise InvalidConditionConfiguration(
                f"{self!r} needs a breakpoint threshold or a breakpoint name",
                context={"condition": self},
            )
        if self.kind is ComparisonKind.EQUALS and self.name is None:
            raise InvalidConditionConfiguration(
                f"{self!r} compares for equality and must reference a named breakpoint",
                context={"condition": self},
            )

    @classmethod
    def equals(
        cls, name: str, *, value: T | None = None, landscape_value: T | None = None
    ) -> "Condition[T]":
        return cls(ComparisonKind.EQUALS, name=name, value=value, landscape_value=landscape_value)

    @classmethod
    def smaller_than(
        cls,
        *,
        breakpoint: float | None = None,
        name: str | None = None,
        value: T | None = None,
        landscape_value: T | None = None,
    ) -> "Condition[T]":
        return cls(
            ComparisonKind.SMALLER_THAN,
            breakpoint=breakpoint,
            name=name,
            value=value,
            landscape_value=landscape_value,
        )

    @classmethod
    def larger_than(
        cls,
        *,
        breakpoint: float | None = None,
        name: str | None = None,
        value: T | None = None,
        landscape_value: T | None = None,
    ) -> "Condition[T]":
        return cls(
            ComparisonKind.LARGER_THAN,
            breakpoint=breakpoint,
            name=name,
            value=value,
            landscape_value=landscape_value,
        )

    @property
    def is_named(self) -> bool:
        return self.name is not None

    def replace(self, **changes: Any) -> "Condition[Any]":
        """Return a validated copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)
