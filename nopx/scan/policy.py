"""Ignore policy deciding which pixel literals are left alone."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import math
from typing import Literal, TypeAlias

from nopx.convert import parse_magnitude

IgnoreKind: TypeAlias = Literal["none", "threshold", "exact", "combined"]


@dataclass(frozen=True, slots=True)
class IgnorePolicy:
    """Threshold and exact-value exclusion behind one record.

    A literal is ignored when its magnitude is <= `threshold` (both finite),
    or when its raw text is one of `excluded_values`. Either rule is enough.
    """

    threshold: float | None = None
    excluded_values: frozenset[str] = frozenset()

    @staticmethod
    def by_threshold(threshold: float) -> "IgnorePolicy":
        return IgnorePolicy(threshold=threshold)

    @staticmethod
    def by_exact(values: Iterable[str]) -> "IgnorePolicy":
        return IgnorePolicy(excluded_values=frozenset(values))

    @property
    def kind(self) -> IgnoreKind:
        if self.threshold is not None and self.excluded_values:
            return "combined"
        if self.threshold is not None:
            return "threshold"
        if self.excluded_values:
            return "exact"
        return "none"

    def ignores(self, raw_value: str, magnitude: float) -> bool:
        if raw_value in self.excluded_values:
            return True
        if self.threshold is None:
            return False
        return math.isfinite(magnitude) and math.isfinite(self.threshold) and magnitude <= self.threshold

    def ignores_raw(self, raw_value: str) -> bool:
        return self.ignores(raw_value, parse_magnitude(raw_value))


KEEP_ALL = IgnorePolicy()
