"""Closed set of cultivar class labels."""

from __future__ import annotations

import math
from enum import IntEnum


class CultivarClass(IntEnum):
    """The three wine cultivars used as grouping key."""

    CLASS_1 = 1
    CLASS_2 = 2
    CLASS_3 = 3

    @classmethod
    def from_label(cls, raw: float) -> CultivarClass | None:
        """Parse a raw label value into a cultivar class.

        Labels are stored as floats in the raw file, so ``1.0`` maps to
        :attr:`CLASS_1`. Anything that is not exactly 1, 2 or 3 (including
        ``nan`` and fractional values) is unrecognized.

        Returns:
            The matching class or ``None`` if the label is not recognized.
        """
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(value) or not value.is_integer():
            return None
        try:
            return cls(int(value))
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return f"Class {self.value}"
