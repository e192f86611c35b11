"""Immutable record model for a single wine sample."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass, fields

from .cultivar import CultivarClass
from .wine_columns import WineColumn


@dataclass(frozen=True)
class WineSample:
    """One row of the wine dataset: a raw class label and thirteen measurements.

    Field names match the :class:`WineColumn` values, so a feature column selects
    its attribute by name. Samples are value types: two samples with the same
    values compare (and hash) equal.
    """

    cultivar: float
    alcohol: float
    malic_acid: float
    ash: float
    alcalinity_of_ash: float
    magnesium: float
    total_phenols: float
    flavanoids: float
    nonflavanoid_phenols: float
    proanthocyanins: float
    color_intensity: float
    hue: float
    od280_od315_of_diluted_wines: float
    proline: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> WineSample:
        """Build a sample from 14 values in file order (label first).

        Raises:
            ValueError: If the number of values does not match the schema.
        """
        expected = len(fields(cls))
        if len(values) != expected:
            raise ValueError(f"Expected {expected} values per sample, got {len(values)}")
        return cls(*(float(v) for v in values))

    @property
    def cultivar_class(self) -> CultivarClass | None:
        """Parsed class label, ``None`` if the label is not recognized."""
        return CultivarClass.from_label(self.cultivar)

    def value(self, column: WineColumn | str) -> float:
        """Return the value of one column."""
        return getattr(self, WineColumn(column).value)

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)

    def as_dict(self) -> dict[str, float]:
        return {col.value: self.value(col) for col in WineColumn.csv_columns()}
