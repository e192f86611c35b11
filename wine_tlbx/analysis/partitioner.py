"""Split a dataset into one group per cultivar class."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd

from wine_tlbx.data.cultivar import CultivarClass
from wine_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExcludedSample:
    """A sample left out of every group because its label is not a known cultivar."""

    row: int
    """Position of the sample in the dataset (0-based)."""
    label: float
    """The raw label value as read from the file."""


@dataclass(frozen=True)
class ClassGroups:
    """Per-class groups of a dataset view.

    Attributes:
        groups: One DataFrame per cultivar, keyed in enum order. Rows keep their
            original order and index; every group is present even when empty.
        excluded: Samples whose label matched no cultivar, in dataset order.
        feature_cols: Ordered feature names carried over from the view.
        pretty_by_col: Display labels carried over from the view.
        n_samples: Size of the partitioned dataset.
    """

    groups: Mapping[CultivarClass, pd.DataFrame]
    excluded: tuple[ExcludedSample, ...]
    feature_cols: list[str]
    pretty_by_col: Mapping[str, str]
    n_samples: int

    def __getitem__(self, cultivar: CultivarClass) -> pd.DataFrame:
        return self.groups[cultivar]

    @property
    def sizes(self) -> dict[CultivarClass, int]:
        """Number of samples per cultivar."""
        return {cultivar: len(group) for cultivar, group in self.groups.items()}

    @property
    def total(self) -> int:
        """Number of samples assigned to any group."""
        return sum(self.sizes.values())


def partition_by_cultivar(view: DatasetView) -> ClassGroups:
    """Partition the rows of ``view`` by cultivar label.

    Unrecognized labels are logged at WARNING level (one record per sample) and
    returned in :attr:`ClassGroups.excluded`; they never reach any group.
    """
    labels = view.labels
    parsed = labels.map(CultivarClass.from_label)
    unknown = parsed.isna().to_numpy()

    excluded = tuple(ExcludedSample(row=int(row), label=float(labels.iloc[row])) for row in np.flatnonzero(unknown))
    for sample in excluded:
        logger.warning("Unknown cultivar label %s in row %d; sample excluded", sample.label, sample.row + 1)

    groups = {cultivar: view.df.loc[(parsed == cultivar).to_numpy()] for cultivar in CultivarClass}
    logger.debug(
        "Partitioned %d samples: %s, %d excluded",
        len(labels),
        ", ".join(f"{c.display_name}={len(g)}" for c, g in groups.items()),
        len(excluded),
    )
    return ClassGroups(
        groups=groups,
        excluded=excluded,
        feature_cols=list(view.feature_cols),
        pretty_by_col=dict(view.pretty_by_col),
        n_samples=len(labels),
    )


class GroupPartitioner(BaseAnalyser):
    """Analyzer wrapper around :func:`partition_by_cultivar`.

    Example:
        >>> from wine_tlbx.data import WineDataset
        >>> groups = WineDataset.from_csv("wine.csv").make_partitioner().fit().result()
        >>> groups.sizes, len(groups.excluded)
    """

    def __init__(self, view: DatasetView) -> None:
        self._view = view
        self._groups: ClassGroups | None = None

    def fit(self) -> Self:
        self._groups = partition_by_cultivar(self._view)
        return self

    def result(self) -> ClassGroups:
        if self._groups is None:
            raise ValueError("Must call fit() before result()")
        return self._groups
