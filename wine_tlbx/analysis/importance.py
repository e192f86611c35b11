"""Separability score per feature from per-class means and standard deviations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd

from wine_tlbx.data.cultivar import CultivarClass

from .base_analyser import BaseAnalyser
from .partitioner import ClassGroups
from .statistics import describe


@dataclass(frozen=True)
class ScoreEntry:
    """Importance score of one feature. May be ``inf`` or ``nan`` for degenerate features."""

    name: str
    score: float


@dataclass(frozen=True)
class FeatureStatistics:
    """Per-class statistics and the derived score for one feature.

    Attributes:
        feature: Feature (column) name.
        means: Mean per cultivar, in enum order.
        stddevs: Sample standard deviation per cultivar, in enum order.
        mean_spread: Largest minus smallest class mean.
        mean_stddev: Average of the class standard deviations.
        importance: ``mean_spread / mean_stddev``.
    """

    feature: str
    means: Mapping[CultivarClass, float]
    stddevs: Mapping[CultivarClass, float]
    mean_spread: float
    mean_stddev: float
    importance: float

    def to_entry(self) -> ScoreEntry:
        return ScoreEntry(name=self.feature, score=self.importance)


def importance_score(means: Sequence[float], stddevs: Sequence[float]) -> float:
    r"""Ratio of the spread of class means to the average within-class spread.

    .. math:: \frac{\max_k \mu_k - \min_k \mu_k}{\frac{1}{K}\sum_k \sigma_k}

    A cheap signal-to-noise analogue: features whose class means lie far apart
    relative to their typical within-class spread score higher. It is a heuristic,
    not a significance test.

    Division follows IEEE semantics: a zero average standard deviation yields
    ``inf`` (or ``nan`` when the means coincide too), and ``nan`` inputs propagate.
    """
    return _ratio(*_spread_and_avg_std(means, stddevs))


def _ratio(spread: np.float64, avg_std: np.float64) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(spread / avg_std)


def _spread_and_avg_std(means: Sequence[float], stddevs: Sequence[float]) -> tuple[np.float64, np.float64]:
    mean_arr = np.asarray(means, dtype=np.float64)
    std_arr = np.asarray(stddevs, dtype=np.float64)
    # max/min propagate nan, matching a nan mean poisoning the score
    spread = mean_arr.max() - mean_arr.min()
    avg_std = std_arr.sum() / np.float64(std_arr.size)
    return spread, avg_std


@dataclass(frozen=True)
class ImportanceResult:
    """Importance scoring outputs for reporting and plotting.

    Attributes:
        statistics: Per-feature statistics, in feature declaration order.
        scores: Score entries in the same order (never sorted by value).
        pretty_by_col: Mapping from feature names to presentation labels.
    """

    statistics: tuple[FeatureStatistics, ...]
    scores: tuple[ScoreEntry, ...]
    pretty_by_col: Mapping[str, str]

    def to_frame(self) -> pd.DataFrame:
        """Tidy table with one row per feature (declaration order)."""
        rows = []
        for stats in self.statistics:
            row: dict[str, object] = {"feature": stats.feature}
            row |= {f"mean_{c.value}": stats.means[c] for c in CultivarClass}
            row |= {f"std_{c.value}": stats.stddevs[c] for c in CultivarClass}
            row |= {
                "mean_spread": stats.mean_spread,
                "mean_stddev": stats.mean_stddev,
                "importance": stats.importance,
            }
            rows.append(row)
        return pd.DataFrame(rows)

    def plot(self, **kwargs: object):
        """Plot the scores as a bar chart using the plotting helper."""
        from wine_tlbx.plotting.importance_plots import plot_feature_importance  # noqa: PLC0415

        return plot_feature_importance(self.scores, **kwargs)


class ImportanceScorer(BaseAnalyser):
    """Score every feature by how well its class means separate.

    For each feature and each cultivar group the mean and sample standard deviation
    are computed (six numbers per feature); see :func:`importance_score` for the ratio.
    Features are processed independently, in declaration order.

    Example:
        >>> from wine_tlbx.data import WineDataset
        >>> groups = WineDataset.from_csv("wine.csv").make_partitioner().fit().result()
        >>> result = ImportanceScorer(groups).fit().result()
        >>> result.to_frame()[["feature", "importance"]]
    """

    def __init__(self, groups: ClassGroups, features: Sequence[str] | None = None) -> None:
        """Initialize the scorer.

        Args:
            groups: Per-class groups from the partitioner. Every group must be non-empty.
            features: Features to score (defaults to the groups' feature columns, in order).
        """
        self._groups = groups
        self._features = [str(f) for f in features] if features is not None else list(groups.feature_cols)
        self._statistics: tuple[FeatureStatistics, ...] | None = None

    def score_feature(self, feature: str) -> FeatureStatistics:
        """Compute the six class statistics and the score for one feature."""
        means: dict[CultivarClass, float] = {}
        stddevs: dict[CultivarClass, float] = {}
        for cultivar in CultivarClass:
            means[cultivar], stddevs[cultivar] = describe(self._groups[cultivar], feature)

        spread, avg_std = _spread_and_avg_std(list(means.values()), list(stddevs.values()))
        return FeatureStatistics(
            feature=feature,
            means=means,
            stddevs=stddevs,
            mean_spread=float(spread),
            mean_stddev=float(avg_std),
            importance=_ratio(spread, avg_std),
        )

    def fit(self) -> Self:
        self._statistics = tuple(self.score_feature(feature) for feature in self._features)
        return self

    def result(self) -> ImportanceResult:
        if self._statistics is None:
            raise ValueError("Must call fit() before result()")
        return ImportanceResult(
            statistics=self._statistics,
            scores=tuple(stats.to_entry() for stats in self._statistics),
            pretty_by_col={f: self._groups.pretty_by_col.get(f, f) for f in self._features},
        )
