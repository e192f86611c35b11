r"""Per-group descriptive statistics for a single feature.

All functions are pure: they read one column of a group and never modify it.
The standard deviation is the Bessel-corrected sample estimate

.. math:: s = \sqrt{\frac{1}{n - 1} \sum_i (x_i - \bar{x})^2}

and shares its :math:`\bar{x}` with :func:`mean`. A single-member group has
no spread estimate: :func:`stddev` then returns ``nan`` instead of raising, so
callers can see the degenerate feature downstream.
"""

from __future__ import annotations

import numpy as np
import pandas as pd


class EmptyGroupError(ValueError):
    """Raised when a statistic is requested for a group without samples."""


def _values(group: pd.DataFrame, feature: str) -> np.ndarray:
    values = group[str(feature)].to_numpy(dtype=np.float64)
    if values.size == 0:
        raise EmptyGroupError(f"Cannot compute statistics of '{feature}' over an empty group")
    return values


def _mean(values: np.ndarray) -> float:
    return float(values.sum() / values.size)


def _stddev(values: np.ndarray, mean: float) -> float:
    squared_diffs = np.square(values - mean).sum()
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sqrt(squared_diffs / np.float64(values.size - 1)))


def mean(group: pd.DataFrame, feature: str) -> float:
    """Arithmetic mean of ``feature`` over ``group``.

    Raises:
        EmptyGroupError: If ``group`` has no rows.
    """
    return _mean(_values(group, feature))


def stddev(group: pd.DataFrame, feature: str) -> float:
    """Sample standard deviation (``n - 1`` denominator) of ``feature`` over ``group``.

    Returns ``nan`` for a single-member group.

    Raises:
        EmptyGroupError: If ``group`` has no rows.
    """
    return describe(group, feature)[1]


def describe(group: pd.DataFrame, feature: str) -> tuple[float, float]:
    """Return ``(mean, stddev)`` of ``feature`` with the mean computed once."""
    values = _values(group, feature)
    group_mean = _mean(values)
    return group_mean, _stddev(values, group_mean)
