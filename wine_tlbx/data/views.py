"""Task-specific views over dataset content."""

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset data and related metadata.

    Attributes:
        df: Dataframe slice containing the label and the selected features.
        pretty_by_col: Mapping from normalized column names to display-friendly labels.
        feature_cols: Ordered list of feature names; this order drives all per-feature output.
        label_col: Name of the class label column used for grouping.
    """

    df: pd.DataFrame
    """Dataframe slice containing the relevant columns."""
    pretty_by_col: Mapping[str, str]
    """Mapping from normalized column names to display-friendly labels."""
    feature_cols: list[str]
    label_col: str

    @property
    def features(self) -> pd.DataFrame:
        """Return view over the feature columns, in declaration order."""
        return self.df.loc[:, self.feature_cols]

    @property
    def labels(self) -> pd.Series:
        return self.df[self.label_col]
