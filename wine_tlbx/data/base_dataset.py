"""Base dataset class for all dataset implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd


if TYPE_CHECKING:
    from wine_tlbx.analysis.importance import ImportanceScorer
    from wine_tlbx.analysis.partitioner import GroupPartitioner

from .base_columns import BaseColumn
from .views import DatasetView


class BaseDataset(ABC):
    """Abstract base class for dataset handlers used throughout the toolbox."""

    Col: type[BaseColumn]

    def __init__(self, df: pd.DataFrame | None = None) -> None:
        """Initialize the base dataset.

        Args:
            df: Pre-loaded and validated DataFrame (optional)
        """
        self._df: pd.DataFrame | None = df

    @classmethod
    @abstractmethod
    def from_csv(cls, csv_path: str | Path | None = None) -> "BaseDataset":
        """Load dataset from CSV file.

        Args:
            csv_path: Path to the CSV file

        Returns:
            Dataset instance with loaded data
        """
        ...

    def __len__(self) -> int:
        return len(self.df)

    @property
    def df(self) -> pd.DataFrame:
        """Get the loaded DataFrame.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def df_pretty(self) -> pd.DataFrame:
        """Get the DataFrame with pretty column names."""
        return self.df.rename(columns={col: self.get_pretty_name(col) for col in self.df.columns})

    @property
    def numeric_cols(self) -> pd.Index:
        """Get numeric column names."""
        return self.df.select_dtypes(include=["number"]).columns

    def feature_columns(self) -> list[str]:
        """Return the schema's feature columns present in the data, in declaration order."""
        return [str(col) for col in self.Col.feature_columns() if col in self.df.columns]

    def get_pretty_name(self, column_name: str) -> str:
        """Convert column name to pretty name for visualization.

        Args:
            column_name: The cleaned column name

        Returns:
            Pretty name suitable for plot labels and titles
        """
        try:
            col_enum = self.Col(column_name)
        except ValueError:
            # Fallback: capitalize and replace underscores if not in enum
            return column_name.replace("_", " ").title()
        else:
            return str(col_enum.pretty_name)

    def get_pretty_names(self, column_names: list[str] | None = None) -> list[str]:
        """Convert multiple column names to pretty names."""
        return [self.get_pretty_name(name) for name in column_names or self.df.columns.to_list()]

    def view(self, columns: Iterable[str] | None = None) -> DatasetView:
        """Build an immutable dataset view for analyzers and plotting layers.

        Args:
            columns: Feature columns to include in the view (defaults to all features,
                in declaration order). The label column is always included.

        Returns:
            DatasetView containing selected data and metadata
        """
        label_col = str(self.Col.TARGET)
        feature_cols = [str(col) for col in columns] if columns is not None else self.feature_columns()

        missing = [col for col in feature_cols if col not in self.df.columns]
        if missing:
            raise ValueError(f"Columns not found in dataset: {missing}")

        frame = self.df.loc[:, [label_col, *feature_cols]]
        return DatasetView(
            df=frame,
            pretty_by_col={col: self.get_pretty_name(col) for col in [label_col, *feature_cols]},
            feature_cols=feature_cols,
            label_col=label_col,
        )

    def make_partitioner(self, columns: Iterable[str] | None = None) -> "GroupPartitioner":
        """Instantiate a class-label partitioner configured for this dataset."""
        from wine_tlbx.analysis.partitioner import GroupPartitioner

        return GroupPartitioner(self.view(columns=columns))

    def make_importance_scorer(self, columns: Iterable[str] | None = None) -> "ImportanceScorer":
        """Partition the dataset and instantiate an importance scorer over the groups.

        Example:
            >>> from wine_tlbx.data import WineDataset
            >>> ds = WineDataset.from_csv("wine.csv")
            >>> result = ds.make_importance_scorer().fit().result()
            >>> [(entry.name, round(entry.score, 2)) for entry in result.scores][:2]
        """
        from wine_tlbx.analysis.importance import ImportanceScorer

        groups = self.make_partitioner(columns=columns).fit().result()
        return ImportanceScorer(groups)
