"""Dataset loader for the headerless UCI Wine CSV file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from wine_tlbx.utils.paths import get_dataset_path

from .base_dataset import BaseDataset
from .sample import WineSample
from .wine_columns import WineColumn as Col


logger = logging.getLogger(__name__)


class IngestionError(ValueError):
    """Raised when the raw file cannot be parsed into complete wine samples."""


class WineDataset(BaseDataset):
    """Loading and validation for the [Wine recognition dataset](https://archive.ics.uci.edu/dataset/109/wine).

    Every row holds a class label followed by thirteen measurements. A row that does not
    fit this shape aborts loading with an :class:`IngestionError`; the dataset never holds
    partially-populated samples.

    **Example workflow**:
    >>> from wine_tlbx.data import WineDataset
    >>> from wine_tlbx.analysis import ScoreReporter
    >>> ds = WineDataset.from_csv("wine.csv")
    >>> groups = ds.make_partitioner().fit().result()
    >>> groups.sizes
    >>> result = ds.make_importance_scorer().fit().result()
    >>> scores = ScoreReporter().report(result)
    >>> fig = result.plot()
    """

    Col = Col

    @classmethod
    def from_csv(cls, csv_path: str | Path | None = None) -> WineDataset:
        """Load and validate the wine dataset from a headerless CSV file.

        Args:
            csv_path: Path to the CSV file. Defaults to ``wine.csv`` in the working directory.

        Returns:
            WineDataset instance with one float column per schema column, in file order.

        Raises:
            IngestionError: If the file is missing, unreadable, empty, or any row is malformed.
        """
        csv_path = get_dataset_path("wine") if csv_path is None else Path(csv_path)
        if not csv_path.is_file():
            raise IngestionError(f"CSV file not found at: {csv_path}")

        try:
            raw_df = pd.read_csv(csv_path, header=None, skipinitialspace=True)
        except pd.errors.EmptyDataError as exc:
            raise IngestionError(f"CSV file is empty: {csv_path}") from exc
        except pd.errors.ParserError as exc:
            raise IngestionError(f"Malformed row in {csv_path}: {exc}") from exc
        except (UnicodeDecodeError, OSError) as exc:
            raise IngestionError(f"Cannot read {csv_path}: {exc}") from exc

        wine_df = raw_df.pipe(cls._check_shape, csv_path=csv_path).pipe(cls._convert_data_types, csv_path=csv_path)
        logger.info("Loaded %d samples from %s", len(wine_df), csv_path)
        return cls(df=wine_df)

    @classmethod
    def from_samples(cls, samples: Iterable[WineSample]) -> WineDataset:
        """Build a dataset from already-typed samples, preserving their order."""
        rows = [sample.as_tuple() for sample in samples]
        columns = [str(col) for col in Col.csv_columns()]
        return cls(df=pd.DataFrame(rows, columns=columns, dtype="float64"))

    def samples(self) -> list[WineSample]:
        """Return the rows as immutable samples, in file order."""
        columns = [str(col) for col in Col.csv_columns()]
        return [WineSample.from_values(row) for row in self.df.loc[:, columns].itertuples(index=False, name=None)]

    @staticmethod
    def _check_shape(df: pd.DataFrame, *, csv_path: Path) -> pd.DataFrame:
        """Ensure the file has exactly one column per schema column and name them."""
        expected = len(Col.csv_columns())
        if df.shape[1] != expected:
            raise IngestionError(f"Expected {expected} columns in {csv_path}, found {df.shape[1]}")
        return df.set_axis([str(col) for col in Col.csv_columns()], axis=1)

    @staticmethod
    def _convert_data_types(df: pd.DataFrame, *, csv_path: Path) -> pd.DataFrame:
        """Convert every column to float64, rejecting empty or non-numeric fields.

        Short rows are padded with NaN by the CSV reader, so they surface here as well.
        """
        converted = df.apply(pd.to_numeric, errors="coerce").astype("float64")
        bad = converted.isna()
        if bad.to_numpy().any():
            bad_rows = bad.any(axis=1)
            details = [
                f"row {row + 1}: {', '.join(bad.columns[bad.loc[row].to_numpy()])}"
                for row in bad.index[bad_rows.to_numpy()][:10]
            ]
            raise IngestionError(
                f"Non-numeric or missing values in {csv_path} ({int(bad_rows.sum())} rows): " + "; ".join(details),
            )
        return converted.reset_index(drop=True)
