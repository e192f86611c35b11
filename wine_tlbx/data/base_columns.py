"""Base column definitions and metadata structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a dataset column.

    Attributes:
        cleaned_name: Standardized column name used in DataFrames.
        dtype: Expected Python/pandas data type as a string.
        pretty_name: Human-readable name for use in plots and reports.
    """

    original_name: str
    """Attribute name as used in the UCI dataset description."""
    cleaned_name: str
    dtype: str
    pretty_name: str


class BaseColumn(StrEnum):
    """Base class for dataset column enums.

    All derived column enums must define a TARGET member holding the class label.

    Subclasses must implement:
    - metadata(): Return ColumnMetadata for each enum member
    - feature_columns(): Return the ordered feature members
    """

    TARGET: str

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement metadata() method")

    @classmethod
    def feature_columns(cls) -> list[BaseColumn]:
        """Get the feature columns in declaration order.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{cls.__name__} must implement feature_columns() method")

    @classmethod
    def csv_columns(cls) -> list[BaseColumn]:
        """Get all columns in the order they appear in the raw file (label first)."""
        return [cls(cls.TARGET), *cls.feature_columns()]  # TARGET is an alias member

    @property
    def pretty_name(self) -> str:
        """Get the human-readable name for plots and reports."""
        return self.metadata().pretty_name

    @property
    def original_name(self) -> str:
        """Get the attribute name from the dataset description."""
        return self.metadata().original_name

    @property
    def dtype_name(self) -> str:
        """Get the expected data type as a string."""
        return self.metadata().dtype
