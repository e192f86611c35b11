"""Data module for dataset classes."""

from .cultivar import CultivarClass
from .sample import WineSample
from .wine_columns import WineColumn as WineCol
from .wine_dataset import IngestionError, WineDataset


__all__ = ["CultivarClass", "IngestionError", "WineCol", "WineDataset", "WineSample"]
