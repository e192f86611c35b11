from pathlib import Path
from typing import Literal


__all__ = ["get_data_dir", "get_dataset_path", "get_output_path"]


_DATASET_MAP: dict[str, str] = {
    "wine": "wine.csv",
}

DEFAULT_OUTPUT_NAME = "feature_importance.png"


def get_data_dir() -> Path:
    """Get the directory datasets are read from.

    The wine tool is run next to its data, so this is the current working directory.
    """
    return Path.cwd().resolve()


def get_dataset_path(filename: Literal["wine"] | str) -> Path:  # noqa: PYI051
    """Get the full path to a dataset file in the data directory.

    Args:
        filename: Key to known dataset or custom filename

    Returns:
        Full path to the dataset file. Existence is checked by the loader, which
        reports a missing file as an ingestion error.
    """
    return get_data_dir() / _DATASET_MAP.get(filename, filename)


def get_output_path(filename: str | None = None) -> Path:
    """Get the path the rendered chart is written to (``feature_importance.png`` by default)."""
    return get_data_dir() / (filename or DEFAULT_OUTPUT_NAME)
