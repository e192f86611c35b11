from .paths import get_data_dir, get_dataset_path, get_output_path
from .plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_PLOT_CFG",
    "PlottingConfig",
    "get_data_dir",
    "get_dataset_path",
    "get_output_path",
]
