"""Plotting utilities for data visualization."""

from .importance_plots import plot_feature_importance, save_figure


__all__ = [
    "plot_feature_importance",
    "save_figure",
]
