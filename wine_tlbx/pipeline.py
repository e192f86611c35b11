"""End-to-end run: load, partition, score, report, render."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

import matplotlib.pyplot as plt

from wine_tlbx.analysis.importance import ImportanceResult, ImportanceScorer, ScoreEntry
from wine_tlbx.analysis.partitioner import ClassGroups
from wine_tlbx.analysis.reporter import ScoreReporter
from wine_tlbx.data.wine_dataset import WineDataset
from wine_tlbx.plotting.importance_plots import plot_feature_importance, save_figure
from wine_tlbx.utils.paths import get_dataset_path, get_output_path
from wine_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    """Inputs and presentation settings for one run."""

    csv_path: Path = field(default_factory=lambda: get_dataset_path("wine"))
    output_path: Path = field(default_factory=get_output_path)
    decimals: int = 3
    figsize: tuple[float, float] = (8, 6)
    dpi: int = 100
    plot_cfg: PlottingConfig = field(default_factory=lambda: DEFAULT_PLOT_CFG)


@dataclass(frozen=True)
class PipelineResult:
    """What a run produced."""

    groups: ClassGroups
    result: ImportanceResult
    scores: list[ScoreEntry]
    output_path: Path


def run_pipeline(config: PipelineConfig | None = None, stream: TextIO | None = None) -> PipelineResult:
    """Run the whole feature-importance computation once.

    Statistics are printed before the chart is rendered, so a rendering failure
    (which propagates) leaves the console output intact.

    Raises:
        IngestionError: If the dataset cannot be loaded.
        EmptyGroupError: If a cultivar has no samples.
        OSError: If the chart cannot be written.
    """
    config = config or PipelineConfig()

    dataset = WineDataset.from_csv(config.csv_path)
    groups = dataset.make_partitioner().fit().result()
    if groups.excluded:
        logger.warning("%d of %d samples had an unknown cultivar label", len(groups.excluded), len(dataset))

    result = ImportanceScorer(groups).fit().result()
    scores = ScoreReporter(stream=stream, decimals=config.decimals).report(result)

    fig = plot_feature_importance(scores, figsize=config.figsize, dpi=config.dpi, plot_cfg=config.plot_cfg)
    try:
        output_path = save_figure(fig, config.output_path)
    finally:
        plt.close(fig)

    return PipelineResult(groups=groups, result=result, scores=scores, output_path=output_path)
