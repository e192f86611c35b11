"""Command line entry point: score the wine features and save the chart.

Usage::

    wine-importance                      # wine.csv -> feature_importance.png
    wine-importance data/wine.csv -o out/importance.png -v
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from wine_tlbx.analysis.statistics import EmptyGroupError
from wine_tlbx.data.wine_dataset import IngestionError
from wine_tlbx.pipeline import PipelineConfig, run_pipeline
from wine_tlbx.utils.paths import get_dataset_path, get_output_path


logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wine-importance",
        description="Score how well each wine attribute separates the three cultivars and plot the scores.",
    )
    p.add_argument(
        "csv_path",
        nargs="?",
        default=None,
        help="Headerless wine CSV (label + 13 attributes). Defaults to wine.csv in the working directory.",
    )
    p.add_argument(
        "-o",
        "--output",
        default=None,
        help="Where to write the bar chart. Defaults to feature_importance.png in the working directory.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = PipelineConfig(
        csv_path=Path(args.csv_path) if args.csv_path else get_dataset_path("wine"),
        output_path=Path(args.output) if args.output else get_output_path(),
    )
    try:
        run_pipeline(config)
    except (IngestionError, EmptyGroupError) as exc:
        logger.error("%s", exc)
        return 1
    except OSError:
        logger.exception("Failed to write chart to %s", config.output_path)
        return 1
    return 0
