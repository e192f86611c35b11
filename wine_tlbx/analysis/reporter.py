"""Console audit trail for importance scoring."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pprint import pformat
from typing import TextIO

from wine_tlbx.data.cultivar import CultivarClass

from .importance import FeatureStatistics, ImportanceResult, ScoreEntry


logger = logging.getLogger(__name__)


class ScoreReporter:
    """Print per-feature statistics and collect the ordered score list.

    Output for one feature looks like::

        ________ alcohol average ________
          Class 1: 12.000
          Class 2: 13.000
          Class 3: 14.000
        ________ alcohol standard deviation ________
          Class 1: 0.500
          Class 2: 0.500
          Class 3: 0.500
        alcohol Score: 4.0

    Scores are printed with Python's shortest round-trip ``repr`` so ``inf`` and
    ``nan`` remain visible.
    """

    def __init__(self, stream: TextIO | None = None, decimals: int = 3) -> None:
        self._stream = stream
        self.decimals = decimals

    @property
    def stream(self) -> TextIO:
        # resolved lazily so pytest's capsys sees the replaced sys.stdout
        return self._stream if self._stream is not None else sys.stdout

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream)

    def _print_per_class(self, title: str, values: dict[CultivarClass, float]) -> None:
        self._print(f"________ {title} ________")
        for cultivar in CultivarClass:
            self._print(f"  {cultivar.display_name}: {values[cultivar]:.{self.decimals}f}")

    def report_feature(self, stats: FeatureStatistics) -> ScoreEntry:
        """Print the six class statistics and the score of one feature."""
        self._print_per_class(f"{stats.feature} average", dict(stats.means))
        self._print_per_class(f"{stats.feature} standard deviation", dict(stats.stddevs))
        self._print(f"{stats.feature} Score: {stats.importance!r}")
        return stats.to_entry()

    def report_scores(self, entries: Iterable[ScoreEntry]) -> None:
        """Dump the full ordered ``(name, score)`` list."""
        self._print(pformat([(entry.name, entry.score) for entry in entries], sort_dicts=False))

    def report(self, result: ImportanceResult) -> list[ScoreEntry]:
        """Report every feature in declaration order and return the ordered score list."""
        entries = [self.report_feature(stats) for stats in result.statistics]
        self.report_scores(entries)
        logger.info("Scored %d features", len(entries))
        return entries
