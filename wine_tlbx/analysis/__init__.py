"""Analysis modules: class partitioning, group statistics and importance scoring."""

from .importance import FeatureStatistics, ImportanceResult, ImportanceScorer, ScoreEntry, importance_score
from .partitioner import ClassGroups, ExcludedSample, GroupPartitioner, partition_by_cultivar
from .reporter import ScoreReporter
from .statistics import EmptyGroupError, describe, mean, stddev


__all__ = [
    "ClassGroups",
    "EmptyGroupError",
    "ExcludedSample",
    "FeatureStatistics",
    "GroupPartitioner",
    "ImportanceResult",
    "ImportanceScorer",
    "ScoreEntry",
    "ScoreReporter",
    "describe",
    "importance_score",
    "mean",
    "partition_by_cultivar",
    "stddev",
]
