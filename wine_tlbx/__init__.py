"""Wine toolbox: per-feature cultivar separability scores for the UCI wine dataset."""

from .pipeline import PipelineConfig, PipelineResult, run_pipeline


__all__ = ["PipelineConfig", "PipelineResult", "run_pipeline"]
