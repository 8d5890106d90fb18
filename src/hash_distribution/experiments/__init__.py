"""Run configuration."""

from hash_distribution.experiments.config import EvaluatorConfig

__all__ = ["EvaluatorConfig"]
