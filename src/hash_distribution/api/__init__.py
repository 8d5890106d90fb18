"""Entry-point API for running hash distribution evaluations."""

from hash_distribution.api.evaluator import DistributionEvaluator

__all__ = ["DistributionEvaluator"]
