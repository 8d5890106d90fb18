"""Hash Distribution: chi-square evaluation of 16-bit string hash functions."""

__version__ = "0.1.0"

from hash_distribution.api.evaluator import DistributionEvaluator
from hash_distribution.experiments.config import EvaluatorConfig
from hash_distribution.hashing.string_hashes import HASH_FUNCTIONS

__all__ = [
    "DistributionEvaluator",
    "EvaluatorConfig",
    "HASH_FUNCTIONS",
]
