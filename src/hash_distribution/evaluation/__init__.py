"""Evaluation metrics for hash bucket distributions."""

from hash_distribution.evaluation.metrics import (
    DEGREES_OF_FREEDOM,
    EmptyWordListError,
    EvaluationResult,
    bucket_counts,
    compute_chi_square,
    compute_p_value,
    evaluate_hash_function,
)

__all__ = [
    "DEGREES_OF_FREEDOM",
    "EmptyWordListError",
    "EvaluationResult",
    "bucket_counts",
    "compute_chi_square",
    "compute_p_value",
    "evaluate_hash_function",
]
