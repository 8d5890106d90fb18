"""Goodness-of-fit metrics for hash bucket distributions."""

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import numpy as np
from scipy import stats

from hash_distribution.hashing.string_hashes import NUM_BUCKETS, NamedHashFunction

DEGREES_OF_FREEDOM = NUM_BUCKETS - 1


class EmptyWordListError(ValueError):
    """Raised when a statistic is requested for zero words."""


@dataclass
class EvaluationResult:
    """Outcome of hashing a word list with one candidate function."""
    name: str
    chi_square: float
    p_value: float
    n_words: int
    counts: np.ndarray = field(repr=False, compare=False)  # shape (NUM_BUCKETS,)

    @property
    def occupied_buckets(self) -> int:
        """Number of buckets that received at least one word."""
        return int(np.count_nonzero(self.counts))

    @property
    def max_bucket_count(self) -> int:
        return int(self.counts.max())


def bucket_counts(
    words: Sequence[str],
    hash_func: Callable[[str], int],
    n_buckets: int = NUM_BUCKETS,
) -> np.ndarray:
    """
    Tally how many words hash to each bucket.

    Args:
        words: Word list
        hash_func: Function mapping a word to a bucket index
        n_buckets: Size of the bucket space

    Returns:
        Counts of shape (n_buckets,) with dtype int64, summing to len(words)

    Raises:
        ValueError: If a hash value falls outside [0, n_buckets)
    """
    hashes = np.fromiter(
        (hash_func(word) for word in words),
        dtype=np.int64,
        count=len(words),
    )

    if hashes.size > 0 and (hashes.min() < 0 or hashes.max() >= n_buckets):
        raise ValueError(
            f"Hash values must lie in [0, {n_buckets}), "
            f"got range [{hashes.min()}, {hashes.max()}]"
        )

    return np.bincount(hashes, minlength=n_buckets).astype(np.int64)


def compute_chi_square(counts: np.ndarray, n_words: Optional[int] = None) -> float:
    """
    Pearson chi-square statistic against a uniform distribution.

    chi2 = sum((observed - expected)^2 / expected) with
    expected = n_words / n_buckets.

    Args:
        counts: Bucket counts of shape (n_buckets,)
        n_words: Total number of hashed words (default: counts.sum())

    Returns:
        Non-negative chi-square statistic

    Raises:
        EmptyWordListError: If there are no words (expected count is zero)
    """
    if counts.ndim != 1:
        raise ValueError(f"Expected 1D counts, got shape {counts.shape}")

    if n_words is None:
        n_words = int(counts.sum())

    if n_words <= 0:
        raise EmptyWordListError("Cannot compute chi-square for an empty word list")

    expected = n_words / counts.shape[0]
    deviations = counts.astype(np.float64) - expected

    return float(np.sum(deviations ** 2) / expected)


def compute_p_value(chi_square: float, df: int = DEGREES_OF_FREEDOM) -> float:
    """
    Cumulative probability of the chi-square distribution at the statistic.

    Returns P(X <= chi_square) for X ~ chi2(df), evaluated through the
    regularized lower incomplete gamma function (scipy.stats.chi2.cdf),
    which stays accurate for large df.

    Args:
        chi_square: Chi-square statistic (>= 0)
        df: Degrees of freedom (default: 65535)

    Returns:
        Probability in [0, 1]
    """
    if df <= 0:
        raise ValueError(f"df must be positive, got {df}")
    if chi_square < 0 or np.isnan(chi_square):
        raise ValueError(f"chi_square must be >= 0, got {chi_square}")

    p = stats.chi2.cdf(chi_square, df)
    return float(np.clip(p, 0.0, 1.0))


def evaluate_hash_function(
    words: Sequence[str],
    named_hash: NamedHashFunction,
) -> EvaluationResult:
    """
    Hash every word, then score the bucket distribution.

    Args:
        words: Non-empty word list
        named_hash: Candidate function to evaluate

    Returns:
        EvaluationResult with the statistic, p-value and histogram

    Raises:
        EmptyWordListError: If words is empty
    """
    counts = bucket_counts(words, named_hash.func)
    n_words = len(words)

    chi_square = compute_chi_square(counts, n_words)
    p_value = compute_p_value(chi_square)

    return EvaluationResult(
        name=named_hash.name,
        chi_square=chi_square,
        p_value=p_value,
        n_words=n_words,
        counts=counts,
    )
