"""Tests for chi-square and p-value metrics."""

import numpy as np
import pytest

from hash_distribution.evaluation.metrics import (
    DEGREES_OF_FREEDOM,
    EmptyWordListError,
    bucket_counts,
    compute_chi_square,
    compute_p_value,
    evaluate_hash_function,
)
from hash_distribution.hashing.string_hashes import (
    HASH_FUNCTIONS,
    NUM_BUCKETS,
    get_hash_function,
)


WORDS = ["alpha", "beta", "gamma", "delta", "", "epsilon", "zeta", "eta", "theta", "alpha"]


@pytest.mark.parametrize("named_hash", HASH_FUNCTIONS, ids=lambda h: h.name)
def test_bucket_counts_sum_to_word_count(named_hash):
    """Every word lands in exactly one bucket."""
    counts = bucket_counts(WORDS, named_hash.func)

    assert counts.shape == (NUM_BUCKETS,)
    assert counts.sum() == len(WORDS)
    assert (counts >= 0).all()


def test_bucket_counts_tally():
    """Counts reflect the hash values of the words."""
    counts = bucket_counts(["a", "bb", "cc", "ddd"], get_hash_function("String Length").func)

    assert counts[1] == 1
    assert counts[2] == 2
    assert counts[3] == 1
    assert counts.sum() == 4


def test_bucket_counts_empty_words():
    """No words gives an all-zero histogram."""
    counts = bucket_counts([], len)
    assert counts.shape == (NUM_BUCKETS,)
    assert counts.sum() == 0


def test_bucket_counts_rejects_out_of_range_hash():
    """Hash values outside the bucket space are an error."""
    with pytest.raises(ValueError, match="Hash values must lie"):
        bucket_counts(["word"], lambda w: NUM_BUCKETS)
    with pytest.raises(ValueError):
        bucket_counts(["word"], lambda w: -1)


def test_chi_square_zero_for_uniform_counts():
    """A perfectly uniform histogram has a chi-square of exactly 0."""
    counts = np.full(NUM_BUCKETS, 3, dtype=np.int64)
    assert compute_chi_square(counts) == 0.0


def test_chi_square_single_bucket():
    """All words in one bucket gives the maximal statistic."""
    counts = np.zeros(NUM_BUCKETS, dtype=np.int64)
    counts[0] = NUM_BUCKETS  # expected = 1 per bucket

    chi2 = compute_chi_square(counts)

    # (65536 - 1)^2 / 1 + 65535 * (0 - 1)^2 / 1
    assert chi2 == pytest.approx(65535.0 ** 2 + 65535.0)
    assert chi2 == pytest.approx(65535.0 * 65536.0)


def test_chi_square_non_negative_and_positive_when_skewed():
    counts = np.zeros(NUM_BUCKETS, dtype=np.int64)
    counts[::2] = 2  # half the buckets hold everything
    chi2 = compute_chi_square(counts)
    assert chi2 > 0.0


def test_chi_square_empty_word_list():
    """Zero words is rejected rather than dividing by zero."""
    with pytest.raises(EmptyWordListError):
        compute_chi_square(np.zeros(NUM_BUCKETS, dtype=np.int64))
    assert issubclass(EmptyWordListError, ValueError)


def test_chi_square_uses_given_word_count():
    counts = np.full(NUM_BUCKETS, 2, dtype=np.int64)
    # Claiming fewer words than tallied shifts the expectation
    assert compute_chi_square(counts, n_words=NUM_BUCKETS) == pytest.approx(NUM_BUCKETS)


def test_p_value_bounds():
    """CDF is 0 at the origin and saturates at 1 far in the tail."""
    assert compute_p_value(0.0) == 0.0
    assert compute_p_value(1e9) == 1.0


def test_p_value_near_half_at_mean():
    """For large df the chi-square distribution is nearly symmetric about df."""
    p = compute_p_value(float(DEGREES_OF_FREEDOM))
    assert 0.49 < p < 0.51


def test_p_value_monotonic():
    values = [compute_p_value(x) for x in [64000.0, 65000.0, 65535.0, 66000.0, 67000.0]]
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_p_value_rejects_invalid_input():
    with pytest.raises(ValueError):
        compute_p_value(-1.0)
    with pytest.raises(ValueError):
        compute_p_value(1.0, df=0)


@pytest.mark.parametrize("named_hash", HASH_FUNCTIONS, ids=lambda h: h.name)
def test_evaluate_hash_function(named_hash):
    """Evaluation returns a consistent, bounded result for every candidate."""
    result = evaluate_hash_function(WORDS, named_hash)

    assert result.name == named_hash.name
    assert result.n_words == len(WORDS)
    assert result.counts.sum() == len(WORDS)
    assert result.chi_square >= 0.0
    assert 0.0 <= result.p_value <= 1.0
    assert 1 <= result.occupied_buckets <= len(WORDS)


def test_evaluate_multiplicative_fills_bucket_zero():
    result = evaluate_hash_function(WORDS, get_hash_function("Multiplicative"))

    assert result.counts[0] == len(WORDS)
    assert result.occupied_buckets == 1
    assert result.max_bucket_count == len(WORDS)


def test_evaluate_empty_word_list():
    with pytest.raises(EmptyWordListError):
        evaluate_hash_function([], get_hash_function("Remainder"))


def test_evaluation_results_compare_without_counts():
    """Results compare on their scalar fields; the histogram array is excluded."""
    remainder = get_hash_function("Remainder")
    result_a = evaluate_hash_function(WORDS, remainder)
    result_b = evaluate_hash_function(WORDS, remainder)

    assert result_a == result_b
    assert result_a != evaluate_hash_function(WORDS, get_hash_function("String Length"))
