"""Distribution evaluator: load a dictionary once, score every candidate hash."""

import logging
import sys
from typing import Optional, Sequence, TextIO, List

from hash_distribution.data.word_lists import load_word_list
from hash_distribution.evaluation.metrics import (
    EmptyWordListError,
    EvaluationResult,
    evaluate_hash_function,
)
from hash_distribution.experiments.config import EvaluatorConfig
from hash_distribution.hashing.string_hashes import HASH_FUNCTIONS, NamedHashFunction
from hash_distribution.reporting.histogram import render_histogram, render_summary

logger = logging.getLogger(__name__)


class DistributionEvaluator:
    """
    Evaluates the fixed set of candidate hash functions over one word list.

    The dictionary is read at construction, before any hash is evaluated.
    Tests and callers may inject an in-memory word list instead.

    Example:
        >>> evaluator = DistributionEvaluator(EvaluatorConfig(), words=["a", "b"])
        >>> results = evaluator.run_all()  # doctest: +SKIP
    """

    def __init__(
        self,
        config: Optional[EvaluatorConfig] = None,
        words: Optional[Sequence[str]] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            config: Run settings (default: EvaluatorConfig())
            words: Word list to use instead of reading config.dictionary_path

        Raises:
            ValueError: If the config is invalid
            DictionaryLoadError: If the dictionary file can't be read
            EmptyWordListError: If the word list is empty
        """
        self.config = config if config is not None else EvaluatorConfig()

        errors = self.config.validate()
        if errors:
            raise ValueError("Invalid evaluator config: " + "; ".join(errors))

        if words is None:
            words = load_word_list(self.config.dictionary_path)
        self.words = tuple(words)

        if not self.words:
            raise EmptyWordListError("Dictionary contains no words")

    @property
    def n_words(self) -> int:
        return len(self.words)

    def evaluate(self, named_hash: NamedHashFunction) -> EvaluationResult:
        """Hash the word list with one function into a fresh histogram."""
        logger.info(f"Evaluating {named_hash.name} hash over {self.n_words} words")
        result = evaluate_hash_function(self.words, named_hash)
        logger.info(
            f"{named_hash.name}: chi2={result.chi_square:.4f}, "
            f"p={result.p_value:.4f}, occupied={result.occupied_buckets}"
        )
        return result

    def report_lines(self, result: EvaluationResult) -> List[str]:
        """Summary lines for a result, followed by the histogram if enabled."""
        lines = render_summary(result, self.config.histogram_width)
        if self.config.show_histogram:
            lines.extend(
                render_histogram(
                    result.counts,
                    width=self.config.histogram_width,
                    height=self.config.histogram_height,
                    fill=self.config.fill_char,
                )
            )
        return lines

    def run_all(self, stream: Optional[TextIO] = None) -> List[EvaluationResult]:
        """
        Evaluate every candidate hash in order and print its report.

        Args:
            stream: Output stream (default: sys.stdout)

        Returns:
            List of results, one per candidate hash function
        """
        if stream is None:
            stream = sys.stdout

        results = []
        for named_hash in HASH_FUNCTIONS:
            result = self.evaluate(named_hash)
            for line in self.report_lines(result):
                print(line, file=stream)
            results.append(result)
        return results
