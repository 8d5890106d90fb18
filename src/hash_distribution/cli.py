"""Command-line entry point for the hash distribution report."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from hash_distribution.api.evaluator import DistributionEvaluator
from hash_distribution.data.word_lists import DictionaryLoadError
from hash_distribution.evaluation.metrics import EmptyWordListError
from hash_distribution.experiments.config import EvaluatorConfig


def build_parser() -> argparse.ArgumentParser:
    defaults = EvaluatorConfig()
    parser = argparse.ArgumentParser(
        prog="hash-distribution",
        description="Compare the bucket distribution of candidate 16-bit string hashes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=defaults.dictionary_path,
        help=f"Word list, one word per line (default: {defaults.dictionary_path})",
    )
    parser.add_argument(
        "--no-histogram",
        action="store_true",
        help="Print only chi-square and p-value for each hash",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=defaults.histogram_width,
        help=f"Report width in characters (default: {defaults.histogram_width})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=defaults.histogram_height,
        help=f"Histogram rows (default: {defaults.histogram_height})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    config = EvaluatorConfig(
        dictionary_path=args.dictionary,
        histogram_width=args.width,
        histogram_height=args.height,
        show_histogram=not args.no_histogram,
    )

    try:
        evaluator = DistributionEvaluator(config)
    except (DictionaryLoadError, EmptyWordListError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    evaluator.run_all(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
