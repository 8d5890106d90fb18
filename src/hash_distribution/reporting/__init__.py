"""Text reports for hash distribution results."""

from hash_distribution.reporting.histogram import (
    horizontal_rule,
    segment_maxima,
    segment_heights,
    render_histogram,
    render_summary,
)

__all__ = [
    "horizontal_rule",
    "segment_maxima",
    "segment_heights",
    "render_histogram",
    "render_summary",
]
