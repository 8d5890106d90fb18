"""Text rendering of evaluation results and bucket histograms.

Renderers return lists of lines; callers decide where to print them.
"""

import math
from typing import List

import numpy as np

from hash_distribution.evaluation.metrics import EvaluationResult

N_SEGMENTS = 16
HISTOGRAM_HEADER = "Histogram (Hashes Distribution):"


def horizontal_rule(width: int) -> str:
    """Row of dashes one shorter than width."""
    return "-" * max(width - 1, 0)


def segment_maxima(counts: np.ndarray, n_segments: int = N_SEGMENTS) -> np.ndarray:
    """
    Maximum bucket count within each contiguous segment.

    With 65536 buckets and 16 segments each segment spans 4096 buckets.

    Args:
        counts: Bucket counts of shape (n_buckets,)
        n_segments: Number of segments

    Returns:
        Array of shape (n_segments,)
    """
    if counts.ndim != 1 or counts.size == 0:
        raise ValueError(f"Expected non-empty 1D counts, got shape {counts.shape}")
    if n_segments <= 0:
        raise ValueError(f"n_segments must be positive, got {n_segments}")

    segment_size = math.ceil(counts.size / n_segments)
    maxima = np.zeros(n_segments, dtype=counts.dtype)
    for i in range(n_segments):
        segment = counts[i * segment_size:(i + 1) * segment_size]
        if segment.size > 0:
            maxima[i] = segment.max()
    return maxima


def segment_heights(
    counts: np.ndarray,
    n_segments: int = N_SEGMENTS,
    height: int = 10,
) -> List[int]:
    """
    Normalize per-segment maxima into integer bar heights in [0, height - 1].

    Scaling uses the global min/max over all buckets, not per segment:
    round((seg_max - gmin) / (gmax - gmin) * (height - 1)), rounding halves
    up. When every bucket holds the same count there is no range to scale,
    so all heights are 0.

    Args:
        counts: Bucket counts of shape (n_buckets,)
        n_segments: Number of columns
        height: Number of rows

    Returns:
        List of n_segments heights
    """
    maxima = segment_maxima(counts, n_segments)
    global_min = int(counts.min())
    global_max = int(counts.max())

    if global_max == global_min:
        return [0] * n_segments

    span = global_max - global_min
    return [
        int(math.floor((int(m) - global_min) / span * (height - 1) + 0.5))
        for m in maxima
    ]


def render_histogram(
    counts: np.ndarray,
    width: int = 70,
    height: int = 10,
    fill: str = "#",
) -> List[str]:
    """
    Render the bucket histogram as a framed 16-column text plot.

    Args:
        counts: Bucket counts of shape (n_buckets,)
        width: Width used for the framing rules
        height: Number of plot rows
        fill: Marker for a filled cell

    Returns:
        Lines of the histogram block, without trailing newlines
    """
    heights = segment_heights(counts, N_SEGMENTS, height)
    filled = "   " + fill
    empty = " " * len(filled)

    lines = [HISTOGRAM_HEADER, horizontal_rule(width)]
    for row in range(height - 1, -1, -1):
        cells = "".join(filled if h >= row else empty for h in heights)
        lines.append(f"|{cells}   |")
    lines.append(horizontal_rule(width))
    lines.append(" " + "".join(f"{i:>4}" for i in range(N_SEGMENTS)))
    return lines


def format_number(value: float) -> str:
    """Six significant digits, general format."""
    return f"{value:g}"


def render_summary(result: EvaluationResult, width: int = 70) -> List[str]:
    """Divider, label, half-width divider, chi-square and p-value lines."""
    return [
        horizontal_rule(width),
        f"{result.name} Hash:",
        horizontal_rule(width // 2),
        f"Chi-Square: {format_number(result.chi_square)}",
        f"P-Value: {format_number(result.p_value)}",
    ]
