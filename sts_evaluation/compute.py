"""
Utility functions for turning raw comparison metrics into comparable scores.

This module provides functions for:
- Extracting a single measure from a metric bundle, negating distances so that
  larger values mean more similarity for every measure
- Determining the input range of a batch of values for each measure
- Scaling values affinely onto a fixed output interval, and back

Examples
--------
>>> bundles = [MetricBundle(cosine_similarity=0.8), MetricBundle(cosine_similarity=0.2)]
>>> scale(get_scores(bundles, Measure.COSINE_SIMILARITY), Measure.COSINE_SIMILARITY)
array([4., 1.])
"""

import numpy as np

from .exceptions import DegenerateRangeError, InvalidMeasureError
from .types import Measure

MIN_OUT = 0.0
MAX_OUT = 5.0


def get_similarity(metric, measure):
    """
    Get the value for a specific measure from a metric bundle.

    Distance measures (``EUCLIDEAN_DISTANCE`` and ``JACCARD_DISTANCE``) are
    negated so that larger values mean more similarity in all cases.

    Parameters
    ----------
    metric : MetricBundle
        Raw metrics for one text pair
    measure : Measure or str
        Measure to extract

    Returns
    -------
    float
        The value for the measure

    Raises
    ------
    InvalidMeasureError
        If ``measure`` does not identify a known measure
    """
    measure = Measure.parse(measure)

    if measure is Measure.WEIGHTED:
        return float(metric.weighted_scoring)
    elif measure is Measure.COSINE_SIMILARITY:
        return float(metric.cosine_similarity)
    elif measure is Measure.EUCLIDEAN_DISTANCE:
        return -float(metric.euclidean_distance)
    elif measure is Measure.JACCARD_DISTANCE:
        return -float(metric.jaccard_distance)
    elif measure is Measure.OVERLAP:
        return float(metric.overlapping_all)
    raise InvalidMeasureError(f"Invalid measure: {measure!r}")


def get_scores(metrics, measure):
    """
    Get the scores for a specific measure from a sequence of metric bundles.

    Returns
    -------
    numpy.ndarray
        One score per bundle, in order
    """
    return np.array([get_similarity(metric, measure) for metric in metrics], dtype=float)


def input_range(values, measure):
    """
    Determine the input range used to scale a batch of values.

    Cosine similarity and (negated) Jaccard distance have known bounds and are
    scaled against those regardless of the batch. Negated Euclidean distance is
    bounded above by 0 (identical texts) only, so its lower bound is the batch
    minimum. Overlap and weighted scores are min-max normalized per batch.

    Parameters
    ----------
    values : array_like
        Non-empty batch of extracted values for one measure
    measure : Measure or str
        Measure the values were extracted from

    Returns
    -------
    tuple of float
        ``(min_in, max_in)``

    Raises
    ------
    DegenerateRangeError
        If ``min_in`` equals ``max_in``
    """
    measure = Measure.parse(measure)
    values = np.asarray(values, dtype=float)

    if measure is Measure.COSINE_SIMILARITY:
        min_in, max_in = 0.0, 1.0
    elif measure is Measure.JACCARD_DISTANCE:
        min_in, max_in = -1.0, 0.0
    elif measure is Measure.EUCLIDEAN_DISTANCE:
        min_in, max_in = float(values.min()), 0.0
    else:
        min_in, max_in = float(values.min()), float(values.max())

    if min_in == max_in:
        raise DegenerateRangeError(
            f"Cannot scale {measure.name}: input range collapses to {min_in}"
        )
    return min_in, max_in


def scale_value(value, min_in, max_in, min_out=MIN_OUT, max_out=MAX_OUT):
    """Map ``value`` from ``[min_in, max_in]`` onto ``[min_out, max_out]``."""
    return (value - min_in) / (max_in - min_in) * (max_out - min_out) + min_out


def unscale_value(value, min_in, max_in, min_out=MIN_OUT, max_out=MAX_OUT):
    """Inverse of :func:`scale_value`."""
    return (value - min_out) / (max_out - min_out) * (max_in - min_in) + min_in


def scale(values, measure, min_out=MIN_OUT, max_out=MAX_OUT):
    """
    Scale a batch of values for one measure onto ``[min_out, max_out]``.

    Parameters
    ----------
    values : array_like
        Extracted values, see :func:`get_scores`
    measure : Measure or str
        Measure the values were extracted from; some have predefined bounds
    min_out : float, optional
        Lower end of the output interval, by default ``MIN_OUT``
    max_out : float, optional
        Upper end of the output interval, by default ``MAX_OUT``

    Returns
    -------
    numpy.ndarray
        Scaled values in input order

    Raises
    ------
    DegenerateRangeError
        If the input range of the batch collapses to a single point
    """
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        return values

    min_in, max_in = input_range(values, measure)
    return scale_value(values, min_in, max_in, min_out, max_out)
