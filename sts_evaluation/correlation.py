"""
Pearson correlations between a gold standard and score files.

Positions where either the gold standard or the candidate has no score are
skipped with a warning. Correlations for several retinas and measures are
collected into a polars DataFrame, which can be printed or saved as a report.
"""

import logging

import numpy as np
import polars as po
from scipy import stats

from .exceptions import (
    FormatError,
    InsufficientDataError,
    LengthMismatchError,
)
from .naming import gold_file, output_file, report_file
from .readers import read_gold, read_scores
from .types import Measure, RetinaVariant, Score

logger = logging.getLogger(__name__)

REPORT_SCHEMA = {
    "retina": po.Utf8,
    "measure": po.Utf8,
    "pearson": po.Float64,
    "pairs": po.Int64,
}


def aligned_pairs(gold, scores):
    """
    Keep the positions where both sequences have a score.

    Parameters
    ----------
    gold : sequence of OptionalScore
        Gold standard scores
    scores : sequence of OptionalScore
        Candidate scores, aligned with ``gold``

    Returns
    -------
    tuple of numpy.ndarray
        Gold values and candidate values of the retained positions

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length
    """
    if len(gold) != len(scores):
        raise LengthMismatchError(
            f"Gold standard has {len(gold)} entries, scores have {len(scores)}"
        )

    gold_values = []
    score_values = []
    for i, (gold_score, score) in enumerate(zip(gold, scores)):
        if isinstance(gold_score, Score) and isinstance(score, Score):
            gold_values.append(gold_score.value)
            score_values.append(score.value)
        else:
            logger.warning("No score found in line %d.", i)
    return np.array(gold_values, dtype=float), np.array(score_values, dtype=float)


def pearson(gold, scores):
    """
    Pearson correlation between aligned gold and candidate scores.

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length
    InsufficientDataError
        If fewer than two positions have both scores, or one side is constant
    """
    return _pearson_r(*aligned_pairs(gold, scores))


def _pearson_r(x, y):
    if x.size < 2:
        raise InsufficientDataError(
            f"Need at least two aligned scores for a correlation, found {x.size}"
        )
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        raise InsufficientDataError("Correlation is undefined for constant scores")

    r, _ = stats.pearsonr(x, y)
    return float(r)


def correlation_table(
    input_file, retinas=tuple(RetinaVariant), measures=tuple(Measure), keywords=False
):
    """
    Correlate the gold standard with every available score file.

    Missing score files are skipped with a warning; a score file that cannot be
    correlated is reported as an error and skipped, so one failure does not
    stop the remaining retinas and measures.

    Parameters
    ----------
    input_file : str or pathlib.Path
        Input file the score files were derived from
    retinas : iterable of RetinaVariant, optional
        Retinas to report on, by default all
    measures : iterable of Measure, optional
        Measures to report on, by default all
    keywords : bool, optional
        Use the keyword-based score files, by default False

    Returns
    -------
    polars.DataFrame
        Columns ``retina``, ``measure``, ``pearson`` and ``pairs``
    """
    gold = read_gold(gold_file(input_file))

    rows = []
    for retina in retinas:
        for measure in measures:
            scores_file = output_file(input_file, retina, measure, keywords)
            if not scores_file.exists():
                logger.warning("Output file not found: %s", scores_file)
                continue
            try:
                x, y = aligned_pairs(gold, read_scores(scores_file))
                r = _pearson_r(x, y)
            except (FormatError, LengthMismatchError, InsufficientDataError) as e:
                logger.error("Skipping %s: %s", scores_file, e)
                continue
            rows.append((retina.api_name, measure.name, r, int(x.size)))

    return po.DataFrame(rows, schema=REPORT_SCHEMA, orient="row")


def format_report(table, separator=" "):
    """Render a correlation table as one line per retina and measure."""
    return [
        f"Pearson correlation ({row['retina']}, {row['measure']}):{separator}{row['pearson']:.4f}"
        for row in table.iter_rows(named=True)
    ]


def print_correlations(input_file, retina, keywords=False):
    """Print the correlations of all measures for one retina."""
    table = correlation_table(input_file, retinas=(retina,), keywords=keywords)
    for line in format_report(table):
        print(line)
    return table


def save_correlations(input_file, keywords=False):
    """
    Save the correlations of all retinas and measures next to the input file.

    Returns
    -------
    pathlib.Path
        The report file
    """
    table = correlation_table(input_file, keywords=keywords)
    target = report_file(input_file, keywords)
    logger.info("Writing correlations to %s", target)
    with open(target, "w", encoding="utf-8") as f:
        for line in format_report(table, separator="\t"):
            f.write(line + "\n")
    return target
