"""
Writer for score files: one value per line, in input order.
"""

import logging

from .types import Missing, Score

logger = logging.getLogger(__name__)


def format_score(score):
    """
    Render one score as a line of a score file.

    Plain numbers and ``Score`` values are written as Python float literals,
    ``MISSING`` as an empty string.
    """
    if isinstance(score, Missing):
        return ""
    if isinstance(score, Score):
        score = score.value
    return repr(float(score))


def write_scores(output_file, scores):
    """
    Write scores to ``output_file``, replacing any existing file.

    Parameters
    ----------
    output_file : str or pathlib.Path
        Target file
    scores : iterable of float or OptionalScore
        Scores in input order
    """
    logger.info("Writing scores to %s", output_file)
    with open(output_file, "w", encoding="utf-8") as f:
        for score in scores:
            f.write(format_score(score) + "\n")
