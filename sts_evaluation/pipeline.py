"""
Scoring pipeline: read an STS input file, compare its text pairs with the
similarity service, and write one scaled score file per measure.
"""

import logging

from . import compute
from .config import RunConfig
from .exceptions import DegenerateRangeError, LengthMismatchError
from .naming import output_file
from .readers import read_corpus
from .service import compare_by_keywords, compare_pairs
from .types import MISSING, Measure, Score
from .writers import write_scores

logger = logging.getLogger(__name__)


class ScoringPipeline:
    """
    Produce score files for an STS input file.

    For every measure, the raw metrics are extracted, scaled to
    ``[config.min_out, config.max_out]`` and written to the score file named
    after the input file, the retina and the measure.

    Parameters
    ----------
    service : SimilarityService
        Service that compares text pairs
    config : RunConfig, optional
        Retina and mode of this run, by default ``RunConfig()``

    Examples
    --------
    >>> client = CorticalClient(api_key, RetinaVariant.EN_ASSOCIATIVE)
    >>> pipeline = ScoringPipeline(client, RunConfig(retina=RetinaVariant.EN_ASSOCIATIVE))
    >>> written = pipeline.run("STS.input.answers-forums.txt")
    """

    def __init__(self, service, config=None):
        self.service = service
        self.config = config or RunConfig()

    def retrieve_metrics(self, corpus):
        """
        Get the metrics for each text pair of a corpus.

        Returns
        -------
        list of MetricBundle
            One bundle per text pair, in corpus order
        """
        pairs = list(corpus)
        if self.config.keywords:
            return compare_by_keywords(self.service, pairs)
        return compare_pairs(self.service, pairs)

    def save_scores(self, metrics, input_file, lines=None):
        """
        Save the scaled values of every measure to its score file.

        A measure whose batch cannot be scaled is reported and skipped; the
        other measures are still written.

        Parameters
        ----------
        metrics : sequence of MetricBundle
            One bundle per text pair, in corpus order
        input_file : str or pathlib.Path
            Input file the score files are named after
        lines : sequence of TextPair or None, optional
            Lines of the input file as given by ``Corpus.lines``; empty lines
            get an empty line in every score file. By default one score is
            written per bundle.

        Returns
        -------
        dict
            Maps each written ``Measure`` to its score file
        """
        written = {}
        for measure in Measure:
            target = output_file(input_file, self.config.retina, measure, self.config.keywords)
            try:
                scores = compute.scale(
                    compute.get_scores(metrics, measure),
                    measure,
                    self.config.min_out,
                    self.config.max_out,
                )
            except DegenerateRangeError as e:
                logger.error("Not writing %s: %s", target, e)
                continue
            if lines is not None:
                scores = align_to_lines(scores, lines)
            write_scores(target, scores)
            written[measure] = target
        return written

    def run(self, input_file):
        """Score all text pairs of ``input_file``; returns the written score files."""
        corpus = read_corpus(input_file)
        lines = list(corpus.lines())
        metrics = self.retrieve_metrics([pair for pair in lines if pair is not None])
        logger.info("Retrieved metrics for %d text pairs from %s", len(metrics), input_file)
        return self.save_scores(metrics, input_file, lines)


def align_to_lines(scores, lines):
    """
    Spread the scores of the text pairs over the lines of the input file.

    Returns
    -------
    list of OptionalScore
        One entry per line: ``Score`` for a text pair, ``MISSING`` for an
        empty line
    """
    n_pairs = sum(1 for pair in lines if pair is not None)
    if n_pairs != len(scores):
        raise LengthMismatchError(
            f"Input file has {n_pairs} text pairs, received {len(scores)} scores"
        )
    scores = iter(scores)
    return [MISSING if pair is None else Score(next(scores)) for pair in lines]
