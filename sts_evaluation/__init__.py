"""
STS Evaluation Package

Scores SemEval Semantic Textual Similarity (STS) corpora with an external
similarity service and evaluates the scores against the gold standard.

For every text pair of an ``STS.input.*`` file, the service returns a bundle of
similarity and distance metrics. Each measure is scaled to [0, 5] and written
to its own score file; the Pearson correlation of each score file with the
``STS.gs.*`` gold standard is then reported.
"""

from beartype import BeartypeConf
from beartype.claw import beartype_this_package

beartype_this_package(conf=BeartypeConf(is_pep484_tower=True))

from .compute import get_scores, get_similarity, scale  # noqa: E402
from .config import RunConfig  # noqa: E402
from .correlation import correlation_table, pearson  # noqa: E402
from .pipeline import ScoringPipeline  # noqa: E402
from .service import CorticalClient, SimilarityService  # noqa: E402
from .types import Measure, MetricBundle, RetinaVariant  # noqa: E402

__version__ = "1.0.0"

__all__ = [
    "CorticalClient",
    "Measure",
    "MetricBundle",
    "RetinaVariant",
    "RunConfig",
    "ScoringPipeline",
    "SimilarityService",
    "correlation_table",
    "get_scores",
    "get_similarity",
    "pearson",
    "scale",
]
