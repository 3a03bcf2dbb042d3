"""
Command line interface.

Usage:
    sts-eval score <input file> <api key> [syn|ass] [--keywords]
    sts-eval correlations <input file> [syn|ass] [--print] [--keywords]
"""

import argparse
import logging
import sys

from .config import EvaluationSettings, RunConfig
from .correlation import print_correlations, save_correlations
from .exceptions import EvaluationError
from .log import setup_logging
from .pipeline import ScoringPipeline
from .service import CorticalClient
from .types import RetinaVariant

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sts-eval", description="Score and evaluate SemEval STS corpora"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: from settings)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Compare text pairs and write score files")
    score.add_argument("input_file", help="SemEval input file (STS.input.*)")
    score.add_argument("api_key", help="Similarity service API key")
    score.add_argument("retina", nargs="?", default=None, help="'syn' for the synonymous retina")
    score.add_argument(
        "--keywords", action="store_true", help="Compare keyword-reduced texts instead"
    )

    correlations = subparsers.add_parser(
        "correlations", help="Correlate score files with the gold standard"
    )
    correlations.add_argument("input_file", help="SemEval input file (STS.input.*)")
    correlations.add_argument(
        "retina", nargs="?", default=None, help="'syn' for the synonymous retina (with --print)"
    )
    correlations.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print correlations for one retina instead of saving the report for all",
    )
    correlations.add_argument(
        "--keywords", action="store_true", help="Use the keyword-based score files"
    )
    return parser


def run_score(args, settings):
    config = RunConfig(retina=RetinaVariant.from_argument(args.retina), keywords=args.keywords)
    client = CorticalClient(
        args.api_key, config.retina, host=settings.retina_host, timeout=settings.request_timeout
    )
    written = ScoringPipeline(client, config).run(args.input_file)
    logger.info("Wrote %d score file(s)", len(written))


def run_correlations(args, settings):
    if args.print_only:
        retina = RetinaVariant.from_argument(args.retina)
        logger.info("Using Retina %s", retina.api_name)
        print_correlations(args.input_file, retina, keywords=args.keywords)
    else:
        target = save_correlations(args.input_file, keywords=args.keywords)
        logger.info("Correlations saved to %s", target)


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = EvaluationSettings()
    setup_logging(args.log_level or settings.log_level)

    try:
        if args.command == "score":
            run_score(args, settings)
        else:
            run_correlations(args, settings)
    except EvaluationError as e:
        logger.error("%s: %s", e.error_type, e)
        return 1
    except OSError as e:
        logger.error("io_error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
