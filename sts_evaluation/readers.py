"""
Readers for STS input corpora, gold standard files and score files.
"""

import logging
from pathlib import Path

from .exceptions import FormatError, NamingError
from .naming import GS_FILE_PREFIX, check_input_file
from .types import MISSING, Score, TextPair

logger = logging.getLogger(__name__)


class Corpus:
    """
    Tab-separated text pairs read from an STS input file.

    Iterating re-reads the file, so a corpus can be traversed any number of
    times. Iterating yields the text pairs only and skips empty lines;
    :meth:`lines` keeps one entry per line so that scores can be written in
    line with the gold standard.

    Parameters
    ----------
    input_file : str or pathlib.Path
        Input file, beginning with ``INPUT_FILE_PREFIX``

    Raises
    ------
    NamingError
        If the file name does not begin with ``INPUT_FILE_PREFIX``
    """

    def __init__(self, input_file):
        self.path = check_input_file(input_file)

    def lines(self):
        """
        Read the file line by line.

        Yields
        ------
        TextPair or None
            The text pair of each line, ``None`` for an empty line

        Raises
        ------
        FormatError
            If a non-empty line does not hold two tab-separated texts, or the
            file is not valid UTF-8
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        yield None
                        continue
                    fields = line.split("\t")
                    if len(fields) != 2:
                        raise FormatError(
                            f"{self.path}:{line_number}: expected two tab-separated texts, "
                            f"found {len(fields)} field(s)"
                        )
                    yield TextPair(fields[0], fields[1])
        except UnicodeDecodeError as e:
            raise FormatError(f"{self.path}: not valid UTF-8: {e}") from e

    def __iter__(self):
        return (pair for pair in self.lines() if pair is not None)

    def pairs(self):
        """Read all text pairs into a list."""
        return list(self)

    def __repr__(self):
        return f"Corpus({str(self.path)!r})"


def read_corpus(input_file):
    logger.info("Reading input file %s", input_file)
    return Corpus(input_file)


def read_scores(scores_file):
    """
    Read a file holding one score per line.

    Empty lines are read as missing values, so the result has exactly as many
    entries as the file has lines.

    Parameters
    ----------
    scores_file : str or pathlib.Path
        File to read

    Returns
    -------
    list of OptionalScore
        ``Score`` for every numeric line, ``MISSING`` for every empty line

    Raises
    ------
    FormatError
        If a non-empty line is not a floating point number, or the file is
        not valid UTF-8
    """
    logger.info("Reading scores file %s", scores_file)
    scores = []
    try:
        with open(scores_file, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    scores.append(MISSING)
                    continue
                try:
                    scores.append(Score(float(line)))
                except ValueError as e:
                    raise FormatError(
                        f"{scores_file}:{line_number}: not a number: {line!r}"
                    ) from e
    except UnicodeDecodeError as e:
        raise FormatError(f"{scores_file}: not valid UTF-8: {e}") from e
    return scores


def read_gold(gold_file):
    """
    Read a gold standard file, whose name must begin with ``GS_FILE_PREFIX``.

    Raises
    ------
    NamingError
        If the file name does not begin with ``GS_FILE_PREFIX``
    FormatError
        If a non-empty line is not a floating point number
    """
    if not Path(gold_file).name.startswith(GS_FILE_PREFIX):
        raise NamingError(f"{gold_file} does not match expected pattern.")
    return read_scores(gold_file)
