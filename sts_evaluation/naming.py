"""
File naming conventions for STS corpora.

All file names are derived from the input file, whose name begins with
``INPUT_FILE_PREFIX``. The gold standard file and the per-measure score files
live in the same directory and differ only in their prefix, e.g. for
``STS.input.answers-forums.txt``:

- ``STS.gs.answers-forums.txt``
- ``STS.en_associative.COSINE_SIMILARITY.answers-forums.txt``
"""

from pathlib import Path

from .exceptions import NamingError

COMMON_PREFIX = "STS."
INPUT_FILE_PREFIX = COMMON_PREFIX + "input."
GS_FILE_PREFIX = COMMON_PREFIX + "gs."
KEYWORDS_SUFFIX = ".keywords"
REPORT_SUFFIX = ".cortical.scores"


def check_input_file(input_file):
    """
    Return the canonical path of an input file.

    Raises
    ------
    NamingError
        If the file name does not begin with ``INPUT_FILE_PREFIX``
    """
    path = Path(input_file).resolve()
    if not path.name.startswith(INPUT_FILE_PREFIX):
        raise NamingError(f"{input_file} does not match expected pattern.")
    return path


def _replace_prefix(input_file, prefix):
    path = check_input_file(input_file)
    return path.with_name(prefix + path.name[len(INPUT_FILE_PREFIX) :])


def gold_file(input_file):
    """Gold standard file for an input file."""
    return _replace_prefix(input_file, GS_FILE_PREFIX)


def output_prefix(retina, measure):
    return f"{COMMON_PREFIX}{retina.api_name}.{measure.name}."


def output_file(input_file, retina, measure, keywords=False):
    """
    Score file for one retina and measure.

    Parameters
    ----------
    input_file : str or pathlib.Path
        Input file, beginning with ``INPUT_FILE_PREFIX``
    retina : RetinaVariant
        Retina that produced the scores
    measure : Measure
        Measure the scores were extracted from
    keywords : bool, optional
        Whether the scores were computed on keyword-reduced texts, by default False

    Returns
    -------
    pathlib.Path
        Canonical path of the score file
    """
    path = _replace_prefix(input_file, output_prefix(retina, measure))
    if keywords:
        path = path.with_name(path.name + KEYWORDS_SUFFIX)
    return path


def report_file(input_file, keywords=False):
    """Correlation report file for an input file."""
    path = check_input_file(input_file)
    suffix = ".cortical" + KEYWORDS_SUFFIX + ".scores" if keywords else REPORT_SUFFIX
    return path.with_name(path.name + suffix)
