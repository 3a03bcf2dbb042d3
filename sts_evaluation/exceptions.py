class EvaluationError(Exception):
    """Base exception for all scoring and evaluation errors"""

    error_type: str = "evaluation_error"


class NamingError(EvaluationError, ValueError):
    """File name does not follow the STS file prefix convention"""

    error_type: str = "naming_error"


class FormatError(EvaluationError, ValueError):
    """Malformed line in a corpus, gold or score file, or malformed service payload"""

    error_type: str = "format_error"


class InvalidMeasureError(EvaluationError, ValueError):
    """Unknown measure identifier"""

    error_type: str = "invalid_measure"


class DegenerateRangeError(EvaluationError, ValueError):
    """Scaling input range collapses to a single point"""

    error_type: str = "degenerate_range"


class LengthMismatchError(EvaluationError):
    """Gold and candidate score sequences are not aligned"""

    error_type: str = "length_mismatch"


class InsufficientDataError(EvaluationError):
    """Not enough usable aligned pairs to compute a correlation"""

    error_type: str = "insufficient_data"


class SimilarityServiceError(EvaluationError):
    """Request to the similarity service failed or returned an unexpected payload"""

    error_type: str = "similarity_service_error"
