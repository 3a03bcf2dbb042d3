"""
Data model shared by the readers, the scaler, the correlation evaluator and the
similarity service binding.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import FormatError, InvalidMeasureError


class Measure(Enum):
    """
    All measure types returned by the similarity service for a text pair.

    Distance-like measures are negated on extraction so that a larger value
    always means more similarity.
    """

    COSINE_SIMILARITY = "COSINE_SIMILARITY"
    EUCLIDEAN_DISTANCE = "EUCLIDEAN_DISTANCE"
    JACCARD_DISTANCE = "JACCARD_DISTANCE"
    OVERLAP = "OVERLAP"
    WEIGHTED = "WEIGHTED"

    @property
    def is_distance(self) -> bool:
        return self in (Measure.EUCLIDEAN_DISTANCE, Measure.JACCARD_DISTANCE)

    @classmethod
    def parse(cls, identifier):
        """
        Resolve a measure identifier.

        Parameters
        ----------
        identifier : Measure or str
            A member, or a member name (case-insensitive)

        Returns
        -------
        Measure

        Raises
        ------
        InvalidMeasureError
            If the identifier does not name a known measure
        """
        if isinstance(identifier, cls):
            return identifier
        if isinstance(identifier, str):
            try:
                return cls[identifier.strip().upper()]
            except KeyError:
                pass
        raise InvalidMeasureError(f"Invalid measure: {identifier!r}")


class RetinaVariant(Enum):
    """Semantic space configuration the similarity service compares in."""

    EN_ASSOCIATIVE = "EN_ASSOCIATIVE"
    EN_SYNONYMOUS = "EN_SYNONYMOUS"

    @property
    def api_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_argument(cls, argument=None):
        """Map a command line token to a retina; ``syn...`` selects the synonymous one."""
        if argument is not None and argument.lower().startswith("syn"):
            return cls.EN_SYNONYMOUS
        return cls.EN_ASSOCIATIVE


@dataclass(frozen=True)
class TextPair:
    first: str
    second: str

    @property
    def is_degenerate(self) -> bool:
        """True if either text is empty once whitespace is stripped."""
        return not self.first.strip() or not self.second.strip()


@dataclass(frozen=True)
class MetricBundle:
    """Raw comparison metrics for one text pair, as returned by the service."""

    cosine_similarity: float = 0.0
    euclidean_distance: float = 0.0
    jaccard_distance: float = 0.0
    overlapping_all: int = 0
    weighted_scoring: float = 0.0

    @classmethod
    def from_json(cls, data):
        """
        Build a bundle from the service's camelCase JSON metric object.

        Raises
        ------
        FormatError
            If one of the required metric fields is missing or not numeric
        """
        try:
            return cls(
                cosine_similarity=float(data["cosineSimilarity"]),
                euclidean_distance=float(data["euclideanDistance"]),
                jaccard_distance=float(data["jaccardDistance"]),
                overlapping_all=int(data["overlappingAll"]),
                weighted_scoring=float(data["weightedScoring"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise FormatError(f"Unexpected metric payload: {data!r}") from e


# Sentinel for pairs that are not sent to the service.
EMPTY_BUNDLE = MetricBundle()


@dataclass(frozen=True)
class Score:
    value: float


@dataclass(frozen=True)
class Missing:
    pass


MISSING = Missing()

OptionalScore = Union[Score, Missing]
