"""
Binding to the external similarity service.

The service compares two texts in a retina (semantic space) and returns a
bundle of raw metrics. ``CorticalClient`` talks to the Cortical.io REST API;
any other implementation of ``SimilarityService`` can be swapped in.
"""

import logging
from abc import ABC, abstractmethod

import requests

from .exceptions import FormatError, SimilarityServiceError
from .types import EMPTY_BUNDLE, MetricBundle, TextPair

logger = logging.getLogger(__name__)

RETINA_HOST = "api.cortical.io"


class SimilarityService(ABC):
    """Request/response boundary to a text similarity service."""

    @abstractmethod
    def compare_bulk(self, pairs):
        """Compare every pair, returning one ``MetricBundle`` per pair in order."""

    @abstractmethod
    def compare(self, pair):
        """Compare a single pair, returning a ``MetricBundle``."""

    @abstractmethod
    def keywords(self, text):
        """Extract the keywords of a text as a list of strings."""


def _text_pair_json(pair):
    return [{"text": pair.first}, {"text": pair.second}]


class CorticalClient(SimilarityService):
    """
    Cortical.io Retina API client.

    Parameters
    ----------
    api_key : str
        API key sent with every request
    retina : RetinaVariant
        Retina to compare in
    host : str, optional
        API host, by default ``RETINA_HOST``
    timeout : float, optional
        Timeout per request in seconds, by default 60.0
    session : requests.Session, optional
        Session to send requests with, by default a new one
    """

    def __init__(self, api_key, retina, host=RETINA_HOST, timeout=60.0, session=None):
        self.retina = retina
        self.base_url = f"https://{host}/rest"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"api-key": api_key})
        logger.info("Using Retina %s at %s.", retina.api_name, host)

    def _post(self, path, **kwargs):
        try:
            response = self.session.post(
                f"{self.base_url}{path}",
                params={"retina_name": self.retina.api_name},
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise SimilarityServiceError(f"Request to {path} failed: {e}") from e
        except ValueError as e:
            raise SimilarityServiceError(f"Invalid JSON from {path}: {e}") from e

    def compare_bulk(self, pairs):
        payload = [_text_pair_json(pair) for pair in pairs]
        logger.debug("Comparing %d text pairs", len(payload))
        result = self._post("/compare/bulk", json=payload)
        if not isinstance(result, list):
            raise SimilarityServiceError(f"Expected a list of metrics, got: {result!r}")
        return [self._bundle(metric) for metric in result]

    def compare(self, pair):
        return self._bundle(self._post("/compare", json=_text_pair_json(pair)))

    def keywords(self, text):
        result = self._post(
            "/text/keywords",
            data=text.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )
        if not isinstance(result, list):
            raise SimilarityServiceError(f"Expected a list of keywords, got: {result!r}")
        return [str(keyword) for keyword in result]

    @staticmethod
    def _bundle(metric):
        try:
            return MetricBundle.from_json(metric)
        except FormatError as e:
            raise SimilarityServiceError(str(e)) from e


def compare_pairs(service, pairs):
    """
    Get the metrics for each text pair with a single bulk request.

    Pairs with an empty text are not sent to the service and get
    ``EMPTY_BUNDLE``.

    Parameters
    ----------
    service : SimilarityService
        Service to compare with
    pairs : sequence of TextPair
        Text pairs in input order

    Returns
    -------
    list of MetricBundle
        One bundle per pair, in input order

    Raises
    ------
    SimilarityServiceError
        If the service does not return one result per requested pair
    """
    pairs = list(pairs)
    indices = [i for i, pair in enumerate(pairs) if not pair.is_degenerate]
    if len(indices) < len(pairs):
        logger.warning("%d text pair(s) with empty text", len(pairs) - len(indices))

    bundles = [EMPTY_BUNDLE] * len(pairs)
    if not indices:
        return bundles

    results = service.compare_bulk([pairs[i] for i in indices])
    if len(results) != len(indices):
        raise SimilarityServiceError(
            f"Requested {len(indices)} comparisons, received {len(results)}"
        )
    for i, bundle in zip(indices, results):
        bundles[i] = bundle
    return bundles


def keyword_text(service, text):
    return " ".join(service.keywords(text))


def compare_by_keywords(service, pairs):
    """
    Compare text pairs after reducing each text to its keywords.

    A pair for which either keyword text is empty gets ``EMPTY_BUNDLE``.
    """
    bundles = []
    for pair in pairs:
        if pair.is_degenerate:
            bundles.append(EMPTY_BUNDLE)
            continue
        keyword_pair = TextPair(
            keyword_text(service, pair.first), keyword_text(service, pair.second)
        )
        if keyword_pair.is_degenerate:
            bundles.append(EMPTY_BUNDLE)
        else:
            bundles.append(service.compare(keyword_pair))
    return bundles
