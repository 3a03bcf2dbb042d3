import pytest
from sts_evaluation.service import SimilarityService
from sts_evaluation.types import MetricBundle


class FakeSimilarityService(SimilarityService):
    """In-memory service returning preset metrics and recording every call."""

    def __init__(self, metrics=None, keywords=None, default=None):
        self.metrics = metrics or {}
        self.keyword_map = keywords or {}
        self.default = default or MetricBundle(0.5, 1.0, 0.5, 10, 0.5)
        self.bulk_calls = []
        self.compare_calls = []
        self.keyword_calls = []

    def compare_bulk(self, pairs):
        self.bulk_calls.append(list(pairs))
        return [self.metrics.get((p.first, p.second), self.default) for p in pairs]

    def compare(self, pair):
        self.compare_calls.append(pair)
        return self.metrics.get((pair.first, pair.second), self.default)

    def keywords(self, text):
        self.keyword_calls.append(text)
        return self.keyword_map.get(text, text.split())


@pytest.fixture
def fake_service():
    return FakeSimilarityService


@pytest.fixture
def sts_dir(tmp_path):
    """Input file with three pairs and an empty second line, and its gold standard."""
    (tmp_path / "STS.input.sample.txt").write_text(
        "A man plays guitar.\tA man is playing a guitar.\n"
        "\n"
        "A cat sleeps.\tThe stock market fell.\n"
        "Kids run outside.\tChildren are running outdoors.\n",
        encoding="utf-8",
    )
    (tmp_path / "STS.gs.sample.txt").write_text("4.8\n\n0.2\n4.0\n", encoding="utf-8")
    return tmp_path
