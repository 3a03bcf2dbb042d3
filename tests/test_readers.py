"""
Tests for readers and writers - corpus, gold standard and score files.
"""

import pytest
from sts_evaluation.exceptions import FormatError, NamingError
from sts_evaluation.readers import Corpus, read_corpus, read_gold, read_scores
from sts_evaluation.types import MISSING, Score, TextPair
from sts_evaluation.writers import format_score, write_scores


class TestCorpus:
    def test_reads_pairs_in_order_skipping_empty_lines(self, sts_dir):
        pairs = read_corpus(sts_dir / "STS.input.sample.txt").pairs()
        assert pairs == [
            TextPair("A man plays guitar.", "A man is playing a guitar."),
            TextPair("A cat sleeps.", "The stock market fell."),
            TextPair("Kids run outside.", "Children are running outdoors."),
        ]

    def test_corpus_is_restartable(self, sts_dir):
        corpus = read_corpus(sts_dir / "STS.input.sample.txt")
        assert list(corpus) == list(corpus)

    def test_wrong_prefix_raises_before_reading(self, tmp_path):
        with pytest.raises(NamingError):
            Corpus(tmp_path / "input.sample.txt")

    def test_line_without_tab_raises(self, tmp_path):
        path = tmp_path / "STS.input.bad.txt"
        path.write_text("first\tsecond\nno tab here\n", encoding="utf-8")
        with pytest.raises(FormatError, match=":2:"):
            read_corpus(path).pairs()

    def test_line_with_extra_fields_raises(self, tmp_path):
        path = tmp_path / "STS.input.bad.txt"
        path.write_text("a\tb\tc\n", encoding="utf-8")
        with pytest.raises(FormatError):
            read_corpus(path).pairs()

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "STS.input.crlf.txt"
        path.write_bytes(b"one\ttwo\r\n\r\nthree\tfour\r\n")
        assert read_corpus(path).pairs() == [TextPair("one", "two"), TextPair("three", "four")]

    def test_lines_keep_empty_line_positions(self, sts_dir):
        lines = list(read_corpus(sts_dir / "STS.input.sample.txt").lines())
        assert len(lines) == 4
        assert lines[1] is None
        assert lines[2] == TextPair("A cat sleeps.", "The stock market fell.")

    def test_invalid_utf8_raises_format_error(self, tmp_path):
        path = tmp_path / "STS.input.latin1.txt"
        path.write_bytes(b"caf\xe9\tcoffee shop\n")
        with pytest.raises(FormatError, match="UTF-8"):
            read_corpus(path).pairs()


class TestScores:
    def test_empty_lines_are_missing(self, tmp_path):
        path = tmp_path / "STS.gs.sample.txt"
        path.write_text("4.0\n\n2.5\n", encoding="utf-8")
        assert read_gold(path) == [Score(4.0), MISSING, Score(2.5)]

    def test_gold_prefix_required(self, tmp_path):
        path = tmp_path / "STS.en_associative.OVERLAP.sample.txt"
        path.write_text("1.0\n", encoding="utf-8")
        with pytest.raises(NamingError):
            read_gold(path)
        assert read_scores(path) == [Score(1.0)]

    def test_non_numeric_line_raises(self, tmp_path):
        path = tmp_path / "STS.gs.sample.txt"
        path.write_text("4.0\nhigh\n", encoding="utf-8")
        with pytest.raises(FormatError):
            read_gold(path)

    def test_gold_has_one_entry_per_input_line(self, sts_dir):
        gold = read_gold(sts_dir / "STS.gs.sample.txt")
        lines = list(read_corpus(sts_dir / "STS.input.sample.txt").lines())
        assert len(gold) == len(lines)
        assert gold[1] == MISSING

    def test_invalid_utf8_score_file_raises_format_error(self, tmp_path):
        path = tmp_path / "STS.en_associative.OVERLAP.sample.txt"
        path.write_bytes(b"1.0\n\xff\xfe\n3.0\n")
        with pytest.raises(FormatError, match="UTF-8"):
            read_scores(path)


class TestWriter:
    def test_format_score(self):
        assert format_score(4.0) == "4.0"
        assert format_score(Score(2.5)) == "2.5"
        assert format_score(MISSING) == ""

    def test_write_then_read_preserves_order(self, tmp_path):
        path = tmp_path / "STS.en_associative.WEIGHTED.sample.txt"
        write_scores(path, [5.0, Score(0.25), MISSING, 3.75])
        assert path.read_text(encoding="utf-8") == "5.0\n0.25\n\n3.75\n"
        assert read_scores(path) == [Score(5.0), Score(0.25), MISSING, Score(3.75)]

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "scores.txt"
        write_scores(path, [1.0, 2.0, 3.0])
        write_scores(path, [4.0])
        assert path.read_text(encoding="utf-8") == "4.0\n"
