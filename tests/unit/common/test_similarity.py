"""Tests for common.similarity module."""

import pytest

from common.similarity import jaccard_similarity


class TestJaccardSimilarity:
    def test_identical_sets(self) -> None:
        assert jaccard_similarity(["a", "b"], ["b", "a"]) == 1.0

    def test_disjoint_sets(self) -> None:
        assert jaccard_similarity(["a"], ["b"]) == 0.0

    def test_partial_overlap(self) -> None:
        assert jaccard_similarity(["a", "b", "c"], ["b", "c", "d"]) == pytest.approx(0.5)

    def test_duplicates_counted_once(self) -> None:
        assert jaccard_similarity(["a", "a", "b"], ["a", "b"]) == 1.0

    def test_empty_input_scores_zero(self) -> None:
        assert jaccard_similarity([], ["a"]) == 0.0
        assert jaccard_similarity(["a"], []) == 0.0
        assert jaccard_similarity([], []) == 0.0
