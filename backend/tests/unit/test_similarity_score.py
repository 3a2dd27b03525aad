"""Unit tests for the tag-overlap similarity score."""

import pytest

from app.services.similarity_service import similarity_score


@pytest.mark.unit
class TestSimilarityScore:
    def test_fraction_of_reference_tags(self):
        assert similarity_score(["IPC 302", "IPC 34"], ["IPC 302"]) == 50.0

    def test_full_overlap(self):
        assert similarity_score(["IPC 302", "IPC 34"], ["IPC 34", "IPC 302"]) == 100.0

    def test_rounded_to_one_decimal(self):
        assert similarity_score(["a", "b", "c"], ["a"]) == 33.3

    def test_tags_are_matched_exactly(self):
        assert similarity_score(["IPC 302"], ["ipc 302"]) == 0.0

    @pytest.mark.edge_case
    def test_reference_without_tags(self):
        assert similarity_score([], ["a"]) == 0.0

    @pytest.mark.edge_case
    def test_candidate_without_tags(self):
        assert similarity_score(["a"], None) == 0.0
