"""Tests for granolafetch.matcher - title search and latest 1:1 resolution."""

from __future__ import annotations

from granolafetch.matcher import find_latest_meeting_with, is_one_on_one_with, search
from granolafetch.models import GranolaDocument


def _doc(doc_id: str, title: str, created_at: str = "2024-01-01T00:00:00Z") -> GranolaDocument:
    return GranolaDocument(id=doc_id, title=title, created_at=created_at)


class TestSearch:
    def test_case_insensitive(self, sample_documents):
        assert [d.id for d in search(sample_documents, "SAM")] == ["doc-1", "doc-3"]

    def test_preserves_order(self):
        docs = [_doc("b", "Budget review"), _doc("a", "Roadmap"), _doc("c", "budget plan")]
        assert [d.id for d in search(docs, "budget")] == ["b", "c"]

    def test_no_matches(self, sample_documents):
        assert search(sample_documents, "retro") == []

    def test_every_result_matches_and_none_omitted(self):
        docs = [_doc(str(i), title) for i, title in enumerate(["Alpha", "alphabet", "Beta", "ALPHA team", ""])]
        results = search(docs, "alpha")
        assert all("alpha" in d.title.lower() for d in results)
        assert len(results) == sum(1 for d in docs if "alpha" in d.title.lower())

    def test_empty_query_matches_all(self, sample_documents):
        assert search(sample_documents, "") == sample_documents


class TestIsOneOnOne:
    def test_requires_name(self):
        assert not is_one_on_one_with(_doc("a", "Weekly sync"), "Sam")
        assert not is_one_on_one_with(_doc("a", "Alex 1:1"), "Sam")

    def test_requires_marker(self):
        assert not is_one_on_one_with(_doc("a", "Sam / planning"), "Sam")

    def test_either_marker(self):
        assert is_one_on_one_with(_doc("a", "Sam 1:1"), "Sam")
        assert is_one_on_one_with(_doc("a", "1x1 with SAM"), "sam")


class TestFindLatest:
    def test_weekly_sync_never_matches(self):
        assert find_latest_meeting_with([_doc("a", "Weekly sync")], "Sam") is None

    def test_single_match(self):
        doc = _doc("a", "Sam 1:1")
        assert find_latest_meeting_with([doc], "Sam") is doc

    def test_newest_wins(self):
        jan = _doc("jan", "Sam 1:1", "2024-01-01T00:00:00Z")
        feb = _doc("feb", "Sam 1:1", "2024-02-01T00:00:00Z")
        assert find_latest_meeting_with([jan, feb], "Sam") is feb
        assert find_latest_meeting_with([feb, jan], "Sam") is feb

    def test_compares_instants_across_offsets(self):
        early = _doc("early", "Sam 1:1", "2024-01-01T12:00:00+05:00")
        late = _doc("late", "Sam 1:1", "2024-01-01T08:00:00Z")
        assert find_latest_meeting_with([early, late], "Sam") is late

    def test_tie_keeps_fetch_order(self):
        first = _doc("first", "Sam 1:1", "2024-01-01T00:00:00Z")
        second = _doc("second", "Sam 1x1", "2024-01-01T00:00:00Z")
        assert find_latest_meeting_with([first, second], "Sam") is first

    def test_unparseable_date_sorts_last(self):
        broken = _doc("broken", "Sam 1:1", "yesterday")
        dated = _doc("dated", "Sam 1:1", "2020-01-01T00:00:00Z")
        assert find_latest_meeting_with([broken, dated], "Sam") is dated

    def test_no_documents(self):
        assert find_latest_meeting_with([], "Sam") is None
