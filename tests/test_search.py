"""Tests for the sliding window PatternSearcher."""

import pytest

from bytepy.core.errors import FileIOError, UsageError, ValidationError
from bytepy.core.session import FileSession
from bytepy.utils.search import PatternSearcher, SearchResult


@pytest.fixture
def session():
    with FileSession() as s:
        yield s


class TestPatternSearcher:
    """Tests for literal pattern search."""

    def test_finds_all_positions(self, session, make_file):
        session.open(str(make_file(b"abcabcab")))
        searcher = PatternSearcher(session)

        assert list(searcher.iter_matches(b"ab")) == [0, 3, 6]

    def test_match_at_very_end(self, session, make_file):
        session.open(str(make_file(b"xxxyz")))
        assert list(PatternSearcher(session).iter_matches(b"yz")) == [3]

    def test_overlaps_reported(self, session, make_file):
        session.open(str(make_file(b"aaaa")))
        assert list(PatternSearcher(session).iter_matches(b"aa")) == [0, 1, 2]

    def test_pattern_longer_than_file(self, session, make_file):
        session.open(str(make_file(b"ab")))
        assert list(PatternSearcher(session).iter_matches(b"abc")) == []

    def test_empty_file(self, session, make_file):
        session.open(str(make_file(b"")))
        assert list(PatternSearcher(session).iter_matches(b"a")) == []

    def test_search_collects_results(self, session, make_file):
        session.open(str(make_file(b"\x00fmt \x00fmt ")))
        results = PatternSearcher(session).search(b"fmt ")

        assert results == [SearchResult(1, 4, b"fmt "), SearchResult(6, 4, b"fmt ")]

    def test_matches_stream_lazily(self, session, make_file):
        session.open(str(make_file(b"a-a-a")))
        matches = PatternSearcher(session).iter_matches(b"a")

        assert next(matches) == 0
        assert next(matches) == 2

    def test_empty_pattern(self, session, make_file):
        session.open(str(make_file(b"abc")))
        with pytest.raises(ValidationError):
            list(PatternSearcher(session).iter_matches(b""))

    def test_requires_open_file(self, session):
        with pytest.raises(UsageError):
            list(PatternSearcher(session).iter_matches(b"a"))

    def test_read_failure_aborts_scan(self, session, make_file):
        path = make_file(b"aaaa")
        session.open(str(path))
        path.write_bytes(b"a")

        matches = PatternSearcher(session).iter_matches(b"a")
        assert next(matches) == 0
        with pytest.raises(FileIOError):
            list(matches)
