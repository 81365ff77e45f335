"""Unit tests for core/filters.py"""

from datetime import datetime, timezone

import pytest

from docstore.core.filters import MATCH_ALL, MATCH_ANY, build_predicates, matches
from docstore.core.models import Author, Document, SearchRequest


DOC = Document(
    id="1", title="Intro to X", content="hello world",
    author=Author(id="a1", name="Ann"),
    created=datetime(2024, 6, 1, tzinfo=timezone.utc),
)


@pytest.mark.parametrize("request_kwargs,count", [
    ({}, 0),
    ({"author_ids": []}, 0),
    ({"author_ids": ["a1"]}, 1),
    ({"author_ids": ["a1"], "title_prefixes": ["I"]}, 2),
    ({"contains_contents": ["x"], "title_prefixes": ["I"], "author_ids": ["z"]}, 3),
    ({"created_from": datetime(2024, 1, 1)}, 0),
    ({"created_from": datetime(2024, 1, 1), "created_to": datetime(2025, 1, 1)}, 1),
])
def test_build_predicates_counts_active_fields(request_kwargs, count):
    """Each non-empty field adds one predicate; the window needs both bounds."""
    assert len(build_predicates(SearchRequest(**request_kwargs))) == count


def test_any_matches_when_one_predicate_holds():
    predicates = build_predicates(SearchRequest(author_ids=["nobody"], title_prefixes=["Intro"]))
    assert matches(DOC, predicates, MATCH_ANY)
    assert not matches(DOC, predicates, MATCH_ALL)


def test_all_matches_when_every_predicate_holds():
    predicates = build_predicates(SearchRequest(author_ids=["a1"], contains_contents=["world"]))
    assert matches(DOC, predicates, MATCH_ALL)
    assert matches(DOC, predicates, MATCH_ANY)


def test_no_predicates():
    """OR over nothing is false; AND over nothing is true."""
    assert not matches(DOC, [], MATCH_ANY)
    assert matches(DOC, [], MATCH_ALL)


def test_window_bounds_are_exclusive():
    start = DOC.created
    end = datetime(2024, 7, 1, tzinfo=timezone.utc)
    assert not matches(DOC, build_predicates(SearchRequest(created_from=start, created_to=end)))
    assert not matches(DOC, build_predicates(SearchRequest(created_from=datetime(2024, 1, 1), created_to=start)))


def test_prefix_matches_any_listed_prefix():
    predicates = build_predicates(SearchRequest(title_prefixes=["Zed", "Intro to"]))
    assert matches(DOC, predicates)


def test_unknown_mode_raises():
    with pytest.raises(ValueError, match="Unknown match mode"):
        matches(DOC, [], "some")
