"""
Tests for snippet selection.
"""

from src.services.site_search.search import ResultHighlighter


def test_short_content_is_returned_unchanged():
    highlighter = ResultHighlighter()
    content = "x" * 95 + " bail"
    assert len(content) == 100
    assert highlighter.highlight(content, ["bail"], max_length=150) == content


def test_content_exactly_max_length_is_returned_unchanged():
    highlighter = ResultHighlighter()
    content = "y" * 150
    assert highlighter.highlight(content, ["bail"]) == content


def test_empty_content():
    highlighter = ResultHighlighter()
    assert highlighter.highlight("", ["bail"]) == ""
    assert highlighter.highlight(None, ["bail"]) == ""


def test_window_moves_to_matched_term():
    highlighter = ResultHighlighter()
    content = "a" * 200 + " miranda " + "b" * 200
    snippet = highlighter.highlight(content, ["miranda"])
    # first 20-character step whose window covers the term starts at 60
    assert snippet == "..." + content[60:210] + "..."
    assert "miranda" in snippet


def test_no_matching_window_keeps_start():
    highlighter = ResultHighlighter()
    content = "c" * 400
    assert highlighter.highlight(content, ["miranda"]) == content[:150] + "..."


def test_window_with_most_distinct_terms_wins():
    highlighter = ResultHighlighter()
    content = "bail " + "z" * 300 + " bail bond " + "z" * 300
    snippet = highlighter.highlight(content, ["bail", "bond"])
    assert "bail bond" in snippet
    assert snippet.startswith("...")
    assert snippet.endswith("...")


def test_ties_keep_earliest_window():
    highlighter = ResultHighlighter()
    content = "warrant " + "z" * 300 + " warrant " + "z" * 300
    snippet = highlighter.highlight(content, ["warrant"])
    assert snippet == content[:150] + "..."


def test_terms_are_matched_case_insensitively():
    highlighter = ResultHighlighter()
    content = "q" * 300 + " Fourth Amendment " + "q" * 300
    snippet = highlighter.highlight(content, ["FOURTH AMENDMENT"])
    assert "Fourth Amendment" in snippet


def test_custom_max_length():
    highlighter = ResultHighlighter()
    content = "d" * 100
    snippet = highlighter.highlight(content, [], max_length=40)
    assert snippet == content[:40] + "..."
