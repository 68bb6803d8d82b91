import pytest

from markedit.snippet import Snippet


def test_is_less_than_comparable():
    snippet1 = Snippet(trigger="abc")
    snippet2 = Snippet(trigger="xyz")

    assert (snippet1 < snippet2) is True
    assert (snippet2 < snippet1) is False
    assert (snippet1 < snippet1) is False


def test_is_equal_comparable():
    snippet1 = Snippet(trigger="abc", description="description 1")
    snippet2 = Snippet(trigger="abc", description="description 2")
    snippet3 = Snippet(trigger="xyz", description="description 1")

    assert (snippet1 == snippet1) is True
    assert (snippet1 == snippet2) is True
    assert (snippet1 == snippet3) is False


def test_is_initialized_after_creation():
    snippet = Snippet()
    assert snippet.trigger == ""
    assert snippet.description == ""
    assert snippet.snippet == ""
    assert snippet.cursor_position == 0
    assert snippet.built_in is False


def test_sorting_uses_trigger_only():
    snippets = [Snippet(trigger="c"), Snippet(trigger="a"), Snippet(trigger="b")]
    assert [s.trigger for s in sorted(snippets)] == ["a", "b", "c"]


def test_greater_than_derived_from_trigger():
    assert Snippet(trigger="b") > Snippet(trigger="a")
    assert Snippet(trigger="a") <= Snippet(trigger="a", description="other")


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Snippet(trigger="a"))