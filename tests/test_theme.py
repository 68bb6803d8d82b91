import pytest

from markedit.theme import Theme

A_THEME_NAME = "name"
A_MARKDOWN_HIGHLIGHTING = "markdown"
A_CODE_HIGHLIGHTING = "code"
A_PREVIEW_STYLESHEET = "preview"


def _theme(name):
    return Theme(name, A_MARKDOWN_HIGHLIGHTING, A_CODE_HIGHLIGHTING, A_PREVIEW_STYLESHEET)


def test_is_less_than_comparable():
    theme1 = _theme("abc")
    theme2 = _theme("xyz")

    assert (theme1 < theme2) is True
    assert (theme2 < theme1) is False
    assert (theme1 < theme1) is False


def test_is_equal_comparable():
    theme1 = _theme("abc")
    theme2 = _theme("abc")
    theme3 = _theme("xyz")

    assert (theme1 == theme1) is True
    assert (theme1 == theme2) is True
    assert (theme1 == theme3) is False


def test_sorts_by_name():
    themes = [_theme("c"), _theme("a"), _theme("b")]
    assert [t.name for t in sorted(themes)] == ["a", "b", "c"]


def test_built_in_defaults_to_false():
    assert _theme("abc").built_in is False


def test_fields_are_kept():
    theme = Theme("n", "m", "c", "p", True)
    assert (theme.name, theme.markdown_highlighting, theme.code_highlighting,
            theme.preview_stylesheet, theme.built_in) == ("n", "m", "c", "p", True)


def test_throws_if_name_is_empty():
    with pytest.raises(ValueError, match="theme name"):
        Theme("", A_MARKDOWN_HIGHLIGHTING, A_CODE_HIGHLIGHTING, A_PREVIEW_STYLESHEET)


def test_throws_if_markdown_highlighting_is_empty():
    with pytest.raises(ValueError, match="markdown highlighting"):
        Theme(A_THEME_NAME, "", A_CODE_HIGHLIGHTING, A_PREVIEW_STYLESHEET)


def test_throws_if_code_highlighting_is_empty():
    with pytest.raises(ValueError, match="code highlighting"):
        Theme(A_THEME_NAME, A_MARKDOWN_HIGHLIGHTING, "", A_PREVIEW_STYLESHEET)


def test_throws_if_preview_stylesheet_is_empty():
    with pytest.raises(ValueError, match="preview stylesheet"):
        Theme(A_THEME_NAME, A_MARKDOWN_HIGHLIGHTING, A_CODE_HIGHLIGHTING, "")