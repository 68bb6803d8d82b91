"""Conversion between themes and JSON objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markedit.theme import Theme

NAME = "name"
MARKDOWN_HIGHLIGHTING = "markdownHighlighting"
CODE_HIGHLIGHTING = "codeHighlighting"
PREVIEW_STYLESHEET = "previewStylesheet"
BUILT_IN = "builtIn"


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


class JsonThemeTranslator:
    """Translates themes to and from JSON objects."""

    def from_json_object(self, obj: Mapping[str, Any]) -> Theme:
        """Build a theme from a JSON object.

        Raises ValueError when a required style is missing or empty.
        """
        if not isinstance(obj, Mapping):
            raise TypeError("theme JSON value must be an object")
        return Theme(
            _as_str(obj.get(NAME)),
            _as_str(obj.get(MARKDOWN_HIGHLIGHTING)),
            _as_str(obj.get(CODE_HIGHLIGHTING)),
            _as_str(obj.get(PREVIEW_STYLESHEET)),
            _as_bool(obj.get(BUILT_IN)),
        )

    def to_json_object(self, theme: Theme) -> dict[str, Any]:
        """Return the JSON object for a theme."""
        return {
            NAME: theme.name,
            MARKDOWN_HIGHLIGHTING: theme.markdown_highlighting,
            CODE_HIGHLIGHTING: theme.code_highlighting,
            PREVIEW_STYLESHEET: theme.preview_stylesheet,
            BUILT_IN: theme.built_in,
        }


def theme_translator_for(kind: type) -> JsonThemeTranslator | None:
    """Return a translator for themes, or None for any other kind."""
    if kind is Theme:
        return JsonThemeTranslator()
    return None