"""Conversion between snippets and JSON objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markedit.snippet import Snippet

TRIGGER = "trigger"
DESCRIPTION = "description"
SNIPPET = "snippet"
CURSOR = "cursor"
BUILTIN = "builtIn"


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _as_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


class JsonSnippetTranslator:
    """Translates snippets to and from JSON objects."""

    def from_json_object(self, obj: Mapping[str, Any]) -> Snippet:
        """Build a snippet from a JSON object; missing or mistyped fields get defaults."""
        if not isinstance(obj, Mapping):
            raise TypeError("snippet JSON value must be an object")
        return Snippet(
            trigger=_as_str(obj.get(TRIGGER)),
            description=_as_str(obj.get(DESCRIPTION)),
            snippet=_as_str(obj.get(SNIPPET)),
            cursor_position=int(_as_number(obj.get(CURSOR))),
            built_in=_as_bool(obj.get(BUILTIN)),
        )

    def to_json_object(self, snippet: Snippet) -> dict[str, Any]:
        """Return the JSON object for a snippet."""
        return {
            TRIGGER: snippet.trigger,
            DESCRIPTION: snippet.description,
            SNIPPET: snippet.snippet,
            CURSOR: snippet.cursor_position,
            BUILTIN: snippet.built_in,
        }


def snippet_translator_for(kind: type) -> JsonSnippetTranslator | None:
    """Return a translator for snippets, or None for any other kind."""
    if kind is Snippet:
        return JsonSnippetTranslator()
    return None