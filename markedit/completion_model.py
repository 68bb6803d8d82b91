"""List model that offers snippets and words for completion."""

from __future__ import annotations

import bisect
import enum
from dataclasses import dataclass
from typing import Callable, Iterable

from markedit.snippet import Snippet
from markedit.snippet_collection import ChangeType

RowsListener = Callable[[int, int], None]

SNIPPET_ICON = "fa-puzzle-piece.fontawesome"


class Role(enum.Enum):
    """Kind of data requested for a row."""

    DISPLAY = "display"
    EDIT = "edit"
    TOOL_TIP = "tooltip"
    DECORATION = "decoration"
    FONT = "font"


@dataclass(frozen=True)
class Font:
    """Font used to show snippet rows."""

    family: str = "Monospace"
    point_size: int = 8
    style_hint: str = "TypeWriter"


def _html_escaped(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


class CompletionListModel:
    """Rows of snippets in trigger order, followed by plain words."""

    def __init__(self) -> None:
        self._snippets: list[Snippet] = []
        self._words: list[str] = []
        self._inserted_listeners: list[RowsListener] = []
        self._removed_listeners: list[RowsListener] = []

    def on_rows_inserted(self, listener: RowsListener) -> RowsListener:
        """Register a callback taking (first, last) rows after insertion."""
        self._inserted_listeners.append(listener)
        return listener

    def on_rows_removed(self, listener: RowsListener) -> RowsListener:
        """Register a callback taking (first, last) rows after removal."""
        self._removed_listeners.append(listener)
        return listener

    def _rows_inserted(self, first: int, last: int) -> None:
        for listener in list(self._inserted_listeners):
            listener(first, last)

    def _rows_removed(self, first: int, last: int) -> None:
        for listener in list(self._removed_listeners):
            listener(first, last)

    def row_count(self) -> int:
        return len(self._snippets) + len(self._words)

    def data(self, row: int, role: Role = Role.DISPLAY) -> str | Font | None:
        """Return the value of a row for a role, or None if there is none."""
        if not 0 <= row < self.row_count():
            return None

        if row < len(self._snippets):
            snippet = self._snippets[row]
            if role is Role.DECORATION:
                return SNIPPET_ICON
            if role is Role.DISPLAY:
                return f"{snippet.trigger:<15} {snippet.description}"
            if role is Role.EDIT:
                return snippet.trigger
            if role is Role.TOOL_TIP:
                return _html_escaped(snippet.snippet)
            if role is Role.FONT:
                return Font()
            return None

        if role in (Role.DISPLAY, Role.EDIT):
            return self._words[row - len(self._snippets)]
        return None

    def set_words(self, words: Iterable[str]) -> None:
        """Replace the words offered after the snippets."""
        self._words = list(words)
        first = len(self._snippets)
        self._rows_inserted(first, first + len(self._words))

    def snippet_collection_changed(self, change: ChangeType, snippet: Snippet) -> None:
        """Follow a change of the snippet collection."""
        if change is ChangeType.ITEM_ADDED:
            row = bisect.bisect_left(self._snippets, snippet.trigger, key=lambda s: s.trigger)
            self._snippets.insert(row, snippet)
            self._rows_inserted(row, row)
        elif change is ChangeType.ITEM_CHANGED:
            row = self._snippets.index(snippet)
            self._snippets[row] = snippet
        elif change is ChangeType.ITEM_DELETED:
            row = self._snippets.index(snippet)
            del self._snippets[row]
            self._rows_removed(row, row)