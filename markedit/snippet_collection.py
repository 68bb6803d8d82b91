"""A collection of snippets kept in trigger order."""

from __future__ import annotations

import bisect
import dataclasses
import enum
from typing import Callable, Iterator

from markedit.snippet import Snippet

Listener = Callable[["ChangeType", Snippet], None]


class ChangeType(enum.Enum):
    """Kind of change reported to collection listeners."""

    ITEM_ADDED = "added"
    ITEM_CHANGED = "changed"
    ITEM_DELETED = "deleted"


class SnippetCollection:
    """Snippets keyed by trigger, iterated in trigger order.

    Listeners registered with :meth:`subscribe` are called with the kind of
    change and the snippet after every insert, update and removal.
    """

    def __init__(self) -> None:
        self._snippets: dict[str, Snippet] = {}
        self._triggers: list[str] = []
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._snippets)

    def subscribe(self, listener: Listener) -> Listener:
        """Register a listener for collection changes and return it."""
        self._listeners.append(listener)
        return listener

    def _notify(self, change: ChangeType, snippet: Snippet) -> None:
        for listener in list(self._listeners):
            listener(change, snippet)

    def _store(self, snippet: Snippet) -> None:
        if snippet.trigger not in self._snippets:
            bisect.insort(self._triggers, snippet.trigger)
        self._snippets[snippet.trigger] = dataclasses.replace(snippet)

    def insert(self, snippet: Snippet) -> int:
        """Add or replace a snippet and return its position in trigger order."""
        self._store(snippet)
        self._notify(ChangeType.ITEM_ADDED, snippet)
        return bisect.bisect_left(self._triggers, snippet.trigger)

    def update(self, snippet: Snippet) -> None:
        """Store a changed snippet under its trigger."""
        self._store(snippet)
        self._notify(ChangeType.ITEM_CHANGED, snippet)

    def remove(self, snippet: Snippet) -> None:
        """Remove the snippet with the same trigger, if present."""
        if self._snippets.pop(snippet.trigger, None) is not None:
            self._triggers.remove(snippet.trigger)
        self._notify(ChangeType.ITEM_DELETED, snippet)

    def name(self) -> str:
        """Name of the JSON array that holds this collection."""
        return "snippets"

    def __contains__(self, trigger: object) -> bool:
        return trigger in self._snippets

    def snippet(self, trigger: str) -> Snippet:
        """Return the snippet for a trigger, or an empty snippet if none."""
        found = self._snippets.get(trigger)
        return dataclasses.replace(found) if found is not None else Snippet()

    def at(self, offset: int) -> Snippet:
        """Return the snippet at a position in trigger order."""
        if not 0 <= offset < len(self._triggers):
            raise IndexError(f"snippet offset {offset} out of range")
        return self._snippets[self._triggers[offset]]

    def __iter__(self) -> Iterator[Snippet]:
        return (self._snippets[trigger] for trigger in list(self._triggers))

    def user_defined_snippets(self) -> SnippetCollection:
        """Return a new collection with the snippets that are not built in."""
        result = SnippetCollection()
        for snippet in self:
            if not snippet.built_in:
                result.insert(snippet)
        return result