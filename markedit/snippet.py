"""Text snippets that expand from a short trigger word."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(eq=False)
class Snippet:
    """A snippet of text inserted when its trigger is completed.

    Snippets are identified by their trigger: two snippets with the same
    trigger compare equal, and snippets sort by trigger.
    """

    trigger: str = ""
    description: str = ""
    snippet: str = ""
    cursor_position: int = 0
    built_in: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snippet):
            return NotImplemented
        return self.trigger == other.trigger

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Snippet):
            return NotImplemented
        return self.trigger < other.trigger

    __hash__ = None  # mutable, compared by trigger