"""Themes that combine editor highlighting, code highlighting and a preview style."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, eq=False)
class Theme:
    """A named combination of styles.

    Themes are identified by their name: two themes with the same name
    compare equal, and themes sort by name. Every style must be non-empty.
    """

    name: str
    markdown_highlighting: str
    code_highlighting: str
    preview_stylesheet: str
    built_in: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("theme name must not be empty")
        if not self.markdown_highlighting:
            raise ValueError("markdown highlighting style must not be empty")
        if not self.code_highlighting:
            raise ValueError("code highlighting style must not be empty")
        if not self.preview_stylesheet:
            raise ValueError("preview stylesheet must not be empty")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)