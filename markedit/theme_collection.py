"""An ordered collection of themes."""

from __future__ import annotations

from typing import Iterator

from markedit.theme import Theme


class ThemeCollection:
    """Themes kept in insertion order and looked up by name."""

    def __init__(self) -> None:
        self._themes: list[Theme] = []
        self._names: list[str] = []

    def insert(self, theme: Theme) -> int:
        """Append a theme to the collection."""
        self._names.append(theme.name)
        self._themes.append(theme)
        return 0

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[Theme]:
        return iter(list(self._themes))

    def at(self, offset: int) -> Theme:
        """Return the theme at a position in insertion order."""
        if not 0 <= offset < len(self._themes):
            raise IndexError(f"theme offset {offset} out of range")
        return self._themes[offset]

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def theme(self, name: str) -> Theme:
        """Return the first theme with the given name."""
        try:
            index = self._names.index(name)
        except ValueError:
            raise KeyError(name) from None
        return self._themes[index]

    def theme_names(self) -> list[str]:
        """Return the names of all themes in insertion order."""
        return list(self._names)

    def name(self) -> str:
        """Name of the JSON array that holds this collection."""
        return "themes"