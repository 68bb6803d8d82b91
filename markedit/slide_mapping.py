"""Mapping between presentation slides and lines of the markdown source."""

from __future__ import annotations

import bisect
import re

Slide = tuple[int, int]

_LINE_BREAK = re.compile(r"\n|\r\n|\r")
_HORIZONTAL_MARKER = "---"
_VERTICAL_MARKER = "--"


def _is_separator(lines: list[str], index: int, marker: str) -> bool:
    return (
        1 < index < len(lines) - 1
        and not lines[index - 1]
        and lines[index] == marker
        and not lines[index + 1]
    )


class SlideLineMapping:
    """Relates slides, as (horizontal, vertical) pairs, to 1-based line numbers.

    A line holding ``---`` between two blank lines starts a new horizontal
    slide; a line holding ``--`` between two blank lines starts a new
    vertical slide.
    """

    def __init__(self) -> None:
        self._line_to_slide: dict[int, Slide] = {}
        self._slide_to_line: dict[Slide, int] = {}
        self._line_keys: list[int] = []

    def build(self, code: str) -> None:
        """Rebuild the mapping from the markdown source."""
        self._line_to_slide = {}
        self._slide_to_line = {}
        horizontal = 0
        vertical = 0
        line_number = 0

        lines = _LINE_BREAK.split(code)
        self._slide_to_line[(horizontal, vertical)] = line_number + 1
        for index in range(len(lines)):
            line_number = index + 1
            if _is_separator(lines, index, _HORIZONTAL_MARKER):
                self._line_to_slide[line_number] = (horizontal, vertical)
                horizontal += 1
                vertical = 0
                self._slide_to_line[(horizontal, vertical)] = line_number + 1
            if _is_separator(lines, index, _VERTICAL_MARKER):
                self._line_to_slide[line_number] = (horizontal, vertical)
                vertical += 1
                self._slide_to_line[(horizontal, vertical)] = line_number + 1
        self._line_to_slide[line_number] = (horizontal, vertical)
        self._line_keys = sorted(self._line_to_slide)

    def line_for_slide(self, slide: Slide) -> int | None:
        """Return the first line of a slide, or None if there is no such slide."""
        return self._slide_to_line.get(tuple(slide))

    def slide_for_line(self, line_number: int) -> Slide | None:
        """Return the slide a line belongs to, or None past the last line."""
        index = bisect.bisect_left(self._line_keys, line_number)
        if index == len(self._line_keys):
            return None
        return self._line_to_slide[self._line_keys[index]]

    def line_to_slide(self) -> dict[int, Slide]:
        """Return the last line of every slide, ordered by line."""
        return {line: self._line_to_slide[line] for line in self._line_keys}

    def slide_to_line(self) -> dict[Slide, int]:
        """Return the first line of every slide, ordered by slide."""
        return {slide: self._slide_to_line[slide] for slide in sorted(self._slide_to_line)}