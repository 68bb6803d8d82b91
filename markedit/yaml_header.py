"""Detection of a YAML front matter header at the start of a document."""

from __future__ import annotations

import re

_HEADER = re.compile(r"^---\s*\n(.*?\n)?(---|\.\.\.)\s*(\n|$)", re.DOTALL)


class YamlHeaderChecker:
    """Splits a document into its YAML header and the body after it.

    ``header`` is empty when the document has no header; ``body`` is then
    the whole document.
    """

    def __init__(self, text: str) -> None:
        match = _HEADER.match(text)
        if match:
            self.header = match.group(0)
            self.body = text[len(self.header):]
        else:
            self.header = ""
            self.body = text

    def has_header(self) -> bool:
        return bool(self.header)

    def body_offset(self) -> int:
        """Length of the header, which is where the body starts."""
        return len(self.header)