"""Markdown converters and the documents they produce."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

from markedit.template import PresentationTemplate, Template


class ConverterOption(enum.IntFlag):
    """Options that control markdown conversion."""

    NO_LINKS = 0x00000001
    NO_IMAGES = 0x00000002
    NO_SMARTYPANTS = 0x00000004
    NO_HTML = 0x00000008
    NO_SUPERSCRIPT = 0x00000100
    NO_TABLES = 0x00000400
    NO_STRIKETHROUGH = 0x00000800
    TABLE_OF_CONTENTS = 0x00001000
    AUTOLINK = 0x00004000
    NO_HEADER = 0x00010000
    NO_DIV_QUOTE = 0x00040000
    NO_ALPHA_LIST = 0x00080000
    NO_DEFINITION_LIST = 0x00100000
    EXTRA_FOOTNOTE = 0x00200000
    NO_STYLE = 0x00400000


_NO_OPTIONS = ConverterOption(0)


class MarkdownDocument:
    """A markdown text prepared for rendering by a converter."""


class MarkdownConverter(abc.ABC):
    """Turns markdown text into HTML."""

    @abc.abstractmethod
    def create_document(
        self, text: str, options: ConverterOption = _NO_OPTIONS
    ) -> MarkdownDocument:
        """Prepare a document from markdown text."""

    @abc.abstractmethod
    def render_as_html(self, document: MarkdownDocument | None) -> str:
        """Return the HTML for a document."""

    @abc.abstractmethod
    def render_as_table_of_contents(self, document: MarkdownDocument | None) -> str:
        """Return the table of contents for a document."""

    @abc.abstractmethod
    def template_renderer(self) -> Template:
        """Return the template that wraps the rendered HTML."""

    @abc.abstractmethod
    def supported_options(self) -> ConverterOption:
        """Return the options this converter honours."""


@dataclass
class _RevealMarkdownDocument(MarkdownDocument):
    markdown_text: str
    # Slide presentations carry no table of contents of their own.
    table_of_contents: str = ""


class RevealMarkdownConverter(MarkdownConverter):
    """Passes markdown through unchanged for a slide presentation to render."""

    def __init__(self, template: Template | None = None) -> None:
        self._template = template if template is not None else PresentationTemplate()

    def create_document(
        self, text: str, options: ConverterOption = _NO_OPTIONS
    ) -> MarkdownDocument:
        return _RevealMarkdownDocument(text)

    def render_as_html(self, document: MarkdownDocument | None) -> str:
        if isinstance(document, _RevealMarkdownDocument):
            return document.markdown_text
        return ""

    def render_as_table_of_contents(self, document: MarkdownDocument | None) -> str:
        """Return the document's table of contents, which is always empty for slides."""
        if isinstance(document, _RevealMarkdownDocument):
            return document.table_of_contents
        return ""

    def template_renderer(self) -> Template:
        return self._template

    def supported_options(self) -> ConverterOption:
        return ConverterOption(0)