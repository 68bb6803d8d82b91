import pytest

from markedit.converter import (
    ConverterOption,
    MarkdownConverter,
    MarkdownDocument,
    RevealMarkdownConverter,
)
from markedit.template import PresentationTemplate, RenderOption


def test_markdown_converter_is_abstract():
    with pytest.raises(TypeError):
        MarkdownConverter()


@pytest.mark.parametrize("text", ["", "# Title\n\n---\n\nSlide", "a\r\nb"])
def test_reveal_renders_text_unchanged(text):
    converter = RevealMarkdownConverter()
    document = converter.create_document(text, ConverterOption.AUTOLINK)
    assert converter.render_as_html(document) == text


def test_reveal_ignores_options():
    converter = RevealMarkdownConverter()
    text = "Visit http://example.com"
    plain = converter.create_document(text, ConverterOption(0))
    linked = converter.create_document(
        text, ConverterOption.AUTOLINK | ConverterOption.NO_HTML
    )
    assert converter.render_as_html(plain) == converter.render_as_html(linked) == text


def test_reveal_renders_nothing_for_missing_or_foreign_document():
    converter = RevealMarkdownConverter()
    assert converter.render_as_html(None) == ""
    assert converter.render_as_html(MarkdownDocument()) == ""


def test_reveal_has_no_table_of_contents():
    converter = RevealMarkdownConverter()
    document = converter.create_document("# Heading\n", ConverterOption.TABLE_OF_CONTENTS)
    assert converter.render_as_table_of_contents(document) == ""


def test_reveal_supports_no_options():
    supported = RevealMarkdownConverter().supported_options()
    assert supported == ConverterOption(0)
    assert ConverterOption.AUTOLINK not in supported


def test_reveal_uses_given_template():
    template = PresentationTemplate("<!--__HTML_CONTENT__-->")
    converter = RevealMarkdownConverter(template)
    assert converter.template_renderer() is template
    document = converter.create_document("slide", ConverterOption(0))
    html = converter.render_as_html(document)
    assert converter.template_renderer().render(html, RenderOption(0)) == "slide"


def test_reveal_default_template_is_presentation_template():
    renderer = RevealMarkdownConverter().template_renderer()
    assert isinstance(renderer, PresentationTemplate)
    assert renderer.render("body", RenderOption(0)) == "body"