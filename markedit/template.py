"""HTML templates that wrap rendered markdown for preview and export."""

from __future__ import annotations

import abc
import enum
import re

HEADER_MARKER = "<!--__HTML_HEADER__-->"
CONTENT_MARKER = "<!--__HTML_CONTENT__-->"
REVEAL_PLUGINS_MARKER = "<!--__REVEAL_PLUGINS__-->"

_MERMAID_CODE_BLOCK = re.compile(
    r'<pre><code class="mermaid">(.*?)</code></pre>', re.DOTALL
)


class RenderOption(enum.Flag):
    """Features added to the rendered page."""

    SCROLLBAR_SYNCHRONIZATION = 0x01
    MATH_SUPPORT = 0x02
    CODE_HIGHLIGHTING = 0x04
    DIAGRAM_SUPPORT = 0x08
    MATH_INLINE_SUPPORT = 0x10


_NO_OPTIONS = RenderOption(0)


class Template(abc.ABC):
    """A page template with markers for the header and the content.

    An empty template string leaves the body as it is.
    """

    def __init__(self, template_string: str = "") -> None:
        self.template_string = template_string
        self.code_highlighting_style = ""

    @abc.abstractmethod
    def render(self, body: str, options: RenderOption = _NO_OPTIONS) -> str:
        """Return the page for previewing a rendered body."""

    @abc.abstractmethod
    def export_as_html(
        self, header: str, body: str, options: RenderOption = _NO_OPTIONS
    ) -> str:
        """Return the page for exporting a rendered body."""


class HtmlTemplate(Template):
    """Template for a regular HTML page."""

    def render(self, body: str, options: RenderOption = _NO_OPTIONS) -> str:
        options = RenderOption(options) | RenderOption.SCROLLBAR_SYNCHRONIZATION

        # Diagrams and code highlighting clash inside <code>, so diagrams become <div>.
        if (
            RenderOption.CODE_HIGHLIGHTING in options
            and RenderOption.DIAGRAM_SUPPORT in options
        ):
            body = _MERMAID_CODE_BLOCK.sub(
                lambda m: f'<div class="mermaid">\n{m.group(1)}</div>', body
            )

        return self._render_as_html("", body, options)

    def export_as_html(
        self, header: str, body: str, options: RenderOption = _NO_OPTIONS
    ) -> str:
        # code highlighting depends on bundled resources, so leave it out
        options = RenderOption(options) & ~RenderOption.CODE_HIGHLIGHTING
        return self._render_as_html(header, body, options)

    def _render_as_html(self, header: str, body: str, options: RenderOption) -> str:
        if not self.template_string:
            return body

        html_header = self._build_html_header(options) + header
        return self.template_string.replace(HEADER_MARKER, html_header).replace(
            CONTENT_MARKER, body
        )

    def _build_html_header(self, options: RenderOption) -> str:
        parts: list[str] = []

        if RenderOption.SCROLLBAR_SYNCHRONIZATION in options:
            parts.append(
                '<script type="text/javascript">window.onscroll = function() '
                "{ synchronizer.webViewScrolled(); }; </script>\n"
            )

        if RenderOption.MATH_SUPPORT in options:
            if RenderOption.MATH_INLINE_SUPPORT in options:
                parts.append(
                    '<script type="text/x-mathjax-config">MathJax.Hub.Config('
                    "{tex2jax: {inlineMath: [['$','$'], ['\\\\(','\\\\)']]}});</script>"
                )
            parts.append(
                '<script type="text/javascript" src="http://cdn.mathjax.org/mathjax/'
                'latest/MathJax.js?config=TeX-AMS-MML_HTMLorMML"></script>\n'
            )

        if RenderOption.CODE_HIGHLIGHTING in options:
            parts.append(
                '<link rel="stylesheet" href="qrc:/scripts/highlight.js/styles/'
                f'{self.code_highlighting_style}.css">\n'
            )
            parts.append('<script src="qrc:/scripts/highlight.js/highlight.pack.js"></script>\n')
            parts.append("<script>hljs.initHighlightingOnLoad();</script>\n")

        if RenderOption.DIAGRAM_SUPPORT in options:
            parts.append('<link rel="stylesheet" href="qrc:/scripts/mermaid/mermaid.css">\n')
            parts.append('<script src="qrc:/scripts/mermaid/mermaid.full.min.js"></script>\n')

        return "".join(parts)


class PresentationTemplate(Template):
    """Template for a slide presentation page."""

    def render(self, body: str, options: RenderOption = _NO_OPTIONS) -> str:
        if not self.template_string:
            return body

        return (
            self.template_string.replace(HEADER_MARKER, "")
            .replace(CONTENT_MARKER, body)
            .replace(REVEAL_PLUGINS_MARKER, self._build_reveal_plugins(RenderOption(options)))
        )

    def export_as_html(
        self, header: str, body: str, options: RenderOption = _NO_OPTIONS
    ) -> str:
        """Return the same page as :meth:`render`; the header is not used."""
        return self.render(body, options)

    @staticmethod
    def _build_reveal_plugins(options: RenderOption) -> str:
        plugins: list[str] = []

        if RenderOption.MATH_SUPPORT in options:
            plugins.append(
                "{ src: 'https://cdn.jsdelivr.net/reveal.js/2.6.2/plugin/math/math.js', "
                "async: true },\n"
            )

        if RenderOption.CODE_HIGHLIGHTING in options:
            plugins.append(
                "{ src: 'https://cdn.jsdelivr.net/reveal.js/2.6.2/plugin/highlight/"
                "highlight.js', async: true, callback: function() "
                "{ hljs.initHighlightingOnLoad(); } },\n"
            )

        return "".join(plugins)