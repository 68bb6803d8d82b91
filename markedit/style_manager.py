"""Maps theme style names to highlighting styles and stylesheet paths."""

from __future__ import annotations

from types import MappingProxyType

from markedit.theme import Theme

BUILTIN_MARKDOWN_HIGHLIGHTINGS = MappingProxyType({
    "Default": "default",
    "Solarized Light": "solarized-light",
    "Solarized Dark": "solarized-dark",
    "Clearness Dark": "clearness-dark",
    "Byword Dark": "byword-dark",
})

BUILTIN_CODE_HIGHLIGHTINGS = MappingProxyType({
    "Default": "default",
    "Github": "github",
    "Solarized Light": "solarized_light",
    "Solarized Dark": "solarized_dark",
})

BUILTIN_PREVIEW_STYLESHEETS = MappingProxyType({
    "Default": "qrc:/css/markdown.css",
    "Github": "qrc:/css/github.css",
    "Solarized Light": "qrc:/css/solarized-light.css",
    "Solarized Dark": "qrc:/css/solarized-dark.css",
    "Clearness": "qrc:/css/clearness.css",
    "Clearness Dark": "qrc:/css/clearness-dark.css",
    "Byword Dark": "qrc:/css/byword-dark.css",
})


class StyleManager:
    """Resolves the styles named by a theme.

    Unknown style names resolve to an empty string. Custom preview
    stylesheets take precedence over the built-in ones.
    """

    def __init__(self) -> None:
        self._custom_preview_stylesheets: dict[str, str] = {}

    def insert_custom_preview_stylesheet(self, style_name: str, style_path: str) -> None:
        """Register a custom preview stylesheet under a style name."""
        self._custom_preview_stylesheets[style_name] = style_path

    def markdown_highlighting_path(self, theme: Theme) -> str:
        return BUILTIN_MARKDOWN_HIGHLIGHTINGS.get(theme.markdown_highlighting, "")

    def code_highlighting_path(self, theme: Theme) -> str:
        return BUILTIN_CODE_HIGHLIGHTINGS.get(theme.code_highlighting, "")

    def preview_stylesheet_path(self, theme: Theme) -> str:
        custom = self._custom_preview_stylesheets.get(theme.preview_stylesheet)
        if custom is not None:
            return custom
        return BUILTIN_PREVIEW_STYLESHEETS.get(theme.preview_stylesheet, "")