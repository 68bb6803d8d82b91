# markedit

The parts of a markdown editor that do not depend on any GUI.

| Module | What it holds |
| --- | --- |
| `markedit.snippet` | `Snippet`: a completion snippet, compared and sorted by its trigger |
| `markedit.snippet_collection` | `SnippetCollection`, `ChangeType`: snippets kept in trigger order, with listeners told of every insert, update and removal |
| `markedit.json_snippet` | `JsonSnippetTranslator`, `snippet_translator_for`: one snippet to and from a JSON object (a `dict`) |
| `markedit.completion_model` | `CompletionListModel`, `Role`: the rows of a completion popup, snippets first, then plain words |
| `markedit.theme` | `Theme`: a named set of styles; every style must be non-empty (`ValueError` otherwise) |
| `markedit.theme_collection` | `ThemeCollection`: themes in insertion order, looked up by name |
| `markedit.json_theme` | `JsonThemeTranslator`, `theme_translator_for`: one theme to and from a JSON object |
| `markedit.style_manager` | `StyleManager`: resolves the style names of a theme to highlighting styles and preview stylesheet paths |
| `markedit.slide_mapping` | `SlideLineMapping`: maps editor lines to reveal.js slides and back |
| `markedit.yaml_header` | `YamlHeaderChecker`: splits YAML front matter from the document body |
| `markedit.template` | `RenderOption`, `HtmlTemplate`, `PresentationTemplate`: wrap rendered HTML in a page template |
| `markedit.converter` | `ConverterOption`, `MarkdownConverter`, `RevealMarkdownConverter`: the converter interface, and a converter that passes markdown through for presentations |

No third-party libraries are needed.

## Installation

```
pip install markedit
```

## Examples

Snippets:

```python
from markedit.snippet import Snippet
from markedit.snippet_collection import SnippetCollection

collection = SnippetCollection()
collection.subscribe(lambda change, snippet: print(change, snippet.trigger))
collection.insert(Snippet(trigger="link", description="Hyperlink", snippet="[]()"))
assert "link" in collection
collection.at(0).description   # 'Hyperlink'
```

Snippets as JSON objects:

```python
import json
from markedit.json_snippet import JsonSnippetTranslator

translator = JsonSnippetTranslator()
obj = translator.to_json_object(Snippet(trigger="gq", snippet="„“", cursor_position=1))
json.dumps(obj)   # keys: trigger, description, snippet, cursor, builtIn
translator.from_json_object({"trigger": "gq"}).cursor_position   # 0
```

YAML front matter:

```python
from markedit.yaml_header import YamlHeaderChecker

checker = YamlHeaderChecker("---\ntitle: Notes\n---\n# Heading\n")
checker.has_header()   # True
checker.header         # '---\ntitle: Notes\n---\n'
checker.body           # '# Heading\n'
checker.body_offset()  # 21
```

Slides (`---` between blank lines starts a horizontal slide, `--` a vertical one):

```python
from markedit.slide_mapping import SlideLineMapping

mapping = SlideLineMapping()
mapping.build("Slide 1\n\n---\n\nSlide 2")
mapping.slide_for_line(5)        # (1, 0)
mapping.line_for_slide((1, 0))   # 4
```

Themes:

```python
from markedit.theme import Theme
from markedit.style_manager import StyleManager

theme = Theme("Dark", "Solarized Dark", "Solarized Dark", "Solarized Dark")
StyleManager().preview_stylesheet_path(theme)  # 'qrc:/css/solarized-dark.css'
```

Page templates:

```python
from markedit.template import HtmlTemplate, RenderOption

page = HtmlTemplate("<head><!--__HTML_HEADER__--></head><body><!--__HTML_CONTENT__--></body>")
page.render("<p>Hi</p>", RenderOption.MATH_SUPPORT)
```

## What it does not do

- It does not convert markdown to HTML. `MarkdownConverter` is only an
  interface; the one converter here, `RevealMarkdownConverter`, returns the
  markdown text unchanged for a reveal.js page to render.
- It ships no page templates. A template is built from a string you supply;
  with an empty string, rendering returns the body as it is.
- It does not read or write files. The JSON translators turn single snippets
  and themes into `dict`s and back; storing collections is up to you.
- It has no editor window, preview, command or spell checker.

## Running the tests

```
pip install -e ".[test]"
pytest
```