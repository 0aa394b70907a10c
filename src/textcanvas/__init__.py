"""textcanvas - Layout-preserving conversion of HTML to plain text.

textcanvas renders HTML documents as text while keeping their visual
structure: block elements start on new lines and are separated by their
margins, lists are indented and bulleted, and tables are laid out in aligned
columns. It emulates the part of the CSS box model that makes sense for
monospaced text.

Key Features
------------
- Whitespace collapsing following CSS ``white-space: normal``, with ``pre``
  content preserved verbatim
- Margin collapsing between adjacent block elements
- Nested, bulleted and numbered lists
- Table layout with per-cell horizontal and vertical alignment
- Strict (browser-like) and relaxed CSS profiles plus custom tag styles
- Optional rendering of links, anchors and image captions

Examples
--------
Basic usage:

    >>> from textcanvas import get_text
    >>> print(get_text("<h1>Title</h1><p>First paragraph</p>"))
    Title
    <BLANKLINE>
    First paragraph

Rendering links with the strict profile:

    >>> from textcanvas import ParserConfig, html_to_text
    >>> config = ParserConfig(css_profile="strict", display_links=True)
    >>> html_to_text('<a href="https://example.org">Example</a>', config)
    '[Example](https://example.org)'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/textcanvas/__init__.py
from textcanvas.api import get_text, html_to_text, parse_html, render_tree
from textcanvas.css import CSS_PROFILES, RELAXED_CSS_PROFILE, STRICT_CSS_PROFILE
from textcanvas.exceptions import (
    ConfigError,
    DependencyError,
    InputError,
    InvalidOptionsError,
    ParsingError,
    TextCanvasError,
    ValidationError,
)
from textcanvas.model import Display, ElementStyle, HorizontalAlignment, VerticalAlignment, WhiteSpace
from textcanvas.options import ParserConfig
from textcanvas.renderer import HtmlTextRenderer

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # API
    "get_text",
    "html_to_text",
    "parse_html",
    "render_tree",
    "HtmlTextRenderer",
    # Configuration
    "ParserConfig",
    "CSS_PROFILES",
    "RELAXED_CSS_PROFILE",
    "STRICT_CSS_PROFILE",
    # Styles
    "Display",
    "ElementStyle",
    "HorizontalAlignment",
    "VerticalAlignment",
    "WhiteSpace",
    # Exceptions
    "ConfigError",
    "DependencyError",
    "InputError",
    "InvalidOptionsError",
    "ParsingError",
    "TextCanvasError",
    "ValidationError",
]
