"""The exported API functions for HTML to text conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/textcanvas/api.py
import logging
from typing import Any, Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup
from bs4.element import PageElement

from textcanvas.constants import HTML_PARSER_PACKAGES
from textcanvas.exceptions import DependencyError, InvalidOptionsError, ParsingError
from textcanvas.options import ParserConfig
from textcanvas.renderer import HtmlTextRenderer
from textcanvas.utils.inputs import HtmlSource, read_html_source

logger = logging.getLogger(__name__)


def _resolve_config(config: Optional[ParserConfig], **kwargs: Any) -> ParserConfig:
    """Merge keyword overrides into ``config`` (or the default configuration)."""
    config = config or ParserConfig()
    known = set(ParserConfig.field_names())
    for name, value in kwargs.items():
        if name not in known:
            raise InvalidOptionsError(name, value, message=f"Unknown option: {name}")
    if kwargs:
        config = config.create_updated(**kwargs)
    return config


def parse_html(markup: Union[str, bytes], config: ParserConfig, encoding: Optional[str] = None) -> BeautifulSoup:
    """Parse ``markup`` with the BeautifulSoup tree builder selected in ``config``.

    Parameters
    ----------
    markup : str or bytes
        The HTML markup
    config : ParserConfig
        Configuration naming the tree builder
    encoding : str, optional
        Encoding hint for binary markup

    Returns
    -------
    BeautifulSoup
        The parsed document

    Raises
    ------
    DependencyError
        If the selected tree builder is not installed
    ParsingError
        If the tree builder fails on the input

    """
    logger.debug("Parsing HTML with the %r tree builder", config.html_parser)
    try:
        if isinstance(markup, bytes):
            return BeautifulSoup(markup, config.html_parser, from_encoding=encoding)
        return BeautifulSoup(markup, config.html_parser)
    except FeatureNotFound as e:
        install_name = HTML_PARSER_PACKAGES.get(config.html_parser, (config.html_parser,))[0]
        raise DependencyError(config.html_parser, [install_name], original_error=e) from e
    except (ParserRejectedMarkup, ValueError) as e:
        raise ParsingError(f"Failed to parse HTML: {e}", original_error=e) from e


def render_tree(tree: PageElement, config: Optional[ParserConfig] = None, **kwargs: Any) -> str:
    """Render an already parsed BeautifulSoup tree as text.

    Parameters
    ----------
    tree : PageElement
        A BeautifulSoup document or element
    config : ParserConfig, optional
        Rendering options
    **kwargs : Any
        Individual options overriding fields of ``config``

    Returns
    -------
    str
        The rendered text

    """
    return HtmlTextRenderer(_resolve_config(config, **kwargs)).render(tree)


def html_to_text(
    source: HtmlSource,
    config: Optional[ParserConfig] = None,
    encoding: Optional[str] = None,
    **kwargs: Any,
) -> str:
    """Convert an HTML document to layout-preserving plain text.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        HTML markup, a path to an HTML file or an open file. Strings are
        always treated as markup, use ``pathlib.Path`` for file names.
    config : ParserConfig, optional
        Rendering options. Defaults to ``ParserConfig()``.
    encoding : str, optional
        Encoding of binary input. If omitted, the encoding is detected.
    **kwargs : Any
        Individual options overriding fields of ``config``, e.g.
        ``display_links=True``

    Returns
    -------
    str
        The rendered text without trailing whitespace

    Raises
    ------
    InputError
        If the input cannot be read
    DependencyError
        If the selected HTML parser is not installed
    ParsingError
        If the HTML cannot be parsed
    InvalidOptionsError
        If an option value is invalid

    Examples
    --------
    >>> html_to_text("<ul><li>first</li><li>second</li></ul>")
    '  * first\\n  * second'

    """
    config = _resolve_config(config, **kwargs)
    markup = read_html_source(source, encoding)
    if not markup:
        return ""
    return render_tree(parse_html(markup, config, encoding), config)


def get_text(html: str, config: Optional[ParserConfig] = None, **kwargs: Any) -> str:
    """Convert an HTML string to text; blank input yields an empty string."""
    if not html or not html.strip():
        return ""
    return html_to_text(html, config, **kwargs)


__all__ = [
    "get_text",
    "html_to_text",
    "parse_html",
    "render_tree",
]
