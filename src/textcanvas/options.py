#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/options.py
"""Configuration options for HTML to text rendering.

This module defines :class:`ParserConfig`, the immutable options record
consumed by :class:`~textcanvas.renderer.HtmlTextRenderer`. Field metadata
(``help``, ``choices``, ``cli_name``) drives the command line interface.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from textcanvas.constants import (
    CSS_PROFILE_NAMES,
    DEFAULT_CSS_PROFILE,
    DEFAULT_DEDUPLICATE_CAPTIONS,
    DEFAULT_DISPLAY_ANCHORS,
    DEFAULT_DISPLAY_IMAGES,
    DEFAULT_DISPLAY_LINKS,
    DEFAULT_HTML_PARSER,
    DEFAULT_TABLE_CELL_SEPARATOR,
    HTML_PARSERS,
    CssProfileName,
    HtmlParser,
)
from textcanvas.css.profiles import CSS_PROFILES
from textcanvas.exceptions import InvalidOptionsError
from textcanvas.model.element import ElementStyle

_BOOL_OPTIONS = ("display_links", "display_anchors", "display_images", "deduplicate_captions")
_STYLE_INT_FIELDS = ("margin_before", "margin_after", "padding_inline")
_STYLE_STR_FIELDS = ("prefix", "suffix", "list_bullet")


def _check_style(tag: str, style: ElementStyle) -> None:
    for name in _STYLE_INT_FIELDS:
        value = getattr(style, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidOptionsError(
                "css_overrides",
                value,
                message=f"{name} of <{tag}> must be a non-negative integer, got {value!r}",
            )
    for name in _STYLE_STR_FIELDS:
        value = getattr(style, name)
        if not isinstance(value, str):
            raise InvalidOptionsError(
                "css_overrides", value, message=f"{name} of <{tag}> must be a string, got {value!r}"
            )
    if not isinstance(style.limit_whitespace_affixes, bool):
        raise InvalidOptionsError(
            "css_overrides",
            style.limit_whitespace_affixes,
            message=f"limit_whitespace_affixes of <{tag}> must be a boolean",
        )


class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)  # type: ignore[type-var]


@dataclass(frozen=True)
class ParserConfig(CloneFrozenMixin):
    """Configuration options for rendering HTML as text.

    Parameters
    ----------
    css_profile : {"strict", "relaxed"}, default "relaxed"
        CSS profile providing the base style of every tag. The strict profile
        follows common browser defaults; the relaxed profile additionally
        indents ``div`` content and keeps the text of adjacent ``span``
        elements apart.
    css_overrides : Mapping[str, ElementStyle], optional
        Custom tag styles layered over the selected profile
    display_links : bool, default False
        Render links as ``[text](href)``
    display_anchors : bool, default False
        Render anchors without ``href`` as ``[text](name)``
    display_images : bool, default False
        Render images as ``[alt]`` (or ``[title]`` if no alt text is present)
    deduplicate_captions : bool, default False
        Suppress an image caption that equals the previous one
    table_cell_separator : str, default "  "
        String placed between adjacent table cells
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder used by :func:`textcanvas.html_to_text`

    Examples
    --------
    Render links and use the strict profile:
        >>> config = ParserConfig(css_profile="strict", display_links=True)

    Derive a variant of an existing configuration:
        >>> config.create_updated(display_images=True).display_images
        True

    """

    css_profile: CssProfileName = field(
        default=DEFAULT_CSS_PROFILE,
        metadata={
            "help": "CSS profile providing the base style of every tag",
            "choices": list(CSS_PROFILE_NAMES),
            "cli_name": "profile",
        },
    )
    css_overrides: Mapping[str, ElementStyle] | None = field(
        default=None,
        metadata={"help": "Custom tag styles layered over the profile", "exclude_from_cli": True},
    )
    display_links: bool = field(
        default=DEFAULT_DISPLAY_LINKS,
        metadata={"help": "Render links as [text](href)"},
    )
    display_anchors: bool = field(
        default=DEFAULT_DISPLAY_ANCHORS,
        metadata={"help": "Render anchors without href as [text](name)"},
    )
    display_images: bool = field(
        default=DEFAULT_DISPLAY_IMAGES,
        metadata={"help": "Render images as [alt text]"},
    )
    deduplicate_captions: bool = field(
        default=DEFAULT_DEDUPLICATE_CAPTIONS,
        metadata={"help": "Suppress an image caption that repeats the previous one"},
    )
    table_cell_separator: str = field(
        default=DEFAULT_TABLE_CELL_SEPARATOR,
        metadata={"help": "String placed between adjacent table cells"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup tree builder used to parse the input",
            "choices": list(HTML_PARSERS),
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        InvalidOptionsError
            If the CSS profile or the HTML parser is unknown, a flag is not
            a boolean, or an override is not a well-typed ``ElementStyle``.

        """
        if self.css_profile not in CSS_PROFILES:
            raise InvalidOptionsError("css_profile", self.css_profile, choices=CSS_PROFILE_NAMES)
        if self.html_parser not in HTML_PARSERS:
            raise InvalidOptionsError("html_parser", self.html_parser, choices=HTML_PARSERS)
        if not isinstance(self.table_cell_separator, str):
            raise InvalidOptionsError(
                "table_cell_separator",
                self.table_cell_separator,
                message="table_cell_separator must be a string",
            )
        for name in _BOOL_OPTIONS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidOptionsError(name, value, message=f"{name} must be a boolean, got {value!r}")

        if self.css_overrides is not None:
            for tag, style in self.css_overrides.items():
                if not isinstance(style, ElementStyle):
                    raise InvalidOptionsError(
                        "css_overrides",
                        style,
                        message=f"Override for <{tag}> must be an ElementStyle, got {type(style).__name__}",
                    )
                _check_style(tag, style)
            # private read-only copy
            object.__setattr__(self, "css_overrides", MappingProxyType(dict(self.css_overrides)))

    @property
    def css(self) -> Mapping[str, ElementStyle]:
        """The effective tag to style mapping (profile plus overrides)."""
        profile = CSS_PROFILES[self.css_profile]
        if not self.css_overrides:
            return profile
        return MappingProxyType({**profile, **self.css_overrides})

    @classmethod
    def field_names(cls) -> list[str]:
        """Names of all options, in declaration order."""
        return [f.name for f in fields(cls)]
