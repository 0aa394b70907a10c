#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/css/parse.py
"""Inline style and presentational attribute handling.

Only the handful of CSS properties the renderer understands are evaluated:
``display``, ``margin-top``, ``margin-bottom``, ``padding-left``,
``white-space`` and ``vertical-align``, plus the HTML attributes ``align``
and ``valign``. Unknown properties and unsupported values are ignored, just
like a browser ignores declarations it does not understand.

All functions return a new :class:`ElementStyle`; the input is never mutated.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import Callable, Iterable, Mapping, Union

from textcanvas.constants import (
    CSS_ABSOLUTE_UNIT_DIVISOR,
    CSS_RELATIVE_UNITS,
    CSS_VENDOR_PREFIX,
    WHITE_SPACE_NORMAL_VALUES,
    WHITE_SPACE_PRE_VALUES,
)
from textcanvas.model.element import Display, ElementStyle, HorizontalAlignment, VerticalAlignment, WhiteSpace
from textcanvas.utils.text import split_bounded

logger = logging.getLogger(__name__)

_UNIT_PATTERN = re.compile(r"(-?[0-9.]+)(\w+)")

Attributes = Union[Mapping[str, object], Iterable[tuple[str, object]]]


def get_em(length: str) -> int:
    """Convert a CSS length into lines (vertical) or characters (horizontal).

    Relative units (``em``, ``qem``, ``rem``) are rounded; all other units are
    treated as pixel-like and divided by 8. Values that cannot be parsed
    yield 0.

    Examples
    --------
    >>> get_em("2em")
    2
    >>> get_em("12px")
    2
    >>> get_em("auto")
    0

    """
    match = _UNIT_PATTERN.search(length)
    if match is None:
        return 0

    try:
        value = float(match.group(1))
    except ValueError:
        logger.debug("Ignoring unparsable CSS length %r", length)
        return 0

    if match.group(2) not in CSS_RELATIVE_UNITS:
        value /= CSS_ABSOLUTE_UNIT_DIVISOR
    # round half up
    return math.floor(value + 0.5)


def attr_display(value: str, style: ElementStyle) -> ElementStyle:
    """Apply a ``display`` value; a hidden element is never shown again."""
    if style.display is Display.NONE:
        return style

    if value == "block":
        display = Display.BLOCK
    elif value == "none":
        display = Display.NONE
    else:
        display = Display.INLINE
    return replace(style, display=display)


def attr_margin_top(value: str, style: ElementStyle) -> ElementStyle:
    return replace(style, margin_before=get_em(value))


def attr_margin_bottom(value: str, style: ElementStyle) -> ElementStyle:
    return replace(style, margin_after=get_em(value))


def attr_padding_left(value: str, style: ElementStyle) -> ElementStyle:
    return replace(style, padding_inline=get_em(value))


def attr_white_space(value: str, style: ElementStyle) -> ElementStyle:
    """Apply a ``white-space`` value."""
    if value in WHITE_SPACE_NORMAL_VALUES:
        return replace(style, whitespace=WhiteSpace.NORMAL)
    if value in WHITE_SPACE_PRE_VALUES:
        return replace(style, whitespace=WhiteSpace.PRE)

    logger.debug("Ignoring unsupported white-space value %r on <%s>", value, style.tag)
    return style


def attr_horizontal_align(value: str, style: ElementStyle) -> ElementStyle:
    """Apply the ``align`` attribute."""
    try:
        align = HorizontalAlignment(value.strip().lower())
    except ValueError:
        logger.debug("Ignoring unsupported horizontal alignment %r on <%s>", value, style.tag)
        return style
    return replace(style, align=align)


def attr_vertical_align(value: str, style: ElementStyle) -> ElementStyle:
    """Apply the ``valign`` attribute or the ``vertical-align`` property."""
    try:
        valign = VerticalAlignment(value.strip().lower())
    except ValueError:
        logger.debug("Ignoring unsupported vertical alignment %r on <%s>", value, style.tag)
        return style
    return replace(style, valign=valign)


_STYLE_PROPERTIES: dict[str, Callable[[str, ElementStyle], ElementStyle]] = {
    "display": attr_display,
    "margin-top": attr_margin_top,
    "margin-bottom": attr_margin_bottom,
    "padding-left": attr_padding_left,
    "vertical-align": attr_vertical_align,
    "white-space": attr_white_space,
}


def attr_style(style_attribute: str, style: ElementStyle) -> ElementStyle:
    """Apply the declarations of an inline ``style`` attribute.

    Parameters
    ----------
    style_attribute : str
        Content of the ``style`` attribute, e.g. ``"display: block; margin-top: 2em"``
    style : ElementStyle
        The style to update

    Returns
    -------
    ElementStyle
        The updated style

    """
    for declaration in style_attribute.lower().split(";"):
        if ":" not in declaration:
            continue

        key, value = split_bounded(declaration, ":", 1)
        key = key.strip().replace(CSS_VENDOR_PREFIX, "")
        handler = _STYLE_PROPERTIES.get(key)
        if handler is not None:
            style = handler(value.strip(), style)

    return style


_ATTRIBUTES: dict[str, Callable[[str, ElementStyle], ElementStyle]] = {
    "style": attr_style,
    "align": attr_horizontal_align,
    "valign": attr_vertical_align,
}


def apply_attributes(attributes: Attributes, style: ElementStyle) -> ElementStyle:
    """Apply the presentational attributes of an element to its style.

    Parameters
    ----------
    attributes : Mapping or iterable of (name, value) pairs
        The element's attributes in document order. Multi-valued attributes
        (as produced by BeautifulSoup for e.g. ``class``) are joined with
        spaces.
    style : ElementStyle
        The element's base style

    Returns
    -------
    ElementStyle
        The style with ``style``, ``align`` and ``valign`` applied

    """
    items = attributes.items() if isinstance(attributes, Mapping) else attributes
    for name, value in items:
        handler = _ATTRIBUTES.get(name)
        if handler is None or value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        style = handler(str(value), style)
    return style
