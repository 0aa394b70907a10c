#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/css/profiles.py
"""Standard CSS profiles.

A profile maps tag names to the base :class:`ElementStyle` of the element.
Tags missing from a profile are rendered with
:data:`~textcanvas.model.element.DEFAULT_ELEMENT_STYLE`, i.e. inline.

STRICT_CSS_PROFILE
    Follows the default style sheets of common browsers.
RELAXED_CSS_PROFILE
    Like the strict profile, but indents ``div`` content and surrounds
    ``span`` content with spaces so that the text of adjacent inline elements
    does not run together.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from textcanvas.constants import CssProfileName
from textcanvas.model.element import Display, ElementStyle, WhiteSpace

_HIDDEN_TAGS = ("head", "link", "meta", "script", "title", "style")
_SPACED_BLOCK_TAGS = ("p", "figure", "h1", "h2", "h3", "h4", "h5", "h6")
_BLOCK_TAGS = (
    "li",
    "address",
    "article",
    "aside",
    "div",
    "footer",
    "header",
    "hgroup",
    "layer",
    "main",
    "nav",
    "figcaption",
    "blockquote",
    "table",
    "tr",
)
_PREFORMATTED_TAGS = ("pre", "xmp", "listing", "plaintext")


def _build_strict_profile() -> dict[str, ElementStyle]:
    profile = {"body": ElementStyle(tag="body", display=Display.INLINE, whitespace=WhiteSpace.NORMAL)}
    profile.update({tag: ElementStyle(tag=tag, display=Display.NONE) for tag in _HIDDEN_TAGS})
    profile.update(
        {tag: ElementStyle(tag=tag, display=Display.BLOCK, margin_before=1, margin_after=1) for tag in _SPACED_BLOCK_TAGS}
    )
    profile.update({tag: ElementStyle(tag=tag, display=Display.BLOCK, padding_inline=4) for tag in ("ul", "ol")})
    profile.update({tag: ElementStyle(tag=tag, display=Display.BLOCK) for tag in _BLOCK_TAGS})
    profile["q"] = ElementStyle(tag="q", prefix='"', suffix='"')
    profile.update(
        {tag: ElementStyle(tag=tag, display=Display.BLOCK, whitespace=WhiteSpace.PRE) for tag in _PREFORMATTED_TAGS}
    )
    return profile


def _build_relaxed_profile(strict: Mapping[str, ElementStyle]) -> dict[str, ElementStyle]:
    profile = dict(strict)
    profile["div"] = ElementStyle(tag="div", display=Display.BLOCK, padding_inline=2)
    profile["span"] = ElementStyle(tag="span", prefix=" ", suffix=" ", limit_whitespace_affixes=True)
    return profile


STRICT_CSS_PROFILE: Mapping[str, ElementStyle] = MappingProxyType(_build_strict_profile())
RELAXED_CSS_PROFILE: Mapping[str, ElementStyle] = MappingProxyType(_build_relaxed_profile(STRICT_CSS_PROFILE))

CSS_PROFILES: Mapping[CssProfileName, Mapping[str, ElementStyle]] = MappingProxyType(
    {"strict": STRICT_CSS_PROFILE, "relaxed": RELAXED_CSS_PROFILE}
)
